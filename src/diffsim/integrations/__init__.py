"""Integrations subpackage for diffsim.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_no_structural_diff`` and ``assert_no_line_diff``
fixtures.  The plugin module is loaded by pytest itself and is not imported
here, so importing diffsim never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
