"""Assertion fixtures for tests that compare JSON payloads or text output.

Registered under the ``pytest11`` entry point in pyproject.toml, so any test
session with diffsim installed gets ``assert_no_structural_diff`` and
``assert_no_line_diff`` without touching conftest.py.  Failures list every
change rather than just a count.
"""

from __future__ import annotations

from typing import Any

import pytest

from diffsim import ChangeType, DiffConfig, EditKind, line_diff, structural_diff

_MARKERS = {EditKind.ADDED: "+", EditKind.REMOVED: "-"}


@pytest.fixture(scope="session")
def assert_no_structural_diff() -> Any:
    """Fixture returning a callable that asserts two JSON trees are equal.

    Usage in tests::

        def test_payload(assert_no_structural_diff):
            assert_no_structural_diff(response.json(), {"id": 1, "tags": []})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` listing every change when the trees differ.
    """

    def _assert(actual: Any, expected: Any, config: DiffConfig | None = None) -> None:
        changes = structural_diff(expected, actual, config=config)
        if changes:
            lines = [f"JSON trees differ: {len(changes)} change(s)"]
            for change in changes:
                if change.type == ChangeType.CHANGED:
                    lines.append(
                        f"  {change.path}: changed {change.from_value!r} -> "
                        f"{change.to_value!r}"
                    )
                else:
                    lines.append(f"  {change.path}: {change.type} {change.value!r}")
            raise AssertionError("\n".join(lines))

    return _assert


@pytest.fixture(scope="session")
def assert_no_line_diff() -> Any:
    """Fixture returning a callable that asserts two texts have the same lines.

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` with the added/removed lines and the
        diff stats when the texts differ.
    """

    def _assert(actual: str, expected: str, config: DiffConfig | None = None) -> None:
        result = line_diff(expected, actual, config=config)
        if result.has_changes:
            stats = result.stats
            lines = [
                f"texts differ: added={stats.added} removed={stats.removed} "
                f"unchanged={stats.unchanged}"
            ]
            lines.extend(
                f"  {_MARKERS[op.kind]}{op.line}: {op.value}" for op in result.edits
            )
            raise AssertionError("\n".join(lines))

    return _assert
