"""Public API functions for diffsim.

This module provides the user-facing functions: similarity, line_diff,
structural_diff and is_identical.  Each call creates a fresh ``Differ`` so no
state is shared between calls.
"""

from __future__ import annotations

from typing import Any

from diffsim.config import DiffConfig
from diffsim.differ import Differ
from diffsim.result import LineDiffResult, TreeChange

__all__ = ["is_identical", "line_diff", "similarity", "structural_diff"]


def similarity(a: str, b: str, config: DiffConfig | None = None) -> float:
    """Return the Levenshtein-based similarity of two strings.

    Args:
        a:      First string.
        b:      Second string.
        config: Comparison settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A float in [0.0, 1.0], rounded to ``config.precision`` places.  1.0
        iff the strings are equal (two empty strings included); 0.0 when
        exactly one is empty.

    Raises:
        TypeError: If either argument is not a ``str``.
    """
    return Differ(config=config).similarity(a, b)


def line_diff(
    old_text: str,
    new_text: str,
    config: DiffConfig | None = None,
) -> LineDiffResult:
    """Return the LCS-based line edit script between two texts.

    Args:
        old_text: Original text.
        new_text: Updated text.
        config:   Comparison settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``LineDiffResult`` with the ordered EQUAL/ADDED/REMOVED operations
        and their ``DiffStats``.

    Raises:
        TypeError: If either argument is not a ``str``.
    """
    return Differ(config=config).line_diff(old_text, new_text)


def structural_diff(
    a: Any,
    b: Any,
    config: DiffConfig | None = None,
) -> list[TreeChange]:
    """Return the path-addressed changes between two JSON trees.

    Args:
        a:      First tree: a parsed JSON value, or JSON text (``str``/``bytes``).
        b:      Second tree, same forms as ``a``.
        config: Comparison settings.  Defaults to ``DiffConfig()`` when None.

    Returns:
        ``TreeChange`` entries in deterministic traversal order; empty when
        the trees are equal.

    Raises:
        ParseError: If a serialized input is not valid JSON.
        TypeError:  If an input contains a non-JSON value.
    """
    return Differ(config=config).structural_diff(a, b)


def is_identical(a: Any, b: Any, config: DiffConfig | None = None) -> bool:
    """Return True if ``structural_diff(a, b, config)`` finds no changes."""
    return not structural_diff(a, b, config=config)
