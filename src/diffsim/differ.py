"""Differ: orchestrator that wires DiffConfig, TreeBuilder and the engines.

This is the layer between the raw algorithms and the public API.  It
validates argument types before any table is allocated, splits text into
lines, parses serialized trees, and logs table sizes at DEBUG level.

A ``Differ`` holds no per-call state: alignment tables are locals of the
engine functions and are discarded when the call returns.
"""

from __future__ import annotations

import logging
from typing import Any

from diffsim.algorithm.lcs import diff_lines
from diffsim.algorithm.levenshtein import similarity_ratio
from diffsim.algorithm.structural import StructuralDiffer
from diffsim.config import DiffConfig
from diffsim.result import LineDiffResult, TreeChange
from diffsim.tree.builder import TreeBuilder

__all__ = ["Differ"]

logger = logging.getLogger(__name__)


def _require_str(name: str, value: Any) -> None:
    if not isinstance(value, str):
        msg = f"{name} must be str, got {type(value).__name__}"
        raise TypeError(msg)


class Differ:
    """Entry point for the three comparisons under one configuration.

    Example::

        from diffsim.differ import Differ

        differ = Differ()
        differ.similarity("kitten", "sitting")          # 0.5714
        differ.line_diff("a\\nb", "a\\nb\\nc").stats.added  # 1
        differ.structural_diff({"a": 1}, {"a": 1, "b": 2})[0].path  # "b"
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        """Initialise the differ.

        Args:
            config: Comparison settings.  Defaults to ``DiffConfig()`` when None.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._builder = TreeBuilder()
        self._structural = StructuralDiffer(config=self._config)

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def similarity(self, a: str, b: str) -> float:
        """Edit-distance similarity of two strings in [0, 1].

        Raises:
            TypeError: If either argument is not a ``str``.
        """
        _require_str("a", a)
        _require_str("b", b)
        logger.debug("similarity: %d x %d characters", len(a), len(b))
        return similarity_ratio(a, b, precision=self._config.precision)

    def line_diff(self, old_text: str, new_text: str) -> LineDiffResult:
        """LCS-based line diff of two texts.

        Raises:
            TypeError: If either argument is not a ``str``.
        """
        _require_str("old_text", old_text)
        _require_str("new_text", new_text)
        separator = self._config.line_separator
        old_lines = old_text.split(separator)
        new_lines = new_text.split(separator)
        logger.debug(
            "line_diff: alignment table %d x %d",
            len(old_lines) + 1,
            len(new_lines) + 1,
        )
        result = diff_lines(old_lines, new_lines)
        logger.debug(
            "line_diff: %d added, %d removed, %d unchanged",
            result.stats.added,
            result.stats.removed,
            result.stats.unchanged,
        )
        return result

    def structural_diff(self, a: Any, b: Any) -> list[TreeChange]:
        """Path-addressed diff of two JSON trees.

        ``a`` and ``b`` may be parsed values or JSON text; both are converted
        to trees before the walk starts, so a bad second argument fails the
        call without any partial result.

        Raises:
            ParseError: If serialized input is not valid JSON.
            TypeError:  If a value is not a JSON value.
        """
        tree_a = self._builder.build_from(a, argument="a")
        tree_b = self._builder.build_from(b, argument="b")
        changes = self._structural.diff(tree_a, tree_b)
        logger.debug("structural_diff: %d changes", len(changes))
        return changes
