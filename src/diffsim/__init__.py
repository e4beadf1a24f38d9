"""diffsim - line diff, structural JSON diff and edit-distance similarity."""

from __future__ import annotations

import logging

from diffsim.api import is_identical, line_diff, similarity, structural_diff
from diffsim.config import DiffConfig
from diffsim.differ import Differ
from diffsim.errors import DiffError, ParseError
from diffsim.result import (
    ChangeType,
    DiffStats,
    EditKind,
    EditOperation,
    LineDiffResult,
    TreeChange,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChangeType",
    "DiffConfig",
    "DiffError",
    "DiffStats",
    "Differ",
    "EditKind",
    "EditOperation",
    "LineDiffResult",
    "ParseError",
    "TreeChange",
    "is_identical",
    "line_diff",
    "similarity",
    "structural_diff",
]
