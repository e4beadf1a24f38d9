"""DiffConfig: immutable settings shared by the three comparison engines.

The defaults reproduce the canonical behaviour (split on ``"\\n"``, four
decimal places for similarity scores, dot-addressed tree paths rooted at
``"$"``).  Every field is validated in ``__post_init__`` so a bad config fails
at construction time, before any comparison runs.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiffConfig"]

_MAX_PRECISION = 15


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for ``Differ`` and the public API functions.

    Attributes:
        line_separator: String the line diff splits both texts on.  Must be
            non-empty.  Default ``"\\n"``.
        precision: Number of decimal places similarity scores are rounded to.
            Must be in [0, 15].  Default 4.
        path_separator: Single character joining tree path segments.  The
            backslash is reserved for escaping.  Default ``"."``.
        root_path: Path reported for a change at the tree root.  Default ``"$"``.
    """

    line_separator: str = "\n"
    precision: int = 4
    path_separator: str = "."
    root_path: str = "$"

    def __post_init__(self) -> None:
        if not self.line_separator:
            msg = "line_separator must be a non-empty string"
            raise ValueError(msg)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            msg = f"precision must be an int, got {type(self.precision).__name__}"
            raise ValueError(msg)
        if not 0 <= self.precision <= _MAX_PRECISION:
            msg = f"precision must be in [0, {_MAX_PRECISION}], got {self.precision}"
            raise ValueError(msg)
        if len(self.path_separator) != 1 or self.path_separator == "\\":
            msg = (
                "path_separator must be a single character other than '\\', "
                f"got {self.path_separator!r}"
            )
            raise ValueError(msg)
        if not self.root_path:
            msg = "root_path must be a non-empty string"
            raise ValueError(msg)
