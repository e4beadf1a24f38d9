"""Exception types raised by diffsim.

Type problems (a non-string passed to ``similarity``, a ``set`` inside a
tree) raise the builtin ``TypeError``; only failures specific to this library
get their own classes.
"""

from __future__ import annotations

__all__ = ["DiffError", "ParseError"]


class DiffError(Exception):
    """Base class for diffsim errors."""


class ParseError(DiffError, ValueError):
    """Serialized tree text passed to ``structural_diff`` is not valid JSON.

    Attributes:
        argument: Which input failed to parse (``"a"`` or ``"b"``).
        lineno:   1-based line of the syntax error.
        colno:    1-based column of the syntax error.
    """

    def __init__(self, argument: str, message: str, lineno: int, colno: int) -> None:
        super().__init__(
            f"argument {argument!r} is not valid JSON: {message} "
            f"(line {lineno}, column {colno})"
        )
        self.argument = argument
        self.lineno = lineno
        self.colno = colno
