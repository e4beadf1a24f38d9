"""Dot-addressed tree paths.

Segments are joined with a single separator (default ``"."``); array indices
are rendered as plain integers (``items.0.name``).  A backslash escapes a
literal separator or backslash inside an object key, and a lone first
segment equal to the root marker, so ``split_path(format_path(s))`` always
gives back the segments as strings.

    format_path(("a", "b"))        -> "a.b"
    format_path(("k.1", 0))        -> "k\\.1.0"
    format_path(())                -> "$"
"""

from __future__ import annotations

from typing import Any

__all__ = ["format_path", "resolve_path", "split_path"]

_ESCAPE = "\\"


def _escape(segment: str, separator: str) -> str:
    return segment.replace(_ESCAPE, _ESCAPE * 2).replace(separator, _ESCAPE + separator)


def format_path(
    segments: tuple[str | int, ...],
    separator: str = ".",
    root: str = "$",
) -> str:
    """Render path segments as a single string.

    Args:
        segments:  Object keys (``str``) and array indices (``int``) from the root.
        separator: Segment separator.
        root:      Rendering of the empty path.

    Returns:
        The rendered path; ``root`` when ``segments`` is empty.
    """
    if not segments:
        return root
    parts = [
        str(seg) if isinstance(seg, int) else _escape(seg, separator)
        for seg in segments
    ]
    if parts[0] == root:
        parts[0] = _ESCAPE + parts[0]
    return separator.join(parts)


def split_path(path: str, separator: str = ".", root: str = "$") -> tuple[str, ...]:
    """Split a rendered path back into its segments.

    Inverse of ``format_path`` up to segment type: every segment comes back as
    ``str``.  Use ``resolve_path`` to walk a value where indices matter.

    Raises:
        ValueError: If the path ends with a dangling escape character.
    """
    if path == root:
        return ()
    segments: list[str] = []
    current: list[str] = []
    chars = iter(path)
    for ch in chars:
        if ch == _ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                msg = f"dangling escape at end of path {path!r}"
                raise ValueError(msg)
            current.append(nxt)
        elif ch == separator:
            segments.append("".join(current))
            current = []
        else:
            current.append(ch)
    segments.append("".join(current))
    return tuple(segments)


def resolve_path(value: Any, path: str, separator: str = ".", root: str = "$") -> Any:
    """Return the part of a parsed JSON value a rendered path points at.

    Segments address list elements by their integer text.

    Raises:
        KeyError:   If an object key is missing.
        IndexError: If an array index is out of range or not an integer.
        TypeError:  If the path descends into a scalar.
    """
    current = value
    for segment in split_path(path, separator, root):
        if isinstance(current, dict):
            current = current[segment]
        elif isinstance(current, (list, tuple)):
            if not (segment.isascii() and segment.isdigit()):
                msg = f"array index {segment!r} in path {path!r} is not an integer"
                raise IndexError(msg)
            current = current[int(segment)]
        else:
            msg = f"path {path!r} descends into a {type(current).__name__}"
            raise TypeError(msg)
    return current
