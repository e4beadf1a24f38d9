"""Result value types returned by the comparison engines.

Every type is a frozen, slotted dataclass created fresh per call.  ``to_dict``
renders the plain mapping shape callers serialize (``type``/``value``/``line``
for edit operations, ``path``/``type``/``value``/``from``/``to`` for tree
changes).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "ChangeType",
    "DiffStats",
    "EditKind",
    "EditOperation",
    "LineDiffResult",
    "TreeChange",
]


class EditKind(StrEnum):
    """Kind of one step in a line edit script.

    - EQUAL   -> "equal"   : line present in both texts
    - ADDED   -> "added"   : line only in the new text
    - REMOVED -> "removed" : line only in the old text
    """

    EQUAL = auto()
    ADDED = auto()
    REMOVED = auto()


class ChangeType(StrEnum):
    """Kind of divergence between two trees at one path."""

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()


@dataclass(frozen=True, slots=True)
class EditOperation:
    """One step of a line edit script.

    Attributes:
        kind:  EQUAL, ADDED or REMOVED.
        value: The line text.
        line:  1-based line number the value came from: the new text for
               ADDED, the old text for REMOVED and EQUAL.
    """

    kind: EditKind
    value: str
    line: int | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": str(self.kind), "value": self.value}
        if self.line is not None:
            out["line"] = self.line
        return out


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Tallies of a line edit script.

    ``unchanged + removed`` is the old line count and
    ``total == unchanged + removed + added``.
    """

    added: int
    removed: int
    unchanged: int
    total: int

    def to_dict(self) -> dict[str, int]:
        return {
            "added": self.added,
            "removed": self.removed,
            "unchanged": self.unchanged,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class LineDiffResult:
    """Full result of a line diff.

    Attributes:
        changes: The complete edit script in left-to-right order, EQUAL steps
            included.  Keeping EQUAL/ADDED values reproduces the new lines;
            keeping EQUAL/REMOVED values reproduces the old lines.
        stats:   Counts derived from ``changes``.
    """

    changes: tuple[EditOperation, ...]
    stats: DiffStats

    @property
    def edits(self) -> tuple[EditOperation, ...]:
        """Only the ADDED and REMOVED steps, in script order."""
        return tuple(op for op in self.changes if op.kind != EditKind.EQUAL)

    @property
    def has_changes(self) -> bool:
        return self.stats.added > 0 or self.stats.removed > 0

    def old_lines(self) -> list[str]:
        return [op.value for op in self.changes if op.kind != EditKind.ADDED]

    def new_lines(self) -> list[str]:
        return [op.value for op in self.changes if op.kind != EditKind.REMOVED]

    def to_dict(self) -> dict[str, Any]:
        return {
            "changes": [op.to_dict() for op in self.changes],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class TreeChange:
    """One divergence between two trees.

    Attributes:
        path:       Rendered location, e.g. ``"a.b"``, ``"items.0"`` or ``"$"``.
        type:       ADDED, REMOVED or CHANGED.
        segments:   Raw path segments from the root (``str`` keys, ``int``
                    indices).  Empty for the root.
        value:      The added or removed value (ADDED / REMOVED only).
        from_value: The value in the first tree (CHANGED only).
        to_value:   The value in the second tree (CHANGED only).
    """

    path: str
    type: ChangeType
    segments: tuple[str | int, ...] = ()
    value: Any = None
    from_value: Any = None
    to_value: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"path": self.path, "type": str(self.type)}
        if self.type == ChangeType.CHANGED:
            out["from"] = self.from_value
            out["to"] = self.to_value
        else:
            out["value"] = self.value
        return out
