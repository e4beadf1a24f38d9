"""TreeNode dataclass and NodeType StrEnum for the typed JSON tree.

A JSON value is a tagged variant: an OBJECT (string-keyed mapping), an ARRAY
(positional list) or a SCALAR (string, number, boolean, null).  The structural
diff dispatches on ``NodeType`` instead of inspecting Python types, so the
bool-vs-int and dict-vs-list subtleties live in ``TreeBuilder`` alone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = ["NodeType", "TreeNode"]


class NodeType(StrEnum):
    """The three JSON node kinds.

    - OBJECT -> "object" : JSON object {}
    - ARRAY  -> "array"  : JSON array []
    - SCALAR -> "scalar" : string, number, boolean or null
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()


@dataclass(slots=True)
class TreeNode:
    """A node in the typed JSON tree.

    Attributes:
        node_type: OBJECT, ARRAY or SCALAR.
        segments:  Path segments from the root (``str`` object keys, ``int``
                   array indices).  The root has ``()``.
        value:     The original Python value this node was built from.
        children:  Child nodes keyed by object key or array index, in source
                   order.  Always empty for SCALAR nodes.
    """

    node_type: NodeType
    segments: tuple[str | int, ...]
    value: Any = None
    children: dict[str | int, TreeNode] = field(default_factory=dict)

    @property
    def kind(self) -> str:
        """JSON kind name: object, array, string, number, boolean or null."""
        if self.node_type != NodeType.SCALAR:
            return str(self.node_type)
        # bool before int: bool subclasses int
        if isinstance(self.value, bool):
            return "boolean"
        if self.value is None:
            return "null"
        if isinstance(self.value, str):
            return "string"
        return "number"

    @property
    def is_container(self) -> bool:
        return self.node_type != NodeType.SCALAR
