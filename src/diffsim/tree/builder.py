"""TreeBuilder: converts a JSON value, or JSON text, into a typed TreeNode tree.

Uses recursive dispatch over dicts, lists and scalars.  Each node records its
path segments from the root so the structural diff never rebuilds paths by
string surgery.

Serialized input (``str`` or ``bytes``) is parsed with the standard ``json``
module first; a syntax error surfaces as ``ParseError`` and no tree is built.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any

from diffsim.errors import ParseError
from diffsim.tree.nodes import NodeType, TreeNode

__all__ = ["JsonValue", "TreeBuilder", "parse_json"]

JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

_STRING_TOKEN = r'"(?:[^"\\]|\\.)*"'


class _TokenRejected(Exception):
    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"{reason} {token}")
        self.token = token
        self.reason = reason


def _reject_constant(name: str) -> Any:
    raise _TokenRejected(name, "non-standard constant")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if not math.isfinite(value):
        raise _TokenRejected(literal, "number out of range")
    return value


def _locate_token(text: str | bytes | bytearray, token: str) -> tuple[int, int]:
    """Return the 1-based (line, column) of the first ``token`` outside a string."""
    doc = text if isinstance(text, str) else bytes(text).decode("utf-8", "replace")
    pattern = re.compile(f"{_STRING_TOKEN}|({re.escape(token)})")
    for match in pattern.finditer(doc):
        if match.group(1) is not None:
            pos = match.start(1)
            return doc.count("\n", 0, pos) + 1, pos - doc.rfind("\n", 0, pos)
    return 1, 1


def parse_json(text: str | bytes | bytearray, argument: str = "a") -> Any:
    """Parse JSON text, converting decode failures into ``ParseError``.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not JSON and are rejected, as
    are numbers too large for a finite float.

    Args:
        text:     Serialized JSON.
        argument: Name of the argument being parsed, reported in the error.

    Returns:
        The parsed Python value.

    Raises:
        ParseError: If ``text`` is not well-formed JSON.
    """
    try:
        return json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_finite_float
        )
    except json.JSONDecodeError as exc:
        raise ParseError(argument, exc.msg, exc.lineno, exc.colno) from exc
    except _TokenRejected as exc:
        lineno, colno = _locate_token(text, exc.token)
        raise ParseError(argument, str(exc), lineno, colno) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(argument, f"undecodable bytes ({exc.reason})", 1, 1) from exc


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a typed TreeNode tree.

    The dispatch order matters: bool MUST be checked before int because bool
    is a subclass of int in Python (``isinstance(True, int)`` is True).
    Tuples are accepted as arrays.

    Example::

        builder = TreeBuilder()
        tree = builder.build({"user": {"name": "John"}})
        # tree: OBJECT -> "user": OBJECT -> "name": SCALAR("John")
        tree.children["user"].children["name"].segments  # ("user", "name")
    """

    def build(self, value: Any, segments: tuple[str | int, ...] = ()) -> TreeNode:
        """Convert a JSON value to a TreeNode tree.

        Args:
            value:    dict, list, tuple, str, int, float, bool or None.
            segments: Path segments to this node.  Defaults to the root.

        Returns:
            A TreeNode rooted at the appropriate node type.

        Raises:
            TypeError: If ``value`` or anything nested in it is not a JSON
                value (NaN and infinite floats included) or has a non-string key.
        """
        if isinstance(value, bool) or value is None:
            return TreeNode(node_type=NodeType.SCALAR, segments=segments, value=value)

        if isinstance(value, dict):
            return self._build_object(value, segments)

        if isinstance(value, (list, tuple)):
            return self._build_array(value, segments)

        if isinstance(value, float) and not math.isfinite(value):
            raise TypeError(
                f"Non-finite float is not a JSON number at {list(segments)!r}: "
                f"{value!r}"
            )

        if isinstance(value, (str, int, float)):
            return TreeNode(node_type=NodeType.SCALAR, segments=segments, value=value)

        raise TypeError(
            f"Unsupported JSON value type at {list(segments)!r}: {type(value)!r}"
        )

    def build_from(self, value: Any, argument: str = "a") -> TreeNode:
        """Build a tree from a parsed value or from JSON text.

        ``str``, ``bytes`` and ``bytearray`` inputs are always treated as
        serialized JSON and parsed first.

        Raises:
            ParseError: If serialized input is malformed.
            TypeError:  If the value is not a JSON value.
        """
        if isinstance(value, (str, bytes, bytearray)):
            value = parse_json(value, argument)
        return self.build(value)

    def _build_object(
        self, obj: dict[Any, Any], segments: tuple[str | int, ...]
    ) -> TreeNode:
        node = TreeNode(node_type=NodeType.OBJECT, segments=segments, value=obj)
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"JSON object keys must be str, got {type(key)!r} "
                    f"at {list(segments)!r}"
                )
            node.children[key] = self.build(val, (*segments, key))
        return node

    def _build_array(
        self, arr: list[Any] | tuple[Any, ...], segments: tuple[str | int, ...]
    ) -> TreeNode:
        node = TreeNode(node_type=NodeType.ARRAY, segments=segments, value=arr)
        for idx, item in enumerate(arr):
            node.children[idx] = self.build(item, (*segments, idx))
        return node
