"""StructuralDiffer: recursive path-addressed diff of two typed JSON trees.

Architecture:
- Kind mismatch (object vs array, string vs number, null vs object, ...):
  one CHANGED entry at the current path, no recursion.
- OBJECT/OBJECT and ARRAY/ARRAY: walk the union of keys (indices for
  arrays).  Keys of the first tree come first, in source order, then keys
  only the second tree has, in source order.  This never depends on set
  iteration order, so identical inputs always give identical change lists.
- SCALAR/SCALAR: CHANGED when the values differ under strict JSON equality
  (``1 == 1.0``, but ``True != 1`` because their kinds differ).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from diffsim.config import DiffConfig
from diffsim.result import ChangeType, TreeChange
from diffsim.tree.nodes import NodeType
from diffsim.tree.paths import format_path

if TYPE_CHECKING:
    from diffsim.tree.nodes import TreeNode

__all__ = ["StructuralDiffer"]


class StructuralDiffer:
    """Recursive structural diff over ``TreeNode`` trees.

    Example::

        from diffsim.tree import TreeBuilder

        builder = TreeBuilder()
        differ = StructuralDiffer()
        changes = differ.diff(builder.build({"a": {"b": 1}}),
                              builder.build({"a": {"b": 2}}))
        # [TreeChange(path="a.b", type=CHANGED, from_value=1, to_value=2)]
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config = config if config is not None else DiffConfig()

    def diff(self, node_a: TreeNode, node_b: TreeNode) -> list[TreeChange]:
        """Return every divergence between two trees, in traversal order."""
        changes: list[TreeChange] = []
        self._diff_nodes(node_a, node_b, changes)
        return changes

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _diff_nodes(
        self, node_a: TreeNode, node_b: TreeNode, changes: list[TreeChange]
    ) -> None:
        if node_a.kind != node_b.kind:
            changes.append(self._changed(node_a, node_b))
            return

        if node_a.node_type == NodeType.SCALAR:
            # Same kind, so == is strict JSON equality here.
            if node_a.value != node_b.value:
                changes.append(self._changed(node_a, node_b))
            return

        # OBJECT/OBJECT or ARRAY/ARRAY
        self._diff_children(node_a, node_b, changes)

    def _diff_children(
        self, node_a: TreeNode, node_b: TreeNode, changes: list[TreeChange]
    ) -> None:
        children_b = node_b.children
        for key, child_a in node_a.children.items():
            if key not in children_b:
                changes.append(
                    self._entry(ChangeType.REMOVED, child_a, value=child_a.value)
                )
            else:
                self._diff_nodes(child_a, children_b[key], changes)

        children_a = node_a.children
        for key, child_b in children_b.items():
            if key not in children_a:
                changes.append(
                    self._entry(ChangeType.ADDED, child_b, value=child_b.value)
                )

    # ------------------------------------------------------------------
    # Change construction
    # ------------------------------------------------------------------

    def _changed(self, node_a: TreeNode, node_b: TreeNode) -> TreeChange:
        return self._entry(
            ChangeType.CHANGED,
            node_a,
            from_value=node_a.value,
            to_value=node_b.value,
        )

    def _entry(
        self,
        change_type: ChangeType,
        node: TreeNode,
        value: Any = None,
        from_value: Any = None,
        to_value: Any = None,
    ) -> TreeChange:
        path = format_path(
            node.segments,
            separator=self._config.path_separator,
            root=self._config.root_path,
        )
        return TreeChange(
            path=path,
            type=change_type,
            segments=node.segments,
            value=value,
            from_value=from_value,
            to_value=to_value,
        )
