"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in the JSON tree
- NodeType: StrEnum of the three node kinds (OBJECT, ARRAY, SCALAR)
- TreeBuilder: converts a JSON value or JSON text into a typed TreeNode tree
- format_path / split_path / resolve_path: dot-addressed path helpers
"""

from diffsim.tree.builder import TreeBuilder, parse_json
from diffsim.tree.nodes import NodeType, TreeNode
from diffsim.tree.paths import format_path, resolve_path, split_path

__all__ = [
    "NodeType",
    "TreeBuilder",
    "TreeNode",
    "format_path",
    "parse_json",
    "resolve_path",
    "split_path",
]
