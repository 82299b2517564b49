"""High-level API for NodeTree.

Simple functional wrappers around the bundled visitors for the common
whole-tree questions: render it, search it, size it, list its leaves.
"""

from typing import Any, List, Optional

from .core.generic import GenericTree
from .visitors import CountVisitor, DumpVisitor, LeafCollector, SearchVisitor


def dump_tree(root: GenericTree, prefix: str = "> ") -> str:
    """Render a tree as indented text.

    Example:
        >>> print(dump_tree(root))
        > root
        > > child
    """
    return root.accept(DumpVisitor(prefix))


def find_node(root: GenericTree, node_id: Any) -> Optional[GenericTree]:
    """Find the first node (pre-order) whose value carries ``node_id``.

    Args:
        root: Node to start from (it is a candidate itself)
        node_id: Identifier to look for

    Returns:
        The matching node, or None
    """
    return root.accept(SearchVisitor(node_id))


def find_nodes(root: GenericTree, node_id: Any) -> List[GenericTree]:
    """Find every node whose value carries ``node_id``, in pre-order."""
    matches: List[GenericTree] = []
    root.accept(SearchVisitor(node_id), matches)
    return matches


def count_nodes(root: GenericTree) -> int:
    """Count nodes in the subtree rooted at ``root``, root included."""
    return root.accept(CountVisitor())


def get_leaf_nodes(root: GenericTree) -> List[GenericTree]:
    """Return the leaves of the subtree in pre-order."""
    return root.accept(LeafCollector(), [])
