"""Ready-made visitors for NodeTree.

Visitors decide the traversal order; nodes only forward ``accept``.
All visitors here walk depth-first, parent before children, and reach
the children through an independent cursor so a walk never disturbs the
node's built-in cursor.
"""

from typing import Any, List, Optional


class DumpVisitor:
    """Render a tree as indented text.

    Each node is one line prefixed by one ``"> "`` per level, the root
    included:

        > root
        > > left
        > > > leaf
        > > right
    """

    def __init__(self, prefix: str = "> "):
        self.prefix = prefix

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> str:
        """Dump ``node`` and its subtree.

        Args:
            node: Node to render
            handle: Optional list receiving each rendered line
            context: Starting depth (defaults to 0)

        Returns:
            Rendered text, one line per node
        """
        depth = context or 0
        lines = [self.prefix * (depth + 1) + str(node)]

        # Only the outermost call fills the handle
        for child in node.cursor():
            lines.append(child.accept(self, None, depth + 1))

        text = "\n".join(lines)
        if isinstance(handle, list):
            handle.extend(text.split("\n"))
        return text


class SearchVisitor:
    """Find nodes whose value carries a given identifier."""

    def __init__(self, node_id: Any):
        self.node_id = node_id

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> Optional[Any]:
        """Return the first matching node in pre-order, or None.

        When ``handle`` is a list, every match is appended to it.
        """
        found = None
        value = node.get_value()

        if value is not None and value.get_id() == self.node_id:
            found = node
            if isinstance(handle, list):
                handle.append(node)
            else:
                return found

        for child in node.cursor():
            match = child.accept(self, handle, context)
            if found is None and match is not None:
                found = match
                if not isinstance(handle, list):
                    break

        return found


class CountVisitor:
    """Count every node of a subtree, the starting node included."""

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> int:
        total = 1
        for child in node.cursor():
            total += child.accept(self, handle, context)
        return total


class LeafCollector:
    """Collect the leaves of a subtree into ``handle``."""

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> List[Any]:
        leaves = handle if handle is not None else []

        if node.is_leaf():
            leaves.append(node)
        else:
            for child in node.cursor():
                child.accept(self, leaves, context)

        return leaves
