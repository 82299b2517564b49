"""N-ary tree nodes for NodeTree.

Children of a NaryTree are keyed by the identifier carried in their own
value and kept in insertion order.
"""

from typing import Any

from ..exceptions import ChildNotFoundError, DuplicateChildError, InvalidChildTypeError
from .generic import GenericTree


class NaryTree(GenericTree):
    """A node with any number of children.

    Example:
        >>> menu = NaryTree(SimpleValue("menu", "Menu"))
        >>> _ = menu.insert(NaryTree(SimpleValue("file", "File")))
        >>> menu.get_child("file").get_value().get_value()
        'File'
    """

    def insert(self, child: 'NaryTree') -> 'NaryTree':
        """Append a child under its value identifier.

        Raises:
            InvalidChildTypeError: If child is not a NaryTree
            DuplicateChildError: If a child with the same identifier exists
        """
        if not isinstance(child, NaryTree):
            raise InvalidChildTypeError(NaryTree, child)

        node_id = child.get_value().get_id()
        if node_id in self._children:
            self._trace("insert refused, %r already present", node_id)
            raise DuplicateChildError(node_id)

        self._children[node_id] = child
        self._trace("child %r inserted", node_id)
        return self

    def delete(self, node_id: Any) -> 'NaryTree':
        """Remove the child with this identifier.

        Raises:
            ChildNotFoundError: If no child has this identifier
        """
        if node_id not in self._children:
            raise ChildNotFoundError(node_id)

        del self._children[node_id]
        self._trace("child %r deleted", node_id)
        return self

    def is_leaf(self) -> bool:
        return not self._children

    def is_node(self) -> bool:
        return bool(self._children)
