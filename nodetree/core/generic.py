"""GenericTree abstraction for NodeTree.

GenericTree owns everything that does not depend on the shape of a tree:
the node value, the child mapping, cursor iteration and visitor dispatch.
What "insert" and "leaf" mean is left to the specializations (BinaryTree,
NaryTree).
"""

import logging
import warnings
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from ..config import TreeConfig, get_default_config
from ..exceptions import ChildNotFoundError
from ..visitor import dispatch
from .cursor import ChildCursor, ChildMap
from .value import NodeValue, make_value

logger = logging.getLogger(__name__)


class GenericTree(ABC):
    """Abstract base class for tree nodes.

    A node can be a root, an inner node or a leaf; there is no separate
    tree object. A node belongs to at most one parent once inserted, and
    inserting does not check for cycles.

    The built-in cursor (``rewind``/``current``/``key``/``next``/``valid``/
    ``seek``) is shared by every caller of this node. Do not interleave
    two traversals through it; use ``cursor()`` to get an independent one.
    """

    def __init__(self, value: Any = None, *, config: Optional[TreeConfig] = None):
        """Build a node.

        Args:
            value: NodeValue, Payload tag, or raw payload to wrap
            config: Node configuration (defaults to the module default)
        """
        self._config = config or get_default_config()
        self._value: Optional[NodeValue] = None
        self._children: Dict[Any, 'GenericTree'] = ChildMap()
        self._cursor = ChildCursor(self._children)
        self.set_value(value)

    @property
    def config(self) -> TreeConfig:
        return self._config

    def _trace(self, message: str, *args: Any) -> None:
        if self._config.trace:
            logger.debug("%r: " + message, self, *args)

    # Value

    def set_value(self, value: Any) -> Optional[NodeValue]:
        """Set the node value.

        Non-NodeValue input is wrapped in a SimpleValue whose identifier
        is the configured digest of the payload.

        Returns:
            The previous value (None on first assignment)
        """
        value = make_value(value, self._config)
        old = self._value
        self._value = value
        if old is not None:
            self._trace("value %r replaced by %r", old, value)
        return old

    def get_value(self) -> Optional[NodeValue]:
        return self._value

    # Children

    def get_child(self, node_id: Any) -> 'GenericTree':
        """Get a specific child.

        Raises:
            ChildNotFoundError: If no child has this identifier
        """
        if not self.child_exists(node_id):
            raise ChildNotFoundError(node_id)
        return self._children[node_id]

    def get_children(self) -> Mapping[Any, 'GenericTree']:
        """Get all children as a read-only mapping.

        Mutations must go through insert()/delete().
        """
        return MappingProxyType(self._children)

    def get_childs(self) -> Mapping[Any, 'GenericTree']:
        """Deprecated alias of get_children()."""
        warnings.warn(
            "get_childs() is deprecated, use get_children() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.get_children()

    def child_exists(self, node_id: Any) -> bool:
        return node_id in self._children

    def count(self) -> int:
        """Count direct children (not the subtree size)."""
        return len(self._children)

    def items(self) -> Iterator[Tuple[Any, 'GenericTree']]:
        """Yield ``(identifier, child)`` pairs in iteration order."""
        cursor = self.cursor()
        cursor.rewind()
        while cursor.valid():
            yield cursor.key(), cursor.current()
            cursor.next()

    @abstractmethod
    def insert(self, child: 'GenericTree') -> 'GenericTree':
        """Insert a child and return self."""
        pass

    @abstractmethod
    def delete(self, node_id: Any) -> 'GenericTree':
        """Delete a child and return self."""
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if the node is a leaf."""
        pass

    @abstractmethod
    def is_node(self) -> bool:
        """Check if the node is a node (i.e. not a leaf)."""
        pass

    # Visitor

    def accept(self, visitor: Any, handle: Any = None, context: Any = None) -> Any:
        """Accept a visitor.

        Args:
            visitor: Object with ``visit(node, handle, context)`` or a
                callable with the same signature
            handle: In/out data the visitor may mutate (e.g. a list)
            context: Opaque data passed through unchanged

        Returns:
            Whatever the visitor returns
        """
        return dispatch(visitor, self, handle, context)

    # Iteration

    def cursor(self) -> ChildCursor:
        """Return a new cursor with its own position over the children."""
        return ChildCursor(self._children)

    def rewind(self) -> Optional['GenericTree']:
        """Rewind the built-in cursor and return the first child."""
        return self._cursor.rewind()

    def current(self) -> Optional['GenericTree']:
        return self._cursor.current()

    def key(self) -> Any:
        return self._cursor.key()

    def next(self) -> Optional['GenericTree']:
        """Advance the built-in cursor and return the current child."""
        return self._cursor.next()

    def valid(self) -> bool:
        return self._cursor.valid()

    def seek(self, position: Any) -> None:
        self._cursor.seek(position)

    # Python protocols

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        # A childless node is still a node
        return True

    def __iter__(self) -> Iterator['GenericTree']:
        """Iterate over the children through a fresh cursor."""
        cursor = self.cursor()
        cursor.rewind()
        return cursor

    def __contains__(self, node_id: Any) -> bool:
        return self.child_exists(node_id)

    def __str__(self) -> str:
        return str(self._value) if self._value is not None else ""

    def __repr__(self) -> str:
        node_id = self._value.get_id() if self._value is not None else None
        return f"{self.__class__.__name__}(id={node_id!r}, children={len(self._children)})"
