"""Visitor contract for NodeTree.

A visitor is anything with a ``visit(node, handle, context)`` method, or
a plain callable with the same signature. Nodes forward ``accept`` calls
here and return the visitor's result untouched; traversal order is the
visitor's own business.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Visitor(Protocol):
    """Single-method visiting capability."""

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> Any:
        ...


def dispatch(visitor: Any, node: Any, handle: Any = None, context: Any = None) -> Any:
    """Invoke a visitor on a node.

    Args:
        visitor: Visitor instance or callable
        node: Node being visited
        handle: In/out data shared with the visitor
        context: Opaque pass-through data

    Returns:
        The visitor's result

    Raises:
        TypeError: If ``visitor`` is neither a Visitor nor callable
    """
    if isinstance(visitor, Visitor):
        return visitor.visit(node, handle, context)
    if callable(visitor):
        return visitor(node, handle, context)
    raise TypeError(
        f"Visitor must define visit() or be callable; given {type(visitor).__name__}"
    )
