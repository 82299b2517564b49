"""Test fixtures for NodeTree consumers.

These helpers build small trees and record visitor calls so that test
suites of projects using NodeTree can assert on dispatch without
writing their own visitors.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config import TreeConfig
from ..core.binary import BinaryTree
from ..core.nary import NaryTree
from ..core.value import SimpleValue


class RecordingVisitor:
    """Visitor that records every call and returns a fixed result.

    Example:
        visitor = RecordingVisitor(result="done")
        assert node.accept(visitor, handle, "ctx") == "done"
        assert visitor.calls == [(node, handle, "ctx")]
    """

    def __init__(self, result: Any = None):
        self.result = result
        self.calls: List[Tuple[Any, Any, Any]] = []

    def visit(self, node: Any, handle: Any = None, context: Any = None) -> Any:
        self.calls.append((node, handle, context))
        if isinstance(handle, list):
            handle.append(node)
        return self.result

    @property
    def visited(self) -> List[Any]:
        """Nodes in the order they were visited."""
        return [node for node, _, _ in self.calls]


def binary_node(node_id: str, value: Optional[str] = None,
                config: Optional[TreeConfig] = None) -> BinaryTree:
    """Build a childless binary node with an explicit identifier."""
    return BinaryTree(SimpleValue(node_id, value if value is not None else node_id),
                      config=config)


def nary_node(node_id: str, value: Optional[str] = None,
              config: Optional[TreeConfig] = None) -> NaryTree:
    """Build a childless n-ary node with an explicit identifier."""
    return NaryTree(SimpleValue(node_id, value if value is not None else node_id),
                    config=config)


def build_nary(root_id: str, children: Iterable[str],
               config: Optional[TreeConfig] = None) -> Tuple[NaryTree, Dict[str, NaryTree]]:
    """Build an n-ary root with one leaf per identifier, inserted in order.

    Returns:
        Tuple of (root, {identifier: child})
    """
    root = nary_node(root_id, config=config)
    created = {}
    for child_id in children:
        child = nary_node(child_id, config=config)
        root.insert(child)
        created[child_id] = child
    return root, created


def build_expression() -> BinaryTree:
    """Build the binary tree of ``(1 + 2) * 3``.

    Structure:
    *
    ├── +
    │   ├── 1
    │   └── 2
    └── 3
    """
    plus = binary_node("plus", "+")
    plus.insert_left(binary_node("one", "1"))
    plus.insert_right(binary_node("two", "2"))

    times = binary_node("times", "*")
    times.insert(plus).insert(binary_node("three", "3"))
    return times
