"""NodeTree - Generic and binary tree nodes.

NodeTree provides an abstract node owning a keyed set of children, a
cursor to walk them, and visitor dispatch for whole-tree work. Two
specializations are shipped:

    from nodetree import BinaryTree, NaryTree, Payload

    root = BinaryTree(Payload("+"))
    root.insert_left(BinaryTree(Payload("1")))
    root.insert_right(BinaryTree(Payload("2")))

Traversal order is decided by visitors (see ``nodetree.visitors``), never
by the nodes themselves.
"""

import logging

__version__ = "0.1.0"

from .config import (
    TreeConfig,
    HashAlgorithm,
    ChildLookup,
    get_default_config,
    set_default_config,
)
from .exceptions import (
    TreeError,
    ChildNotFoundError,
    SlotOccupiedError,
    DuplicateChildError,
    NodeFullError,
    InvalidChildTypeError,
    InvalidSlotError,
)
from .core import (
    NodeValue,
    SimpleValue,
    Payload,
    make_value,
    ChildCursor,
    GenericTree,
    BinaryTree,
    BinaryState,
    LEFT,
    RIGHT,
    NaryTree,
)
from .visitor import Visitor, dispatch
from .visitors import DumpVisitor, SearchVisitor, CountVisitor, LeafCollector
from .api import dump_tree, find_node, find_nodes, count_nodes, get_leaf_nodes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "TreeConfig",
    "HashAlgorithm",
    "ChildLookup",
    "get_default_config",
    "set_default_config",
    # Errors
    "TreeError",
    "ChildNotFoundError",
    "SlotOccupiedError",
    "DuplicateChildError",
    "NodeFullError",
    "InvalidChildTypeError",
    "InvalidSlotError",
    # Core
    "NodeValue",
    "SimpleValue",
    "Payload",
    "make_value",
    "ChildCursor",
    "GenericTree",
    "BinaryTree",
    "BinaryState",
    "LEFT",
    "RIGHT",
    "NaryTree",
    # Visitors
    "Visitor",
    "dispatch",
    "DumpVisitor",
    "SearchVisitor",
    "CountVisitor",
    "LeafCollector",
    # API
    "dump_tree",
    "find_node",
    "find_nodes",
    "count_nodes",
    "get_leaf_nodes",
]
