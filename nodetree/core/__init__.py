"""Core node types for NodeTree.

This module contains the abstract node, its two specializations and the
value and cursor types they are built from.
"""

from .value import NodeValue, SimpleValue, Payload, make_value
from .cursor import ChildCursor, ChildMap
from .generic import GenericTree
from .binary import BinaryTree, BinaryState, LEFT, RIGHT
from .nary import NaryTree

__all__ = [
    "NodeValue",
    "SimpleValue",
    "Payload",
    "make_value",
    "ChildCursor",
    "ChildMap",
    "GenericTree",
    "BinaryTree",
    "BinaryState",
    "LEFT",
    "RIGHT",
    "NaryTree",
]
