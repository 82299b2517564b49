"""Binary tree nodes for NodeTree.

A BinaryTree node has exactly two child slots, LEFT (0) and RIGHT (1).
Its state is never stored; it is read from slot occupancy on every call.
"""

from enum import Enum
from typing import Any, Optional

from ..config import ChildLookup
from ..exceptions import (
    ChildNotFoundError,
    InvalidChildTypeError,
    InvalidSlotError,
    NodeFullError,
    SlotOccupiedError,
)
from .generic import GenericTree

LEFT = 0
RIGHT = 1


class BinaryState(Enum):
    """Occupancy state of a binary node."""
    LEAF = "leaf"                   # No child
    SIMPLE_LEFT = "simple_left"     # Left child only
    SIMPLE_RIGHT = "simple_right"   # Right child only
    DOUBLE = "double"               # Both children


class BinaryTree(GenericTree):
    """Manipulate a binary tree.

    Children are addressed two ways, and the difference is deliberate:
    ``delete`` takes a slot (0 or 1), while ``get_child`` and
    ``child_exists`` take the identifier carried by the child's value.

    Example:
        >>> root = BinaryTree(Payload("+"))
        >>> _ = root.insert(BinaryTree(Payload("1"))).insert(BinaryTree(Payload("2")))
        >>> root.state()
        <BinaryState.DOUBLE: 'double'>
    """

    def _check_child(self, child: Any) -> None:
        if not isinstance(child, BinaryTree):
            raise InvalidChildTypeError(BinaryTree, child)

    def _set_slot(self, slot: int, child: 'BinaryTree') -> 'BinaryTree':
        self._children[slot] = child
        # Keep left before right regardless of insertion order
        if LEFT in self._children and RIGHT in self._children:
            left = self._children.pop(LEFT)
            right = self._children.pop(RIGHT)
            self._children[LEFT] = left
            self._children[RIGHT] = right
        self._trace("slot %d set to %r", slot, child)
        return self

    def insert(self, child: 'BinaryTree') -> 'BinaryTree':
        """Insert a child, filling the slots from left to right.

        A node holding only a right child gets its left slot filled.

        Raises:
            InvalidChildTypeError: If child is not a BinaryTree
            NodeFullError: If both slots are already set
        """
        self._check_child(child)

        if self.is_double():
            self._trace("insert refused, node is full")
            raise NodeFullError(
                "Cannot insert a new element: left and right child are already set."
            )

        if not self.is_simple_left():
            return self._set_slot(LEFT, child)

        return self._set_slot(RIGHT, child)

    def insert_left(self, child: 'BinaryTree') -> 'BinaryTree':
        """Insert the left child.

        Raises:
            InvalidChildTypeError: If child is not a BinaryTree
            SlotOccupiedError: If the left child is already set
        """
        self._check_child(child)

        if self.get_left() is not None:
            self._trace("insert_left refused, slot occupied")
            raise SlotOccupiedError("Left child is already set.", LEFT)

        return self._set_slot(LEFT, child)

    def insert_right(self, child: 'BinaryTree') -> 'BinaryTree':
        """Insert the right child.

        Raises:
            InvalidChildTypeError: If child is not a BinaryTree
            SlotOccupiedError: If the right child is already set
        """
        self._check_child(child)

        if self.get_right() is not None:
            self._trace("insert_right refused, slot occupied")
            raise SlotOccupiedError("Right child is already set.", RIGHT)

        return self._set_slot(RIGHT, child)

    def delete(self, slot: int) -> 'BinaryTree':
        """Clear a slot. Clearing an empty slot is not an error.

        Args:
            slot: LEFT (0) or RIGHT (1)

        Raises:
            InvalidSlotError: If slot is neither 0 nor 1
        """
        # bool is an int subclass; True/False are not slots
        if isinstance(slot, bool) or slot not in (LEFT, RIGHT):
            raise InvalidSlotError(slot)

        removed = self._children.pop(slot, None)
        if removed is not None:
            self._trace("slot %d cleared (was %r)", slot, removed)
        return self

    def delete_left(self) -> 'BinaryTree':
        return self.delete(LEFT)

    def delete_right(self) -> 'BinaryTree':
        return self.delete(RIGHT)

    # State

    def state(self) -> BinaryState:
        """Derive the occupancy state from the slots."""
        has_left = self.get_left() is not None
        has_right = self.get_right() is not None

        if has_left and has_right:
            return BinaryState.DOUBLE
        if has_left:
            return BinaryState.SIMPLE_LEFT
        if has_right:
            return BinaryState.SIMPLE_RIGHT
        return BinaryState.LEAF

    def is_simple_left(self) -> bool:
        """Check if the left child is set and not the right child."""
        return self.get_left() is not None and self.get_right() is None

    def is_simple_right(self) -> bool:
        """Check if the right child is set and not the left child."""
        return self.get_left() is None and self.get_right() is not None

    def is_double(self) -> bool:
        """Check if both children are set."""
        return self.get_left() is not None and self.get_right() is not None

    def is_leaf(self) -> bool:
        return self.get_left() is None and self.get_right() is None

    def is_node(self) -> bool:
        return self.get_left() is not None or self.get_right() is not None

    # Access

    def get_left(self) -> Optional['BinaryTree']:
        return self._children.get(LEFT)

    def get_right(self) -> Optional['BinaryTree']:
        return self._children.get(RIGHT)

    def get_child(self, node_id: Any) -> 'BinaryTree':
        """Get a child by the identifier of its value (not by slot).

        Raises:
            ChildNotFoundError: If neither child carries this identifier
        """
        slot = self._find_slot(node_id)
        if slot is None:
            raise ChildNotFoundError(node_id)
        return self._children[slot]

    def child_exists(self, node_id: Any) -> bool:
        return self._find_slot(node_id) is not None

    def _find_slot(self, node_id: Any) -> Optional[int]:
        """Return the slot whose child carries ``node_id``, if any."""
        left = self.get_left()
        if left is not None and left.get_value().get_id() == node_id:
            return LEFT

        if self._config.child_lookup is ChildLookup.LEFT_ONLY:
            # Legacy: the right-hand comparison looks at the left child again
            right = left
        else:
            right = self.get_right()

        if right is not None and right.get_value().get_id() == node_id:
            return RIGHT

        return None
