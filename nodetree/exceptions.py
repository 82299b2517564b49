"""Error taxonomy for NodeTree.

Every failure is raised before the tree is touched, so a caught error
always leaves the node exactly as it was.
"""

from typing import Any


class TreeError(Exception):
    """Base class for all errors raised by NodeTree."""
    pass


class ChildNotFoundError(TreeError, KeyError):
    """Raised when a child identifier is not present on a node."""

    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(f"Child {node_id} does not exist.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class SlotOccupiedError(TreeError):
    """Raised when inserting into a child position that is already taken."""

    def __init__(self, message: str, slot: Any = None):
        self.slot = slot
        super().__init__(message)


class DuplicateChildError(SlotOccupiedError):
    """Raised when an n-ary node already has a child with the same id."""

    def __init__(self, node_id: Any):
        super().__init__(f"Child {node_id} already exists.", node_id)


class NodeFullError(TreeError):
    """Raised by binary insert() when both slots are filled."""
    pass


class InvalidChildTypeError(TreeError, TypeError):
    """Raised when a child is not a node of the expected kind."""

    def __init__(self, expected: type, given: Any):
        self.expected = expected
        self.given = given
        super().__init__(
            f"Child must be an instance of {expected.__name__}; "
            f"given {type(given).__name__}."
        )


class InvalidSlotError(TreeError, ValueError):
    """Raised when a binary slot other than 0 or 1 is requested."""

    def __init__(self, slot: Any):
        self.slot = slot
        super().__init__(f"Slot must be 0 (left) or 1 (right); given {slot!r}.")
