"""Node values for NodeTree.

A node never interprets its value beyond the identifier: lookups compare
``get_id()`` results and everything else is opaque payload.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from ..config import TreeConfig, get_default_config


class NodeValue(ABC):
    """Abstract identifier + payload pair stored in every node."""

    @abstractmethod
    def get_id(self) -> Any:
        """Return the stable, comparable identifier of this value."""
        pass

    @abstractmethod
    def get_value(self) -> Any:
        """Return the payload."""
        pass

    @abstractmethod
    def set_value(self, value: Any) -> Any:
        """Replace the payload and return the previous one."""
        pass

    def __str__(self) -> str:
        """String representation is the payload."""
        value = self.get_value()
        return "" if value is None else str(value)


class SimpleValue(NodeValue):
    """A value holding a string identifier and a string payload."""

    def __init__(self, identifier: str, value: Optional[str] = None):
        self._id = None
        self._value = None
        self._set_id(identifier)
        self.set_value(value)

    def _set_id(self, identifier: str) -> Optional[str]:
        old = self._id
        self._id = identifier
        return old

    def get_id(self) -> Optional[str]:
        return self._id

    def set_value(self, value: Optional[str]) -> Optional[str]:
        old = self._value
        self._value = value
        return old

    def get_value(self) -> Optional[str]:
        return self._value

    def __repr__(self) -> str:
        return f"SimpleValue(id={self._id!r}, value={self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleValue):
            return NotImplemented
        return self._id == other._id and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._id, self._value))


@dataclass(frozen=True)
class Payload:
    """Tag marking raw data that must be wrapped into a SimpleValue.

    Example:
        >>> node = BinaryTree(Payload("root"))
        >>> node.get_value().get_id()  # md5("root")
        '63a9f0ea7bb98050796b649e85481845'
    """
    data: Any = None


def make_value(value: Any, config: Optional[TreeConfig] = None) -> NodeValue:
    """Turn constructor/setter input into a NodeValue.

    NodeValue instances pass through untouched. A Payload tag, or any
    other raw object, becomes a SimpleValue whose identifier is the
    configured digest of the payload.

    Args:
        value: NodeValue, Payload, or raw payload
        config: Configuration providing the hash algorithm

    Returns:
        NodeValue to store on the node
    """
    if isinstance(value, NodeValue):
        return value

    data = value.data if isinstance(value, Payload) else value
    config = config or get_default_config()
    return SimpleValue(config.hash_algorithm.digest(data), data)
