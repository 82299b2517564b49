"""Positional cursor over a node's children.

The cursor borrows the node's live child mapping, so inserts and deletes
made while it is open are visible at its next step. Each cursor has its
own position; the node keeps one of them as its built-in cursor.
"""

from typing import Any, Iterator, List, Mapping, Optional


class ChildMap(dict):
    """Child mapping that counts its mutations.

    Cursors compare ``version`` with the one their key snapshot was taken
    at, so a walk rebuilds the key list only after the children change.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.version = 0

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(key, value)
        self.version += 1

    def __delitem__(self, key: Any) -> None:
        super().__delitem__(key)
        self.version += 1

    def pop(self, *args: Any) -> Any:
        self.version += 1
        return super().pop(*args)

    def popitem(self) -> Any:
        self.version += 1
        return super().popitem()

    def setdefault(self, key: Any, default: Any = None) -> Any:
        self.version += 1
        return super().setdefault(key, default)

    def update(self, *args: Any, **kwargs: Any) -> None:
        super().update(*args, **kwargs)
        self.version += 1

    def clear(self) -> None:
        super().clear()
        self.version += 1


class ChildCursor:
    """Iteration position over an ordered child mapping.

    Typical loop:

        cursor = node.cursor()
        cursor.rewind()
        while cursor.valid():
            handle(cursor.key(), cursor.current())
            cursor.next()

    Missing positions are reported as ``None`` rather than raising. The end
    of the collection is decided by position only, so ``None`` is usable
    as a child identifier.
    """

    def __init__(self, children: Mapping[Any, Any]):
        self._children = children
        self._position = 0
        self._snapshot: List[Any] = []
        self._version: Optional[int] = None

    def _keys(self) -> List[Any]:
        version = getattr(self._children, "version", None)
        # Plain mappings carry no version and are re-read every step
        if version is None or version != self._version:
            self._snapshot = list(self._children)
            self._version = version
        return self._snapshot

    def _at_child(self) -> bool:
        return self._position < len(self._keys())

    @property
    def position(self) -> int:
        """Zero-based offset of the cursor; may be past the end."""
        return self._position

    def rewind(self) -> Optional[Any]:
        """Move to the first child and return it."""
        self._position = 0
        return self.current()

    def current(self) -> Optional[Any]:
        """Return the child at the cursor without moving."""
        if not self._at_child():
            return None
        return self._children[self._keys()[self._position]]

    def key(self) -> Optional[Any]:
        """Return the identifier at the cursor."""
        if not self._at_child():
            return None
        return self._keys()[self._position]

    def next(self) -> Optional[Any]:
        """Advance one position and return the new current child."""
        if self._at_child():
            self._position += 1
        return self.current()

    def valid(self) -> bool:
        """Check whether the cursor denotes an existing child.

        Probes one step ahead and restores the position. If the probe
        leaves the collection, the cursor is still valid when it sits on
        the last element.
        """
        keys = self._keys()
        if not keys:
            return False

        saved = self._position
        self.next()
        probed = self._at_child()
        self._position = saved

        if not probed:
            probed = self._position == len(keys) - 1

        return probed

    def seek(self, position: Any) -> None:
        """Move to the child identified by ``position``.

        Scans forward from the first child. Unknown identifiers leave the
        cursor where it was.
        """
        if position not in self._children:
            return

        self.rewind()
        while self.key() != position:
            self.next()

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        """Yield the current child, then advance."""
        if not self._at_child():
            raise StopIteration
        child = self.current()
        self.next()
        return child

    def __repr__(self) -> str:
        return f"ChildCursor(position={self._position}, size={len(self._children)})"
