"""A list of fixed-size binary items with an internal read cursor."""

from __future__ import annotations

from collections.abc import Iterator


class TypeList:
    """Stores items of exactly *item_size* bytes each."""

    def __init__(self, item_size: int) -> None:
        if item_size <= 0:
            raise ValueError("item_size must be positive")
        self.item_size = item_size
        self._items: list[bytes] = []
        self._cursor = 0

    def push(self, data: bytes) -> None:
        """Append the first *item_size* bytes of *data*."""
        data = bytes(data)
        if len(data) < self.item_size:
            raise ValueError(f"data must hold at least {self.item_size} bytes")
        self._items.append(data[: self.item_size])

    def get(self, index: int) -> bytes:
        """Return the item at zero-based *index*."""
        if not 0 <= index < len(self._items):
            raise IndexError("TypeList index out of range")
        return self._items[index]

    def remove(self, index: int) -> None:
        """Remove the item at *index*; an index outside the list is ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def next(self) -> bytes | None:
        """Return the item under the cursor and advance it, or None at the end."""
        if self._cursor < len(self._items):
            self._cursor += 1
            return self._items[self._cursor - 1]
        return None

    def rewind(self) -> None:
        """Move the cursor back to the first item."""
        self._cursor = 0

    def pop(self) -> bytes:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty TypeList")
        return self._items.pop()

    def shift(self) -> bytes:
        """Remove and return the first item."""
        if not self._items:
            raise IndexError("shift from empty TypeList")
        return self._items.pop(0)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[bytes]:
        """All items in order; the internal cursor is left untouched."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(item_size={self.item_size}, items={self._items!r})"