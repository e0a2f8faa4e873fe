"""Last-in, first-out stacks: one with a fixed capacity and one that grows freely."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 5


class StackOverflowError(OverflowError):
    """Raised when pushing onto a stack that is already full."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking at an empty stack."""


class BoundedStack:
    """A stack that holds at most *capacity* items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put *item* on top; raise StackOverflowError if the stack is full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self)!r})"


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    below: _Node | None


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put *item* on top of the stack."""
        self._top = _Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        """Items from the top of the stack down to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"