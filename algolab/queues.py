"""First-in, first-out queues: a bounded queue and a queue built from two stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue that has reached its maximum size."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """A queue that holds at most *max_size* items."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add *item* at the tail; raise QueueFullError if the queue is full."""
        if len(self._items) == self.max_size:
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the head."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Items from head to tail."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self.max_size}, items={list(self)!r})"


class TwoStackQueue:
    """A queue kept in two stacks: one takes new items, the other hands them out."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, item: Any) -> None:
        """Add *item* at the tail."""
        self._inbox.append(item)

    def dequeue(self) -> Any:
        """Remove and return the oldest item."""
        if not self._outbox:
            if not self._inbox:
                raise QueueEmptyError("queue is empty")
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __repr__(self) -> str:
        pending = self._outbox[::-1] + self._inbox
        return f"{type(self).__name__}({pending!r})"