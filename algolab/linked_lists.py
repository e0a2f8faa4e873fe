"""Singly linked lists: a plain list with reversal and a list kept in sorted order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class SinglyLinkedList:
    """A singly linked list that appends at the tail and can reverse itself."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: _Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Text form such as ``1-> 2-> NULL``."""
        return "".join(f"{value}-> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class SortedLinkedList:
    """A singly linked list whose items stay in ascending order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.add(value)

    def add(self, item: Any) -> None:
        """Insert *item* before the first element that is not smaller than it."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.value < item:
            previous = current
            current = current.next
        node = _Node(item, current)
        if previous is None:
            self._head = node
        else:
            previous.next = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"