"""Doubly linked lists: a two-way list and an xor-linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None
    owner: Any = field(default=None, repr=False)


class DoublyLinkedList:
    """A list linked in both directions with head and tail access."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert *value* at the beginning of the list."""
        node = _Node(value, None, self._head, self)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add *value* at the end of the list."""
        node = _Node(value, self._tail, None, self)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def node_at(self, index: int) -> _Node:
        """Return the node at zero-based *index*."""
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_after(self, node: _Node | None, value: Any) -> None:
        """Insert *value* directly after *node*, which must belong to this list."""
        if node is None:
            raise ValueError("the given previous node cannot be None")
        if node.owner is not self:
            raise ValueError("node does not belong to this list")
        new = _Node(value, node, node.next, self)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def pop_back(self) -> Any:
        """Remove the last node and return its value."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.owner = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Text form such as ``1->2->NULL``, or ``list is empty``."""
        if self._head is None:
            return "list is empty"
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(slots=True)
class _XorNode:
    value: Any
    link: int


class XorLinkedList:
    """A doubly linked list where each node stores the xor of its neighbours' addresses.

    Addresses are integer handles into a node table; 0 stands for no node.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, _XorNode] = {}
        self._head = 0
        self._tail = 0
        self._next_address = 1

    def insert(self, value: Any) -> None:
        """Insert *value* at the beginning; it becomes the new head."""
        address = self._next_address
        self._next_address += 1
        self._nodes[address] = _XorNode(value, self._head)
        if self._head:
            old_head = self._nodes[self._head]
            following = old_head.link  # previous of the old head is 0
            old_head.link = address ^ following
        else:
            self._tail = address
        self._head = address

    def _walk(self, start: int) -> Iterator[Any]:
        previous, current = 0, start
        while current:
            node = self._nodes[current]
            yield node.value
            previous, current = current, previous ^ node.link

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self._head)

    def __reversed__(self) -> Iterator[Any]:
        return self._walk(self._tail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"