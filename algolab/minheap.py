"""A min-heap of (first name, last name) pairs driven by a small command language."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

Name = tuple[str, str]


class NameHeap:
    """Binary min-heap ordered by first name, then last name.

    Positions are one-based, as reported by :meth:`insert` and taken by
    :meth:`delete`.
    """

    def __init__(self) -> None:
        self._slots: list[Name | None] = []

    def _less(self, a: int, b: int) -> bool:
        return self._slots[a] < self._slots[b]

    def _swap(self, a: int, b: int) -> None:
        self._slots[a], self._slots[b] = self._slots[b], self._slots[a]

    def _sift_up(self, i: int) -> int:
        while i > 0:
            parent = (i - 1) // 2
            if self._slots[parent] > self._slots[i]:
                self._swap(i, parent)
                i = parent
            else:
                break
        return i

    def _sift_down(self, i: int) -> None:
        size = len(self._slots)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and self._less(child, smallest):
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _remove_root(self) -> Name | None:
        self._swap(0, len(self._slots) - 1)
        removed = self._slots.pop()
        if self._slots:
            self._sift_down(0)
        return removed

    def init_heap(self, first: str, last: str) -> None:
        """Discard the current contents and start with a single name."""
        self._slots = [(first, last)]

    def insert(self, first: str, last: str) -> int:
        """Add a name and return the one-based position where it settled."""
        self._slots.append((first, last))
        return self._sift_up(len(self._slots) - 1) + 1

    def find_min(self) -> Name:
        """Return the smallest name without removing it."""
        if not self._slots:
            raise IndexError("heap is empty")
        return self._slots[0]

    def delete_min(self) -> Name:
        """Remove and return the smallest name."""
        if not self._slots:
            raise IndexError("heap is empty")
        return self._remove_root()

    def delete(self, index: int) -> Name:
        """Remove and return the name at one-based position *index*."""
        if not 1 <= index <= len(self._slots):
            raise IndexError("heap position out of range")
        i = index - 1
        removed = self._slots[i]
        # Float a marker up to the root, then take it off the top.
        while i > 0:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent
        self._remove_root()
        return removed

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slots!r})"


def run_commands(text: str) -> list[str]:
    """Run a heap script and return the lines it prints.

    The script starts with the number of commands; each command is one of
    ``InitHeap first last``, ``Insert first last``, ``FindMin``,
    ``DeleteMin`` or ``Delete position``. Failures print ``-1``.
    """
    tokens = iter(text.split())
    heap = NameHeap()
    output: list[str] = []
    try:
        count = int(next(tokens))
        for _ in range(count):
            command = next(tokens)
            if command == "InitHeap":
                heap.init_heap(next(tokens), next(tokens))
            elif command == "Insert":
                output.append(str(heap.insert(next(tokens), next(tokens))))
            elif command in ("FindMin", "DeleteMin", "Delete"):
                try:
                    if command == "FindMin":
                        name = heap.find_min()
                    elif command == "DeleteMin":
                        name = heap.delete_min()
                    else:
                        name = heap.delete(int(next(tokens)))
                except IndexError:
                    output.append("-1")
                else:
                    output.append(" ".join(name))
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    return output


def main(argv: Sequence[str] | None = None) -> int:
    """Read a heap script from a file or standard input and print its output."""
    parser = argparse.ArgumentParser(description="Min-heap of names driven by a command script.")
    parser.add_argument("input", nargs="?", help="script file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    for line in run_commands(text):
        print(line)
    return 0