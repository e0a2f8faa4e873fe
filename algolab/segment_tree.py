"""Range-minimum queries with a segment tree."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

NO_MINIMUM = 999999
"""Value returned for a query range that holds no element."""


class MinSegmentTree:
    """Segment tree answering minimum queries over inclusive index ranges."""

    def __init__(self, values: Sequence[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(values)
        self._tree = [NO_MINIMUM] * (4 * self._size)
        self._build(values, 0, 0, self._size - 1)

    def _build(self, values: list[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(values, 2 * node + 1, lo, mid)
        self._build(values, 2 * node + 2, mid + 1, hi)
        self._tree[node] = min(self._tree[2 * node + 1], self._tree[2 * node + 2])

    def update(self, index: int, value: int) -> None:
        """Set the element at zero-based *index* to *value*."""
        if not 0 <= index < self._size:
            raise IndexError("segment tree index out of range")
        node, lo, hi = 0, 0, self._size - 1
        path = []
        while lo != hi:
            path.append(node)
            mid = (lo + hi) // 2
            if index <= mid:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = min(self._tree[2 * parent + 1], self._tree[2 * parent + 2])

    def query(self, left: int, right: int) -> int:
        """Minimum over zero-based indices *left*..*right*; NO_MINIMUM if none fall inside."""
        return self._query(0, 0, self._size - 1, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if left <= lo and right >= hi:
            return self._tree[node]
        if left > hi or right < lo:
            return NO_MINIMUM
        mid = (lo + hi) // 2
        return min(
            self._query(2 * node + 1, lo, mid, left, right),
            self._query(2 * node + 2, mid + 1, hi, left, right),
        )


def run_commands(text: str) -> list[int]:
    """Run a script of "q a b" queries and "u i v" updates; return the query answers.

    The script starts with the element count and command count, then the
    elements; positions in commands are one-based.
    """
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        commands = int(next(tokens))
        tree = MinSegmentTree([int(next(tokens)) for _ in range(count)])
        answers = []
        for _ in range(commands):
            op = next(tokens)
            a = int(next(tokens))
            b = int(next(tokens))
            if op == "q":
                answers.append(tree.query(a - 1, b - 1))
            else:
                tree.update(a - 1, b)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read a command script from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(description="Range-minimum queries with a segment tree.")
    parser.add_argument("input", nargs="?", help="script file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    for answer in run_commands(text):
        print(answer)
    return 0