"""Binary search trees with recursive-order and stack-driven traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from algolab.stacks import LinkedStack


@dataclass(eq=False, slots=True)
class _TreeNode:
    value: Any
    left: _TreeNode | None = None
    right: _TreeNode | None = None


class BinarySearchTree:
    """An unbalanced binary search tree.

    Larger values go right. With *allow_duplicates* an equal value goes into
    the left subtree; without it an equal value is ignored.
    """

    def __init__(self, values: Iterable[Any] = (), allow_duplicates: bool = True) -> None:
        self.allow_duplicates = allow_duplicates
        self._root: _TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert *value*; return False if it was a duplicate that was dropped."""
        node = _TreeNode(value)
        if self._root is None:
            self._root = node
            self._size += 1
            return True
        current = self._root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
            else:
                if value == current.value and not self.allow_duplicates:
                    return False
                if current.left is None:
                    current.left = node
                    break
                current = current.left
        self._size += 1
        return True

    def _walk(self, order: str) -> Iterator[Any]:
        pending: list[tuple[_TreeNode | None, bool]] = [(self._root, False)]
        while pending:
            node, ready = pending.pop()
            if node is None:
                continue
            if ready:
                yield node.value
            elif order == "pre":
                pending.extend([(node.right, False), (node.left, False), (node, True)])
            elif order == "in":
                pending.extend([(node.right, False), (node, True), (node.left, False)])
            else:
                pending.extend([(node, True), (node.right, False), (node.left, False)])

    def inorder(self) -> list[Any]:
        """Values in left, node, right order."""
        return list(self._walk("in"))

    def inorder_iterative(self) -> list[Any]:
        """In-order values found by descending left and unwinding a linked stack."""
        stack = LinkedStack()
        result = []
        current = self._root
        while True:
            if current is not None:
                stack.push(current)
                current = current.left
            elif len(stack):
                current = stack.pop()
                result.append(current.value)
                current = current.right
            else:
                return result

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return list(self._walk("pre"))

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        return list(self._walk("post"))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"