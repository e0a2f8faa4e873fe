import pytest

from algolab.stacks import (
    BoundedStack,
    LinkedStack,
    StackOverflowError,
    StackUnderflowError,
)


def test_bounded_default_capacity_is_five():
    stack = BoundedStack()
    for item in range(5):
        stack.push(item)
    with pytest.raises(StackOverflowError):
        stack.push(99)
    assert len(stack) == 5


def test_bounded_lifo_order():
    stack = BoundedStack(3)
    for item in (10, 20, 30):
        stack.push(item)
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]
    assert len(stack) == 0


def test_bounded_iterates_top_down():
    stack = BoundedStack(4)
    for item in (1, 2, 3):
        stack.push(item)
    assert list(stack) == [3, 2, 1]
    assert stack.peek() == 3
    assert len(stack) == 3


def test_bounded_underflow():
    stack = BoundedStack(2)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_bounded_underflow_is_index_error():
    with pytest.raises(IndexError):
        BoundedStack(1).pop()


def test_bounded_space_is_reused_after_pop():
    stack = BoundedStack(1)
    stack.push("a")
    assert stack.pop() == "a"
    stack.push("b")
    assert list(stack) == ["b"]


def test_bounded_zero_capacity_rejects_push():
    stack = BoundedStack(0)
    with pytest.raises(StackOverflowError):
        stack.push(1)


def test_bounded_negative_capacity():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_linked_lifo_order():
    stack = LinkedStack()
    for item in ("x", "y", "z"):
        stack.push(item)
    assert stack.peek() == "z"
    assert list(stack) == ["z", "y", "x"]
    assert stack.pop() == "z"
    assert stack.pop() == "y"
    assert len(stack) == 1


def test_linked_grows_without_limit():
    stack = LinkedStack()
    values = list(range(1000))
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert list(stack) == values[::-1]


def test_linked_underflow():
    stack = LinkedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    stack.push(1)
    stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()