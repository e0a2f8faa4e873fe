import pytest

from algolab.doubly import DoublyLinkedList, XorLinkedList


def test_insertion_example():
    items = DoublyLinkedList()
    items.append(6)
    items.push_front(7)
    items.push_front(1)
    items.append(4)
    items.insert_after(items.node_at(1), 8)
    assert list(items) == [1, 7, 8, 6, 4]
    assert list(reversed(items)) == [4, 6, 8, 7, 1]
    assert len(items) == 5


def test_push_front_builds_reverse_order():
    items = DoublyLinkedList()
    for value in [1, 2, 3, 4]:
        items.push_front(value)
    assert list(items) == [4, 3, 2, 1]
    assert list(reversed(items)) == [1, 2, 3, 4]


def test_insert_after_tail_updates_tail():
    items = DoublyLinkedList([1, 2])
    items.insert_after(items.node_at(1), 3)
    assert list(reversed(items)) == [3, 2, 1]
    assert items.pop_back() == 3


def test_insert_after_none_raises():
    items = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        items.insert_after(None, 5)


def test_insert_after_foreign_node_raises():
    first = DoublyLinkedList([1])
    second = DoublyLinkedList([2])
    with pytest.raises(ValueError):
        second.insert_after(first.node_at(0), 5)


def test_node_at_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).node_at(2)


def test_pop_back_until_empty():
    values = [5, 6, 7]
    items = DoublyLinkedList(values)
    popped = [items.pop_back() for _ in values]
    assert popped == values[::-1]
    assert len(items) == 0
    assert list(items) == []
    with pytest.raises(IndexError):
        items.pop_back()


def test_render():
    assert DoublyLinkedList([1, 2]).render() == "1->2->NULL"
    assert DoublyLinkedList().render() == "list is empty"


def test_xor_list_example():
    items = XorLinkedList()
    for value in [10, 20, 30, 40]:
        items.insert(value)
    assert list(items) == [40, 30, 20, 10]
    assert list(reversed(items)) == [10, 20, 30, 40]


@pytest.mark.parametrize("values", [[], [1], list(range(30))])
def test_xor_list_directions_agree(values):
    items = XorLinkedList()
    for value in values:
        items.insert(value)
    assert list(items) == values[::-1]
    assert list(reversed(items)) == values