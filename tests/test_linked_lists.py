import pytest

from algolab.linked_lists import SinglyLinkedList, SortedLinkedList


def test_append_keeps_order():
    items = SinglyLinkedList([5, 9, 2])
    items.append(7)
    assert list(items) == [5, 9, 2, 7]
    assert len(items) == 4


def test_reverse_three_nodes():
    items = SinglyLinkedList([1, 2, 3])
    items.reverse()
    assert list(items) == [3, 2, 1]


@pytest.mark.parametrize("values", [[], [4], [1, 2], list(range(50))])
def test_reverse_matches_reversed(values):
    items = SinglyLinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    assert len(items) == len(values)


def test_double_reverse_is_identity():
    values = [3, 1, 4, 1, 5]
    items = SinglyLinkedList(values)
    items.reverse()
    items.reverse()
    assert list(items) == values


def test_append_after_reverse_goes_to_end():
    items = SinglyLinkedList([1, 2, 3])
    items.reverse()
    items.append(10)
    assert list(items) == [3, 2, 1, 10]


def test_render():
    assert SinglyLinkedList([1, 2]).render() == "1-> 2-> NULL"
    assert SinglyLinkedList().render() == "NULL"


def test_sorted_list_orders_items():
    values = [42, -3, 17, 0, 17, 8]
    items = SortedLinkedList(values)
    assert list(items) == sorted(values)
    assert len(items) == len(values)


def test_sorted_add_keeps_order():
    items = SortedLinkedList([10, 30])
    items.add(20)
    items.add(5)
    items.add(40)
    assert list(items) == [5, 10, 20, 30, 40]


def test_sorted_empty():
    items = SortedLinkedList()
    assert list(items) == []
    assert len(items) == 0