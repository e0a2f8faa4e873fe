import pytest

from algolab.trees import BinarySearchTree


@pytest.fixture
def sample():
    return BinarySearchTree([2, 1, 4, 3, 5])


def test_documented_example_inorder(sample):
    assert sample.inorder() == [1, 2, 3, 4, 5]


def test_documented_example_preorder(sample):
    assert sample.preorder() == [2, 1, 4, 3, 5]


def test_documented_example_postorder(sample):
    assert sample.postorder() == [1, 3, 5, 4, 2]


def test_iterative_inorder_matches_recursive_order(sample):
    assert sample.inorder_iterative() == sample.inorder()


@pytest.mark.parametrize(
    "values",
    [[7, 3, 9, 1, 5, 8, 10], [5, 5, 5, 2, 8, 2], [-4, 0, 12, -4, 6], [42]],
)
def test_inorder_is_sorted(values):
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)
    assert tree.inorder_iterative() == sorted(values)
    assert len(tree) == len(values)


def test_duplicates_go_left():
    tree = BinarySearchTree([2, 3, 2])
    assert tree.preorder() == [2, 2, 3]


def test_duplicates_ignored_when_not_allowed():
    values = [5, 3, 8, 3, 5, 8, 1]
    tree = BinarySearchTree(values, allow_duplicates=False)
    assert len(tree) == len(set(values))
    assert tree.inorder() == sorted(set(values))


def test_insert_reports_dropped_duplicate():
    tree = BinarySearchTree([5], allow_duplicates=False)
    assert tree.insert(5) is False
    assert tree.insert(6) is True
    assert len(tree) == 2


def test_no_duplicates_preorder():
    tree = BinarySearchTree([5, 3, 8], allow_duplicates=False)
    assert tree.preorder() == [5, 3, 8]


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert tree.inorder() == []
    assert tree.inorder_iterative() == []
    assert tree.preorder() == []
    assert tree.postorder() == []


def test_degenerate_tree_is_traversed_without_recursion_limit():
    values = list(range(3000))
    tree = BinarySearchTree(values)
    assert tree.inorder() == values
    assert tree.inorder_iterative() == values
    assert tree.preorder() == values
    assert tree.postorder() == values[::-1]


def test_root_first_in_preorder_last_in_postorder():
    values = [10, 4, 15, 2, 7, 12, 20]
    tree = BinarySearchTree(values)
    assert tree.preorder()[0] == values[0]
    assert tree.postorder()[-1] == values[0]
    assert sorted(tree.preorder()) == sorted(values)