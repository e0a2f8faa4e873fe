import pytest

from algolab.arrays import rotate_left, rotate_left_by_one


def test_source_example():
    assert rotate_left([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]


def test_rotation_by_zero_and_length_is_identity():
    values = [4, 8, 15, 16, 23, 42]
    assert rotate_left(values, 0) == values
    assert rotate_left(values, len(values)) == values


def test_rotation_larger_than_length_wraps():
    values = [1, 2, 3, 4, 5]
    for count in range(20):
        assert rotate_left(values, count) == rotate_left(values, count % len(values))


def test_repeated_single_rotations_match():
    values = list("abcdefg")
    current = values
    for count in range(1, 10):
        current = rotate_left_by_one(current)
        assert current == rotate_left(values, count)


def test_rotation_is_a_permutation():
    values = [9, 3, 7, 1]
    assert sorted(rotate_left(values, 3)) == sorted(values)


def test_input_not_mutated():
    values = [1, 2, 3]
    rotate_left(values, 1)
    assert values == [1, 2, 3]


def test_empty_input():
    assert rotate_left([], 3) == []
    assert rotate_left_by_one([]) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        rotate_left([1, 2], -1)