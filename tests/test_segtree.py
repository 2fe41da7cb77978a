import math
import operator

import pytest

from algolib.segtree import RangeAddTree, SegmentTree, min_tree, sum_tree

VALUES = [3, 2, 4, 5, 1, 1, 5, 3]


def _ranges(n):
    return [(left, right) for left in range(n) for right in range(left, n)]


def test_min_tree_matches_slices():
    tree = min_tree(VALUES)
    for left, right in _ranges(len(VALUES)):
        assert tree.query(left, right) == min(VALUES[left : right + 1])


def test_sum_tree_matches_slices():
    tree = sum_tree(VALUES)
    for left, right in _ranges(len(VALUES)):
        assert tree.query(left, right) == sum(VALUES[left : right + 1])


def test_updates_are_seen_by_queries():
    values = list(VALUES)
    mins, sums = min_tree(values), sum_tree(values)
    for index, value in [(3, 0), (0, 9), (7, -2), (4, 6)]:
        values[index] = value
        mins.update(index, value)
        sums.update(index, value)
        for left, right in _ranges(len(values)):
            assert mins.query(left, right) == min(values[left : right + 1])
            assert sums.query(left, right) == sum(values[left : right + 1])


def test_non_commutative_combine_keeps_order():
    letters = list("segment")
    tree = SegmentTree(letters, operator.add, "")
    for left, right in _ranges(len(letters)):
        assert tree.query(left, right) == "".join(letters[left : right + 1])


def test_empty_range_gives_identity():
    assert sum_tree(VALUES).query(5, 4) == 0
    assert min_tree(VALUES).query(2, 1) == math.inf


def test_single_element_tree():
    tree = sum_tree([42])
    assert tree.query(0, 0) == 42
    tree.update(0, 7)
    assert tree.query(0, 0) == 7


def test_out_of_range_positions_raise():
    tree = sum_tree(VALUES)
    with pytest.raises(IndexError):
        tree.query(0, len(VALUES))
    with pytest.raises(IndexError):
        tree.update(-1, 0)


def test_range_add_tree_starts_with_values():
    tree = RangeAddTree(VALUES)
    assert [tree.value_at(i) for i in range(len(VALUES))] == VALUES


def test_range_adds_accumulate():
    values = list(VALUES)
    tree = RangeAddTree(values)
    for left, right, delta in [(1, 4, 5), (0, 7, -1), (6, 7, 10), (3, 3, 2)]:
        tree.add_range(left, right, delta)
        for i in range(left, right + 1):
            values[i] += delta
        assert [tree.value_at(i) for i in range(len(values))] == values


def test_range_add_to_end_of_array():
    tree = RangeAddTree([0, 0, 0])
    tree.add_range(1, 2, 4)
    assert [tree.value_at(i) for i in range(3)] == [0, 4, 4]


def test_range_add_bad_bounds_raise():
    tree = RangeAddTree(VALUES)
    with pytest.raises(IndexError):
        tree.value_at(len(VALUES))
    with pytest.raises(IndexError):
        tree.add_range(0, len(VALUES), 1)
    with pytest.raises(ValueError):
        tree.add_range(4, 2, 1)


def test_lengths():
    assert len(sum_tree(VALUES)) == len(VALUES)
    assert len(RangeAddTree(VALUES)) == len(VALUES)