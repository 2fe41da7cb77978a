import pytest

from algolib.dsu import DisjointSet


def test_every_node_starts_alone():
    ds = DisjointSet(5)
    assert [ds.find(v) for v in range(5)] == list(range(5))


def test_union_by_rank_tie_keeps_first_root():
    ds = DisjointSet(3)
    assert ds.union_by_rank(0, 1) is True
    assert ds.find(1) == 0
    assert ds.find(0) == 0


def test_union_by_rank_hangs_lower_rank_below():
    ds = DisjointSet(4)
    ds.union_by_rank(0, 1)
    ds.union_by_rank(2, 0)
    assert ds.find(2) == ds.find(0) == ds.find(1) == 0


def test_union_by_size_tie_keeps_first_root():
    ds = DisjointSet(2)
    ds.union_by_size(1, 0)
    assert ds.find(0) == 1


def test_union_by_size_smaller_set_goes_below():
    ds = DisjointSet(3)
    ds.union_by_size(1, 2)
    ds.union_by_size(0, 1)
    assert ds.find(0) == ds.find(2) == 1


def test_union_of_same_set_reports_false():
    ds = DisjointSet(3)
    ds.union_by_size(0, 1)
    assert ds.union_by_size(1, 0) is False
    assert ds.union_by_rank(0, 1) is False


def test_chain_of_unions_joins_everything():
    ds = DisjointSet(10)
    for v in range(9):
        ds.union_by_rank(v, v + 1)
    roots = {ds.find(v) for v in range(10)}
    assert len(roots) == 1


def test_separate_groups_stay_apart():
    ds = DisjointSet(6)
    ds.union_by_size(0, 2)
    ds.union_by_size(2, 4)
    ds.union_by_size(1, 3)
    assert ds.find(4) == ds.find(0)
    assert ds.find(3) == ds.find(1)
    assert ds.find(0) != ds.find(1)
    assert ds.find(5) == 5


def test_out_of_range_node_raises():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(IndexError):
        ds.union_by_rank(-1, 0)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_length_is_node_count():
    assert len(DisjointSet(7)) == 7