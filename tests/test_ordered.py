import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.ordered import OrderedMultiset, count_smaller


def test_source_example():
    s = OrderedMultiset()
    for value in (5, 5, 4, 4, 1, 2, 6):
        s.add(value)
    assert s.order_of_key(6) == 6
    assert s.find_by_order(1) == 2
    assert len(s) == 7


@pytest.mark.parametrize("index", [-1, 3])
def test_find_by_order_out_of_range(index):
    s = OrderedMultiset([1, 2, 3])
    with pytest.raises(IndexError):
        s.find_by_order(index)


@given(st.lists(st.integers(-50, 50), max_size=30), st.integers(-60, 60))
def test_rank_and_select_invariants(values, probe):
    s = OrderedMultiset(values)
    ordered = sorted(values)
    assert list(s) == ordered
    assert s.order_of_key(probe) == sum(1 for v in values if v < probe)
    for i, value in enumerate(ordered):
        assert s.find_by_order(i) == value
    assert (probe in s) == (probe in values)


def test_count_smaller_example():
    assert count_smaller([5, 2, 6, 1]) == [2, 1, 1, 0]


def test_count_smaller_empty():
    assert count_smaller([]) == []


@given(st.lists(st.integers(-20, 20), max_size=40))
def test_count_smaller_matches_pairwise_count(nums):
    result = count_smaller(nums)
    assert len(result) == len(nums)
    for i, count in enumerate(result):
        assert count == sum(1 for later in nums[i + 1 :] if later < nums[i])