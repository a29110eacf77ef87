import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.arrays import linear_search, reverse_in_place, smallest_and_largest

SOURCE_VALUES = [5, 15, 1, 5, -15, 24]


@pytest.mark.parametrize("target", SOURCE_VALUES)
def test_linear_search_returns_first_occurrence(target):
    assert linear_search(SOURCE_VALUES, target) == SOURCE_VALUES.index(target)


def test_linear_search_missing_value_gives_minus_one():
    assert linear_search(SOURCE_VALUES, 100) == -1


def test_linear_search_empty_sequence():
    assert linear_search([], 1) == -1


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_linear_search_agrees_with_membership(values, target):
    result = linear_search(values, target)
    if target in values:
        assert values[result] == target
        assert target not in values[:result]
    else:
        assert result == -1


def test_reverse_source_array():
    values = list(SOURCE_VALUES)
    reverse_in_place(values)
    assert values == SOURCE_VALUES[::-1]


@given(st.lists(st.integers()))
def test_reverse_matches_slice_reversal(values):
    original = list(values)
    reverse_in_place(values)
    assert values == original[::-1]


@given(st.lists(st.integers()))
def test_reverse_twice_is_identity(values):
    original = list(values)
    reverse_in_place(values)
    reverse_in_place(values)
    assert values == original


def test_smallest_and_largest_source_array():
    (smallest, smallest_index), (largest, largest_index) = smallest_and_largest(SOURCE_VALUES)
    assert smallest == min(SOURCE_VALUES)
    assert SOURCE_VALUES[smallest_index] == smallest
    assert largest == max(SOURCE_VALUES)
    assert SOURCE_VALUES[largest_index] == largest


def test_smallest_and_largest_single_element():
    assert smallest_and_largest([7]) == ((7, 0), (7, 0))


def test_smallest_and_largest_reports_first_position_of_ties():
    values = [3, 9, 1, 9, 1]
    (smallest, smallest_index), (largest, largest_index) = smallest_and_largest(values)
    assert smallest_index == values.index(smallest)
    assert largest_index == values.index(largest)


@given(st.lists(st.integers(), min_size=1))
def test_smallest_and_largest_agrees_with_builtins(values):
    (smallest, smallest_index), (largest, largest_index) = smallest_and_largest(values)
    assert smallest == min(values)
    assert largest == max(values)
    assert smallest_index == values.index(smallest)
    assert largest_index == values.index(largest)


def test_smallest_and_largest_empty_raises():
    with pytest.raises(ValueError):
        smallest_and_largest([])