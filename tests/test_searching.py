import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    binary_search,
    find_pivot,
    first_occurrence,
    last_occurrence,
    linear_search,
    lower_bound,
    recursive_binary_search,
    upper_bound,
)

EVEN = [2, 4, 6, 8, 12, 18]
sorted_lists = st.lists(st.integers(min_value=-20, max_value=20), max_size=50).map(sorted)


def test_binary_search_missing_key():
    assert binary_search(EVEN, 30) == -1


def test_binary_search_finds_every_element():
    for position, value in enumerate(EVEN):
        assert binary_search(EVEN, value) == position


@given(sorted_lists, st.integers(min_value=-25, max_value=25))
def test_binary_search_result_is_consistent(data, key):
    index = binary_search(data, key)
    if key in data:
        assert data[index] == key
    else:
        assert index == -1


def test_first_and_last_occurrence_sample():
    data = [1, 2, 3, 3, 5]
    first = first_occurrence(data, 3)
    last = last_occurrence(data, 3)
    assert data[first] == data[last] == 3
    assert data[first - 1] < 3
    assert data[last + 1] > 3
    assert last - first + 1 == data.count(3)


@given(sorted_lists, st.integers(min_value=-25, max_value=25))
def test_occurrence_bounds(data, key):
    first = first_occurrence(data, key)
    last = last_occurrence(data, key)
    if key in data:
        assert first == data.index(key)
        assert last == len(data) - 1 - data[::-1].index(key)
    else:
        assert first == last == -1


def test_recursive_binary_search_sample():
    data = [2, 4, 6, 10, 14, 16]
    assert recursive_binary_search(data, 18) is False
    assert all(recursive_binary_search(data, value) for value in data)
    assert recursive_binary_search([], 1) is False


@given(sorted_lists, st.integers(min_value=-25, max_value=25))
def test_recursive_binary_search_matches_membership(data, key):
    assert recursive_binary_search(data, key) == (key in data)


def test_linear_search():
    data = [2, 9, 6, 8, 9]
    assert linear_search(data, 2) is True
    assert linear_search(data, 7) is False
    assert linear_search([], 2) is False


def test_find_pivot_sample():
    data = [8, 10, 17, 1, 3]
    assert data[find_pivot(data)] == min(data)


@given(st.lists(st.integers(), min_size=2, max_size=50, unique=True), st.integers(min_value=0, max_value=48))
def test_find_pivot_of_rotation(data, shift):
    ordered = sorted(data)
    shift = 1 + shift % (len(ordered) - 1)
    rotated = ordered[shift:] + ordered[:shift]
    assert find_pivot(rotated) == len(ordered) - shift
    assert rotated[find_pivot(rotated)] == ordered[0]


def test_find_pivot_empty_raises():
    with pytest.raises(ValueError):
        find_pivot([])


def test_bounds_sample():
    data = [1, 3, 6, 7]
    assert data[lower_bound(data, 6)] == 6
    index = upper_bound(data, 4)
    assert data[index - 1] <= 4 < data[index]


@given(sorted_lists, st.integers(min_value=-25, max_value=25))
def test_bounds_partition(data, key):
    low = lower_bound(data, key)
    high = upper_bound(data, key)
    assert all(value < key for value in data[:low])
    assert all(value >= key for value in data[low:])
    assert all(value <= key for value in data[:high])
    assert all(value > key for value in data[high:])
    assert high - low == data.count(key)