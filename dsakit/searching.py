"""Searching in sequences: binary, linear, bounds and rotation pivot."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of key in the sorted sequence, or -1 if it is absent."""
    start, end = 0, len(items) - 1
    while start <= end:
        mid = (start + end) // 2
        if items[mid] == key:
            return mid
        if key > items[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def first_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first key in the sorted sequence, or -1."""
    index = bisect.bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return -1


def last_occurrence(items: Sequence[Any], key: Any) -> int:
    """Return the index of the last key in the sorted sequence, or -1."""
    index = bisect.bisect_right(items, key) - 1
    if index >= 0 and items[index] == key:
        return index
    return -1


def recursive_binary_search(items: Sequence[Any], key: Any) -> bool:
    """Tell whether key is in the sorted sequence, searching recursively."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = low + (high - low) // 2
        if items[mid] == key:
            return True
        if items[mid] < key:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(items) - 1)


def linear_search(items: Iterable[Any], key: Any) -> bool:
    """Tell whether key occurs anywhere in items."""
    return any(item == key for item in items)


def find_pivot(items: Sequence[Any]) -> int:
    """Return the index of the smallest element of a rotated ascending sequence.

    Raises ValueError for an empty sequence.
    """
    if not items:
        raise ValueError("find_pivot() of an empty sequence")
    first = items[0]
    start, end = 0, len(items) - 1
    while start < end:
        mid = start + (end - start) // 2
        if items[mid] >= first:
            start = mid + 1
        else:
            end = mid
    return start


def lower_bound(items: Sequence[Any], key: Any) -> int:
    """Return the first index whose element is not less than key."""
    return bisect.bisect_left(items, key)


def upper_bound(items: Sequence[Any], key: Any) -> int:
    """Return the first index whose element is greater than key."""
    return bisect.bisect_right(items, key)