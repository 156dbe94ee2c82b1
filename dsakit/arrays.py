"""Array helpers: extremes, in-place reordering, sums and grid queries."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def get_max(items: Iterable[Any]) -> Any:
    """Return the largest element; ValueError if there is none."""
    return max(items)


def get_min(items: Iterable[Any]) -> Any:
    """Return the smallest element; ValueError if there is none."""
    return min(items)


def get_max_min(items: Iterable[Any]) -> tuple[Any, Any]:
    """Return (largest, smallest) in one pass; ValueError if there are no elements."""
    iterator = iter(items)
    try:
        largest = smallest = next(iterator)
    except StopIteration:
        raise ValueError("get_max_min() of an empty sequence") from None
    for value in iterator:
        largest = max(largest, value)
        smallest = min(smallest, value)
    return largest, smallest


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse items in place by swapping from both ends."""
    start, end = 0, len(items) - 1
    while start < end:
        items[start], items[end] = items[end], items[start]
        start += 1
        end -= 1


def swap_alternate(items: MutableSequence[Any]) -> None:
    """Swap each pair of neighbours (0 with 1, 2 with 3, ...) in place."""
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]


def array_sum(items: Iterable[int]) -> int:
    """Return the sum of the elements."""
    return sum(items)


def update_first(items: MutableSequence[Any], value: Any) -> None:
    """Replace the first element of items with value; IndexError if empty."""
    items[0] = value


def grid_contains(grid: Iterable[Iterable[Any]], target: Any) -> bool:
    """Tell whether target appears in any row of the grid."""
    return any(target in row for row in grid)


def row_sums(grid: Iterable[Sequence[int]]) -> list[int]:
    """Return the sum of each row of the grid."""
    return [sum(row) for row in grid]