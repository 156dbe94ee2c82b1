"""Comparison sorts: merge sort and quick sort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Any


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using merge sort."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    left = merge_sort(values[:mid])
    right = merge_sort(values[mid:])
    return list(heapq.merge(left, right))


def _partition(values: list[Any], start: int, end: int) -> int:
    """Place values[start] at its final position within [start, end] and return it."""
    pivot = values[start]
    pivot_index = start + sum(1 for value in values[start + 1:end + 1] if value <= pivot)
    values[pivot_index], values[start] = values[start], values[pivot_index]

    left, right = start, end
    while left < pivot_index < right:
        while left < pivot_index and values[left] <= pivot:
            left += 1
        while right > pivot_index and values[right] > pivot:
            right -= 1
        if left < pivot_index < right:
            values[left], values[right] = values[right], values[left]
            left += 1
            right -= 1
    return pivot_index


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order, using quick sort.

    The first element of each range is the pivot.
    """
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = _partition(values, start, end)
        pending.append((start, pivot_index - 1))
        pending.append((pivot_index + 1, end))
    return values