"""Small classic functions: factorial, palindromes, sortedness, sums."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any


def factorial(n: int) -> int:
    """Return n!; any n of 1 or less gives 1."""
    return math.prod(range(2, n + 1))


def is_palindrome(text: Sequence[Any]) -> bool:
    """Tell whether text reads the same forwards and backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def is_sorted(items: Iterable[Any]) -> bool:
    """Tell whether items are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(items))


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def recursive_sum(items: Iterable[int]) -> int:
    """Return the sum of items; an empty input sums to 0."""
    return sum(items)


def add(a: int, b: int) -> int:
    """Return a + b."""
    return a + b