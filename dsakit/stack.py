"""Fixed-capacity stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """A stack that holds at most `size` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        """Push element on top; StackOverflow if the stack is full."""
        if len(self._items) >= self.size:
            raise StackOverflow("stack is overflow")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element; StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it; StackUnderflow if empty."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack(size={self.size}, items={self._items!r})"