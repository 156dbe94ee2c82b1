"""Fixed-capacity linear queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmpty(IndexError):
    """Raised when dequeueing or peeking an empty queue."""


class ArrayQueue:
    """A linear queue over `size` slots.

    Slots are not reused until the queue is emptied, so after dequeues the
    queue can report full while holding fewer than `size` elements.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: deque[Any] = deque()
        self._used = 0

    def enqueue(self, data: Any) -> None:
        """Add data at the rear; QueueFull when no slot is left."""
        if self._used == self.size:
            raise QueueFull("Queue is Full")
        self._items.append(data)
        self._used += 1

    def dequeue(self) -> Any:
        """Remove and return the front element; QueueEmpty if empty."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        value = self._items.popleft()
        if not self._items:
            self._used = 0
        return value

    def peek(self) -> Any:
        """Return the front element without removing it; QueueEmpty if empty."""
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue(size={self.size}, items={list(self._items)!r})"