"""Circular singly linked list addressed through its tail."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from dsakit.singly_linked import Node


class CircularLinkedList:
    """A ring of nodes; iteration starts at the tail and goes round once."""

    def __init__(self) -> None:
        self.tail: Node | None = None
        self._size = 0

    def insert_after(self, element: Any, data: Any) -> None:
        """Insert data after the first node holding element, searching from the tail.

        In an empty list the new node becomes the only one, whatever element is.
        """
        if self.tail is None:
            node = Node(data)
            node.next = node
            self.tail = node
            self._size = 1
            return
        current = self._find(element)
        if current is None:
            raise ValueError(f"{element!r} is not in the list")
        current.next = Node(data, current.next)
        self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding value, searching from the node after the tail."""
        if self.tail is None:
            raise ValueError("list is empty")
        prev = self.tail
        current = prev.next
        for _ in range(self._size):
            if current.data == value:
                break
            prev, current = current, current.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        prev.next = current.next
        if current is prev:
            self.tail = None
        elif current is self.tail:
            self.tail = prev
        current.next = None
        self._size -= 1

    def _find(self, element: Any) -> Node | None:
        node = self.tail
        for _ in range(self._size):
            if node.data == element:
                return node
            node = node.next
        return None

    def __iter__(self) -> Iterator[Any]:
        node = self.tail
        for _ in range(self._size):
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"