"""Doubly linked list with head and tail references."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A node holding data and links to its neighbours."""

    data: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


class DoublyLinkedList:
    """A doubly linked list; positions count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, data: Any) -> None:
        """Put data in front of the list."""
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def insert_at_tail(self, data: Any) -> None:
        """Put data at the end of the list."""
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def insert_at_position(self, position: int, data: Any) -> None:
        """Insert data so that it ends up at the given 1-based position."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_at_head(data)
        elif position == self._size + 1:
            self.insert_at_tail(data)
        else:
            before = self._node_at(position - 2)
            node = DoublyNode(data, prev=before, next=before.next)
            before.next.prev = node
            before.next = node
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        node = self._node_at(position - 1)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.data

    def _node_at(self, index: int) -> DoublyNode:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"