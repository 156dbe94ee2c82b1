"""Singly linked list and loop detection on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A node holding data and a link to the next node."""

    data: Any
    next: Node | None = None


class SinglyLinkedList:
    """A singly linked list with head and tail references; positions count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, data: Any) -> None:
        """Put data in front of the list."""
        self.head = Node(data, self.head)
        if self.tail is None:
            self.tail = self.head
        self._size += 1

    def insert_at_tail(self, data: Any) -> None:
        """Put data at the end of the list."""
        node = Node(data)
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
            before.next = Node(data, before.next)
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the 1-based position and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            removed = self.head
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            before = self._node_at(position - 2)
            removed = before.next
            before.next = removed.next
            if removed is self.tail:
                self.tail = before
        removed.next = None
        self._size -= 1
        return removed.data

    def _node_at(self, index: int) -> Node:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def is_circular(head: Node | None) -> bool:
    """Tell whether following next from head leads back to head; an empty chain counts."""
    if head is None:
        return True
    seen = {head}
    node = head.next
    while node is not None and node not in seen:
        seen.add(node)
        node = node.next
    return node is head


def detect_loop(head: Node | None) -> bool:
    """Tell whether the chain starting at head contains a cycle."""
    seen: set[Node] = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False


def floyd_detect_loop(head: Node | None) -> Node | None:
    """Return the node where the slow and fast runners meet, or None without a cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def loop_start(head: Node | None) -> Node | None:
    """Return the first node of the cycle, or None if there is no cycle."""
    meeting = floyd_detect_loop(head)
    if meeting is None:
        return None
    node = head
    while node is not meeting:
        node = node.next
        meeting = meeting.next
    return node


def remove_loop(head: Node | None) -> None:
    """Break the cycle, if any, so the chain ends in None."""
    start = loop_start(head)
    if start is None:
        return
    node = start
    while node.next is not start:
        node = node.next
    node.next = None