"""Binary search tree over the nodes of dsakit.binary_tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit import binary_tree
from dsakit.binary_tree import SENTINEL, TreeNode


class BinarySearchTree:
    """A binary search tree; values equal to a node go to its left."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree."""
        node = TreeNode(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value > current.data:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def delete(self, value: Any) -> bool:
        """Remove one occurrence of value; return whether one was found."""
        parent: TreeNode | None = None
        node = self.root
        while node is not None and node.data != value:
            parent = node
            node = node.left if node.data > value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.data = successor.data
            if successor_parent is node:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self.root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1
        return True

    def min_value(self) -> Any:
        """Return the smallest value; ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("min_value() of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.data

    def max_value(self) -> Any:
        """Return the largest value; ValueError if the tree is empty."""
        if self.root is None:
            raise ValueError("max_value() of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.data

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        return binary_tree.inorder(self.root)

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        return binary_tree.preorder(self.root)

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        return binary_tree.postorder(self.root)

    def level_order(self) -> list[list[Any]]:
        """Return the values level by level."""
        return binary_tree.level_order(self.root)

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if node.data == value:
                return True
            node = node.left if node.data > value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"


def from_values(values: Iterable[Any]) -> BinarySearchTree:
    """Build a tree by inserting values in order until SENTINEL is met."""
    tree = BinarySearchTree()
    for value in values:
        if value == SENTINEL:
            break
        tree.insert(value)
    return tree