"""Binary trees: building from value streams and the classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

SENTINEL = -1
"""Value that stands for a missing child in the input streams."""


@dataclass(eq=False)
class TreeNode:
    """A node holding data and links to its left and right children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values in preorder, with SENTINEL marking a missing node.

    Raises ValueError if the values end before the tree is complete.
    """
    stream = iter(values)

    def build() -> TreeNode | None:
        data = _take(stream)
        if data == SENTINEL:
            return None
        node = TreeNode(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_from_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given level by level, SENTINEL marking a missing child.

    The first value is the root; then each node in turn takes a left and a
    right value. Values left over once every node has its children are ignored.
    Raises ValueError if the values end too early.
    """
    stream = iter(values)
    data = _take(stream)
    if data == SENTINEL:
        return None
    root = TreeNode(data)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if left != SENTINEL:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _take(stream)
        if right != SENTINEL:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the data of the tree level by level, one list per level."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the data in node, left, right order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, right, node order."""
    result = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    result.reverse()
    return result