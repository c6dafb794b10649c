"""Binary trees: construction from value streams, traversals and ancestor lookup."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

EMPTY = -1


@dataclass
class TreeNode:
    """A binary tree node; equal nodes have equal data and equal subtrees."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _is_empty(value: Any) -> bool:
    return value is None or value == EMPTY


def _take(stream: Iterator[Any]) -> Any:
    try:
        return next(stream)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values in preorder, where -1 (or None) marks a missing child."""
    stream = iter(values)

    def build() -> TreeNode | None:
        value = _take(stream)
        if _is_empty(value):
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_tree_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given level by level, -1 (or None) marking a missing child."""
    stream = iter(values)
    first = next(stream, None)
    if _is_empty(first):
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = _take(stream)
        if not _is_empty(left):
            node.left = TreeNode(left)
            pending.append(node.left)
        right = _take(stream)
        if not _is_empty(right):
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the tree's data level by level, each level from left to right."""
    levels: list[list[Any]] = []
    current = [] if root is None else [root]
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def reverse_level_order(root: TreeNode | None) -> list[Any]:
    """Return the data from the deepest level up to the root, each level left to right."""
    if root is None:
        return []
    order: list[Any] = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        order.append(node.data)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return order[::-1]


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the data in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, right, node order."""
    return list(_postorder(root))


def kth_ancestor(root: TreeNode | None, k: int, node: Any) -> Any:
    """Return the data of the ``k``-th ancestor of the node holding ``node``.

    Returns -1 when the tree is empty or the node has fewer than ``k`` ancestors.
    Nodes are identified by their data.
    """
    if root is None:
        return EMPTY
    parent: dict[Any, Any] = {root.data: EMPTY}
    pending = deque([root])
    while pending:
        current = pending.popleft()
        for child in (current.left, current.right):
            if child is not None:
                parent[child.data] = current.data
                pending.append(child)
    if node not in parent:
        raise ValueError(f"{node!r} is not in the tree")
    current_data = node
    while k > 0 and current_data != EMPTY:
        current_data = parent[current_data]
        k -= 1
    return current_data