"""Binary search tree insertion and extremes, on top of the binary tree nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.binary_tree import TreeNode


def insert(root: TreeNode | None, data: Any) -> TreeNode:
    """Insert ``data`` and return the root; equal values go to the left."""
    new = TreeNode(data)
    if root is None:
        return new
    node = root
    while True:
        if data > node.data:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def build_bst(values: Iterable[Any]) -> TreeNode | None:
    """Insert the values one by one into an empty tree and return its root."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def min_node(root: TreeNode | None) -> TreeNode:
    """Return the node holding the smallest value."""
    if root is None:
        raise ValueError("empty tree has no minimum")
    node = root
    while node.left is not None:
        node = node.left
    return node


def max_node(root: TreeNode | None) -> TreeNode:
    """Return the node holding the largest value."""
    if root is None:
        raise ValueError("empty tree has no maximum")
    node = root
    while node.right is not None:
        node = node.right
    return node