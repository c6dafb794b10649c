"""Doubly linked list with 1-based positional edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A node linked both ways; compared by identity."""

    data: Any
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list keeping both head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

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

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first node."""
        node = DoublyNode(data, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        node = DoublyNode(data, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def _node_at(self, position: int) -> DoublyNode:
        node = self.head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self.push_front(data)
            return
        if position == self._size + 1:
            self.push_back(data)
            return
        before = self._node_at(position - 1)
        after = before.next
        assert after is not None
        node = DoublyNode(data, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        node = self._node_at(position)
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