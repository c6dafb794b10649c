"""Circular singly linked list addressed through its tail node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class CircularNode:
    """A node of a circular chain; compared by identity."""

    data: Any
    next: CircularNode | None = field(default=None, repr=False)


class CircularLinkedList:
    """A circular list; ``tail.next`` is the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.tail: CircularNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> CircularNode | None:
        return None if self.tail is None else self.tail.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        head = self.head
        node = head
        for _ in range(self._size):
            assert node is not None
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, data: Any) -> None:
        """Insert ``data`` as the new head."""
        node = CircularNode(data)
        if self.tail is None:
            node.next = node
            self.tail = node
        else:
            node.next = self.tail.next
            self.tail.next = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Insert ``data`` as the new tail."""
        self.push_front(data)
        assert self.tail is not None
        self.tail = self.tail.next

    def insert(self, position: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at 1-based ``position`` from the head."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self.push_front(data)
            return
        current = self.head
        for _ in range(position - 2):
            assert current is not None
            current = current.next
        assert current is not None
        node = CircularNode(data, current.next)
        current.next = node
        if current is self.tail:
            self.tail = node
        self._size += 1

    def insert_after(self, element: Any, data: Any) -> None:
        """Insert ``data`` after the first node holding ``element``, searching from the tail.

        The tail reference is left in place, so inserting after the tail node
        makes the new node the head. On an empty list the node becomes the only one.
        """
        if self.tail is None:
            self.push_front(data)
            return
        current = self.tail
        for _ in range(self._size):
            if current.data == element:
                break
            assert current.next is not None
            current = current.next
        else:
            raise ValueError(f"{element!r} is not in the list")
        current.next = CircularNode(data, current.next)
        self._size += 1

    def remove(self, value: Any) -> None:
        """Remove the first node from the head holding ``value``."""
        if self.tail is None:
            raise ValueError("list is empty")
        previous = self.tail
        current = previous.next
        for _ in range(self._size):
            assert current is not None
            if current.data == value:
                break
            previous, current = current, current.next
        else:
            raise ValueError(f"{value!r} is not in the list")
        assert current is not None
        previous.next = current.next
        if current is previous:
            self.tail = None
        elif current is self.tail:
            self.tail = previous
        current.next = None
        self._size -= 1


def is_circular(head: CircularNode | None) -> bool:
    """Return True when following ``next`` from ``head`` comes back to it.

    An empty chain counts as circular.
    """
    if head is None:
        return True
    node = head.next
    while node is not None and node is not head:
        node = node.next
    return node is head