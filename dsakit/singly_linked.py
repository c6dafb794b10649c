"""Singly linked list with 1-based positional edits and loop detection helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain; compared and hashed by identity."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class SinglyLinkedList:
    """A singly linked list keeping both head and tail references."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in _nodes(self.head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the first node."""
        self.head = Node(data, self.head)
        if self.tail is None:
            self.tail = self.head
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` after the last node."""
        node = Node(data)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def _node_at(self, position: int) -> Node:
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
        before.next = Node(data, before.next)
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its data."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range 1..{self._size}")
        if position == 1:
            removed = self.head
            assert removed is not None
            self.head = removed.next
            if self.head is None:
                self.tail = None
        else:
            before = self._node_at(position - 1)
            removed = before.next
            assert removed is not None
            before.next = removed.next
            if removed is self.tail:
                self.tail = before
        removed.next = None
        self._size -= 1
        return removed.data


def detect_loop(head: Node | None) -> bool:
    """Return True when following ``next`` from ``head`` revisits a node."""
    seen: set[Node] = set()
    node = head
    while node is not None:
        if node in seen:
            return True
        seen.add(node)
        node = node.next
    return False


def floyd_meeting_point(head: Node | None) -> Node | None:
    """Return the node where a slow and a fast walker meet, or None without a loop."""
    slow = fast = head
    while slow is not None and fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        slow = slow.next
        if slow is not None and slow is fast:
            return slow
    return None


def loop_start(head: Node | None) -> Node | None:
    """Return the first node of the loop reachable from ``head``, or None."""
    meeting = floyd_meeting_point(head)
    if meeting is None:
        return None
    slow = head
    while slow is not meeting:
        assert slow is not None and meeting is not None
        slow = slow.next
        meeting = meeting.next
    return slow


def remove_loop(head: Node | None) -> bool:
    """Break the loop reachable from ``head``; return whether one was found."""
    start = loop_start(head)
    if start is None:
        return False
    node = start
    while node.next is not start:
        assert node.next is not None
        node = node.next
    node.next = None
    return True