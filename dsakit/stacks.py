"""Bounded stacks backed by a list and by a linked chain."""

from __future__ import annotations

from typing import Any

from dsakit.singly_linked import Node


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` values in a list."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError(f"stack is full ({self.capacity} items)")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return not self._items


class LinkedStack:
    """A stack holding at most ``capacity`` values in linked nodes."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._top: Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def is_full(self) -> bool:
        """Return True when no more values fit."""
        return self._count == self.capacity

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._top is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow for {value!r}")
        self._top = Node(value, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        removed = self._top
        self._top = removed.next
        removed.next = None
        self._count -= 1
        return removed.data

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data