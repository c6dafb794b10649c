"""Several FIFO queues sharing one fixed-size array."""

from __future__ import annotations

from typing import Any

_NONE = -1


class QueueFullError(Exception):
    """Raised when no free slot is left for a push."""


class QueueEmptyError(Exception):
    """Raised when popping from a queue that holds nothing."""


class KQueue:
    """``k`` queues, numbered from 1, sharing ``n`` slots through a free list."""

    def __init__(self, n: int, k: int) -> None:
        if n < 1 or k < 1:
            raise ValueError("both the slot count and the queue count must be positive")
        self.n = n
        self.k = k
        self._values: list[Any] = [None] * n
        self._next = [*range(1, n), _NONE]
        self._front = [_NONE] * k
        self._rear = [_NONE] * k
        self._free = 0

    def _slot(self, queue: int) -> int:
        if not 1 <= queue <= self.k:
            raise IndexError(f"queue {queue} out of range 1..{self.k}")
        return queue - 1

    def push(self, value: Any, queue: int) -> None:
        """Append ``value`` to the given queue."""
        q = self._slot(queue)
        if self._free == _NONE:
            raise QueueFullError("no empty space is left")
        index = self._free
        self._free = self._next[index]
        if self._front[q] == _NONE:
            self._front[q] = index
        else:
            self._next[self._rear[q]] = index
        self._next[index] = _NONE
        self._rear[q] = index
        self._values[index] = value

    def pop(self, queue: int) -> Any:
        """Remove and return the oldest value of the given queue."""
        q = self._slot(queue)
        index = self._front[q]
        if index == _NONE:
            raise QueueEmptyError(f"queue {queue} is empty")
        self._front[q] = self._next[index]
        self._next[index] = self._free
        self._free = index
        value = self._values[index]
        self._values[index] = None
        return value