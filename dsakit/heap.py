"""A max-heap and heap sort over Python lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def heapify(items: list[Any], n: int, i: int) -> None:
    """Sift ``items[i]`` down within the first ``n`` items so that subtree is a max-heap."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted with a max-heap."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        heapify(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


class MaxHeap:
    """A binary max-heap; iteration yields the values in storage order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, value: Any) -> None:
        """Add ``value``, sifting it up to its place."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            heapify(self._items, len(self._items), 0)
        return top