"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _partition(items: list[Any], low: int, high: int) -> int:
    """Place ``items[low]`` at its final position within ``low..high``."""
    pivot = items[low]
    count = sum(1 for value in items[low + 1 : high + 1] if value <= pivot)
    position = low + count
    items[low], items[position] = items[position], items[low]

    i, j = low, high
    while i < position < j:
        while i < position and items[i] <= pivot:
            i += 1
        while j > position and items[j] > pivot:
            j -= 1
        if i < position < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return position


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted with quicksort (first element as pivot)."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        position = _partition(result, low, high)
        pending.append((low, position - 1))
        pending.append((position + 1, high))
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeatedly bubbling the largest to the end."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by fixing the smallest value at each front slot."""
    result = list(items)
    for start in range(len(result)):
        for i in range(start + 1, len(result)):
            if result[start] > result[i]:
                result[start], result[i] = result[i], result[start]
    return result