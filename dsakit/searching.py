"""Searching helpers over sequences: binary, linear, pivot and sortedness checks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any

NOT_FOUND = -1


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in ascending ``items``, or -1 if absent.

    Like ``str.find``, a miss is reported as -1 rather than raised.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == key:
            return mid
        if key > value:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def find_pivot(items: Sequence[Any]) -> int:
    """Return the index where a rotated ascending sequence starts again.

    The search compares against the first element and converges on the first
    position whose value is not greater than it. An empty sequence gives 0.
    """
    low, high = 0, len(items) - 1
    while low < high:
        mid = low + (high - low) // 2
        if items[mid] > items[0]:
            low = mid + 1
        else:
            high = mid
    return low


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first occurrence of ``key``, or -1 if absent."""
    return next((index for index, value in enumerate(items) if value == key), NOT_FOUND)


def is_sorted(items: Sequence[Any]) -> bool:
    """Return True when ``items`` is in non-decreasing order."""
    return all(left <= right for left, right in pairwise(items))