"""Array and string exercises."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import groupby, islice
from typing import Any

_MAX_RUN = 2


def remove_duplicates(nums: Iterable[Any]) -> list[Any]:
    """Return ``nums`` with each run of equal values cut to at most two items."""
    return [value for _, run in groupby(nums) for value in islice(run, _MAX_RUN)]


def swap_alternate(items: Iterable[Any]) -> list[Any]:
    """Return a copy with each adjacent pair (0,1), (2,3), ... swapped."""
    result = list(items)
    result[0:-1:2], result[1::2] = result[1::2], result[0:-1:2]
    return result


def sum_of_window_min_max(items: Sequence[int], k: int) -> int:
    """Return the sum of max plus min over every window of size ``k``."""
    if not 1 <= k <= len(items):
        raise ValueError(f"window size must be between 1 and {len(items)}, got {k}")
    largest: deque[int] = deque()
    smallest: deque[int] = deque()
    total = 0
    for index, value in enumerate(items):
        while largest and index - largest[0] >= k:
            largest.popleft()
        while smallest and index - smallest[0] >= k:
            smallest.popleft()
        while largest and items[largest[-1]] <= value:
            largest.pop()
        while smallest and items[smallest[-1]] >= value:
            smallest.pop()
        largest.append(index)
        smallest.append(index)
        if index >= k - 1:
            total += items[largest[0]] + items[smallest[0]]
    return total


def same_character_type(first: str, second: str) -> bool:
    """Return True when each string is made of a single repeated character."""
    return len(set(first)) == 1 and len(set(second)) == 1


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]