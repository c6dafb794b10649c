import random

import pytest

from dsakit.sorting import bubble_sort, quick_sort, selection_sort

CASES = [
    ([], []),
    ([1], [1]),
    ([5, 2, 9, 1, 3], [1, 2, 3, 5, 9]),
    ([6, 83, 4, 651, 4], [4, 4, 6, 83, 651]),
    ([6, 8, 3, 5, 4], [3, 4, 5, 6, 8]),
    ([2, 2], [2, 2]),
    ([3, 5, 3, 1], [1, 3, 3, 5]),
    ([9, 8, 7, 6, 5, 4, 3, 2, 1], [1, 2, 3, 4, 5, 6, 7, 8, 9]),
    ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
    ([0, -1, 0, -1, 0], [-1, -1, 0, 0, 0]),
]


@pytest.mark.parametrize("items, expected", CASES)
def test_quick_sort_cases(items, expected):
    assert quick_sort(items) == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_bubble_sort_cases(items, expected):
    assert bubble_sort(items) == expected


@pytest.mark.parametrize("items, expected", CASES)
def test_selection_sort_cases(items, expected):
    assert selection_sort(items) == expected


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        items = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
        expected = sorted(items)
        assert quick_sort(items) == expected
        assert bubble_sort(items) == expected
        assert selection_sort(items) == expected


def test_input_left_untouched():
    items = [4, 1, 3, 2]
    assert quick_sort(items) == [1, 2, 3, 4]
    assert bubble_sort(items) == [1, 2, 3, 4]
    assert selection_sort(items) == [1, 2, 3, 4]
    assert items == [4, 1, 3, 2]


def test_accepts_any_iterable():
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert bubble_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert selection_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_quick_sort_large_sorted_input():
    items = list(range(3000))
    assert quick_sort(items) == items