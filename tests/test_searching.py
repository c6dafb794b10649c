import pytest

from dsakit.searching import binary_search, find_pivot, is_sorted, linear_search


def test_binary_search_source_example():
    assert binary_search([0, 1, 2, 3, 2, 1, 0], 2) == 2


@pytest.mark.parametrize("items", [[1], [2, 5, 6, 9, 10, 14], list(range(0, 100, 3))])
def test_binary_search_finds_every_element(items):
    for value in items:
        assert items[binary_search(items, value)] == value


@pytest.mark.parametrize("key", [-5, 4, 100])
def test_binary_search_missing_key(key):
    assert binary_search([0, 1, 2, 3, 5, 8, 13], key) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


def test_find_pivot_source_example():
    assert find_pivot([2, 2, 2, 3, 2, 2, 2]) == 4


def test_find_pivot_empty():
    assert find_pivot([]) == 0


def test_linear_search_source_example():
    items = [1, 2, 3, 4, 5]
    assert items[linear_search(items, 4)] == 4


def test_linear_search_returns_first_occurrence():
    items = [7, 3, 9, 3, 7]
    for value in set(items):
        assert linear_search(items, value) == items.index(value)


def test_linear_search_missing():
    assert linear_search([1, 2, 3], 9) == -1
    assert linear_search([], 9) == -1


@pytest.mark.parametrize("items", [[], [1], [1, 1, 2, 3], [-3, 0, 0, 8]])
def test_is_sorted_true(items):
    assert is_sorted(items) is True


@pytest.mark.parametrize("items", [[2, 1], [1, 3, 2], [5, 5, 4]])
def test_is_sorted_false(items):
    assert is_sorted(items) is False