import pytest

from dsakit.heap import MaxHeap, heap_sort, heapify

SOURCE_VALUES = [50, 55, 53, 52, 54]


def _is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


def test_insert_layout_matches_source_example():
    assert list(MaxHeap(SOURCE_VALUES)) == [55, 54, 53, 50, 52]


@pytest.mark.parametrize("values", [SOURCE_VALUES, [1], [3, 1, 2, 3, 0, -4], list(range(20))])
def test_insert_keeps_heap_property(values):
    layout = list(MaxHeap(values))
    assert sorted(layout) == sorted(values)
    assert layout[0] == max(values)
    for i in range(1, len(layout)):
        assert layout[(i - 1) // 2] >= layout[i]


@pytest.mark.parametrize("values", [SOURCE_VALUES, [7, 7, 1, 9, 2], list(range(15, 0, -3))])
def test_pop_returns_descending(values):
    heap = MaxHeap(values)
    popped = [heap.pop() for _ in range(len(values))]
    assert popped == sorted(values, reverse=True)
    assert len(heap) == 0


def test_peek_is_maximum():
    heap = MaxHeap(SOURCE_VALUES)
    assert heap.peek() == max(SOURCE_VALUES)
    assert len(heap) == len(SOURCE_VALUES)


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_heapify_builds_heap():
    items = [54, 53, 55, 52, 50, 1, 99]
    for i in range(len(items) // 2 - 1, -1, -1):
        heapify(items, len(items), i)
    assert _is_max_heap(items)
    assert items[0] == 99


def test_heapify_respects_limit():
    items = [1, 2, 100]
    heapify(items, 2, 0)
    assert items == [2, 1, 100]


@pytest.mark.parametrize(
    "values",
    [[54, 53, 55, 52, 50], [], [1], [2, 1], [5, 3, 5, 1, 3, 9, -2], list(range(10, 0, -1))],
)
def test_heap_sort(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_leaves_input_alone():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]