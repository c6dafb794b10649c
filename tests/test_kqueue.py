import pytest

from dsakit.kqueue import KQueue, QueueEmptyError, QueueFullError


def test_source_scenario():
    q = KQueue(10, 3)
    q.push(10, 1)
    q.push(15, 1)
    q.push(20, 2)
    q.push(25, 1)
    assert q.pop(1) == 10
    assert q.pop(2) == 20
    assert q.pop(1) == 15
    assert q.pop(1) == 25
    with pytest.raises(QueueEmptyError):
        q.pop(1)


def test_queues_are_independent_and_fifo():
    q = KQueue(6, 2)
    first, second = ["a", "b", "c"], ["x", "y", "z"]
    for left, right in zip(first, second):
        q.push(left, 1)
        q.push(right, 2)
    assert [q.pop(2) for _ in second] == second
    assert [q.pop(1) for _ in first] == first


def test_full_raises_and_pop_frees_slot():
    q = KQueue(2, 1)
    q.push(1, 1)
    q.push(2, 1)
    with pytest.raises(QueueFullError):
        q.push(3, 1)
    assert q.pop(1) == 1
    q.push(3, 1)
    assert q.pop(1) == 2
    assert q.pop(1) == 3


def test_queue_reused_after_emptying():
    q = KQueue(3, 2)
    q.push("one", 2)
    assert q.pop(2) == "one"
    q.push("two", 2)
    q.push("three", 2)
    assert q.pop(2) == "two"
    assert q.pop(2) == "three"


def test_empty_queue_raises():
    with pytest.raises(QueueEmptyError):
        KQueue(4, 2).pop(2)


@pytest.mark.parametrize("queue", [0, 4, -1])
def test_bad_queue_number(queue):
    q = KQueue(4, 3)
    with pytest.raises(IndexError):
        q.push(1, queue)
    with pytest.raises(IndexError):
        q.pop(queue)


@pytest.mark.parametrize("n, k", [(0, 1), (1, 0), (-3, 2)])
def test_bad_sizes(n, k):
    with pytest.raises(ValueError):
        KQueue(n, k)