import pytest

from dsakit.stacks import ArrayStack, LinkedStack, StackOverflowError, StackUnderflowError


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_push_pop_peek(cls):
    stack = cls(5)
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.pop() == 30
    assert stack.peek() == 20
    assert len(stack) == 2


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_overflow(cls):
    stack = cls(5)
    for value in (10, 20, 30, 40, 50):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(60)
    assert stack.pop() == 50


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_underflow(cls):
    stack = cls(2)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


@pytest.mark.parametrize("cls", [ArrayStack, LinkedStack])
def test_lifo_round_trip(cls):
    values = [2, 3, 7, 1]
    stack = cls(len(values))
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]


def test_array_stack_empty_flag():
    stack = ArrayStack(2)
    assert stack.empty() is True
    stack.push(2)
    assert stack.empty() is False
    stack.pop()
    assert stack.empty() is True


def test_linked_stack_flags():
    stack = LinkedStack(1)
    assert stack.is_empty() is True
    assert stack.is_full() is False
    stack.push(10)
    assert stack.is_full() is True
    assert stack.is_empty() is False
    stack.pop()
    assert stack.is_full() is False
    stack.push(20)
    assert stack.peek() == 20


def test_negative_capacity():
    with pytest.raises(ValueError):
        ArrayStack(-1)
    with pytest.raises(ValueError):
        LinkedStack(-1)