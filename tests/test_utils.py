import pytest

from rpncalc.utils import Stack


def test_stack_order() -> None:
    stack: Stack[int] = Stack()
    assert stack.is_empty()
    for i in range(3):
        stack.push(i)
    assert len(stack) == 3
    assert stack.peek() == 2
    assert stack.pop() == 2
    assert stack.drain() == [1, 0]
    assert stack.is_empty()


def test_empty_stack_raises() -> None:
    stack: Stack[int] = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()
    assert stack.drain() == []
