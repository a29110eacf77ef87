import pytest

from dsakit.stack import BoundedStack, StackOverflow, StackUnderflow


def test_new_stack_is_empty():
    stack = BoundedStack(4)
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0


def test_fills_up_to_capacity():
    stack = BoundedStack(4)
    stack.push(10)
    stack.push(20)
    assert not stack.is_full()
    stack.push(30)
    stack.push(40)
    assert stack.is_full()
    assert len(stack) == 4


def test_push_when_full_raises_and_keeps_contents():
    stack = BoundedStack(4)
    for value in (10, 20, 30, 40):
        stack.push(value)
    with pytest.raises(StackOverflow):
        stack.push(50)
    assert list(stack) == [40, 30, 20, 10]


def test_iteration_is_top_to_bottom():
    stack = BoundedStack(3)
    pushed = [1, 2, 3]
    for value in pushed:
        stack.push(value)
    assert list(stack) == pushed[::-1]


def test_pop_returns_in_lifo_order():
    stack = BoundedStack(4)
    pushed = [10, 20, 30, 40]
    for value in pushed:
        stack.push(value)
    popped = [stack.pop() for _ in range(len(pushed))]
    assert popped == pushed[::-1]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = BoundedStack(2)
    stack.push(7)
    assert stack.peek() == 7
    assert stack.peek() == 7
    assert len(stack) == 1


def test_pop_empty_raises():
    with pytest.raises(StackUnderflow):
        BoundedStack(1).pop()


def test_peek_empty_raises():
    stack = BoundedStack(1)
    stack.push(5)
    stack.pop()
    with pytest.raises(StackUnderflow):
        stack.peek()


def test_underflow_and_overflow_are_index_errors():
    with pytest.raises(IndexError):
        BoundedStack(0).push(1)


def test_zero_capacity_is_full_and_empty():
    stack = BoundedStack(0)
    assert stack.is_full()
    assert stack.is_empty()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_space_is_reusable_after_pop():
    stack = BoundedStack(1)
    stack.push("a")
    assert stack.pop() == "a"
    stack.push("b")
    assert stack.peek() == "b"