import pytest

from dsakit.stacks import ArrayStack, LinkedStack


def test_push_iterates_top_to_bottom():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push(10)
        stack.push(20)
        stack.push(30)
        assert list(stack) == [30, 20, 10]
        assert stack.peek() == 30


def test_pop_removes_top():
    for stack in (ArrayStack([10, 20, 30]), LinkedStack([10, 20, 30])):
        assert stack.pop() == 30
        assert list(stack) == [20, 10]
        assert len(stack) == 2
        assert stack.is_empty() is False


def test_empty_stack():
    for stack in (ArrayStack(), LinkedStack()):
        assert stack.is_empty() is True
        assert len(stack) == 0
        assert stack.pop() is None
        with pytest.raises(IndexError, match="Stack is empty"):
            stack.peek()


def test_pop_all_then_peek_fails():
    for stack in (ArrayStack([1, 2]), LinkedStack([1, 2])):
        assert stack.pop() == 2
        assert stack.pop() == 1
        assert stack.is_empty() is True
        with pytest.raises(IndexError):
            stack.peek()


def test_many_values_lifo():
    values = list(range(100))
    for stack in (ArrayStack(values), LinkedStack(values)):
        assert len(stack) == len(values)
        popped = [stack.pop() for _ in values]
        assert popped == values[::-1]
        assert stack.is_empty() is True


def test_str_top_to_bottom():
    assert str(ArrayStack([10, 20, 30])) == "30 20 10"
    assert str(LinkedStack([10, 20, 30])) == "30 20 10"