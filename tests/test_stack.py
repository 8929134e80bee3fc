import pytest

from menustructs.stack import LinkedStack, StackUnderflowError


def test_push_pop_is_lifo():
    stack = LinkedStack()
    for item in [1, 2, 3]:
        stack.push(item)
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.is_empty()


def test_iteration_runs_top_down():
    stack = LinkedStack()
    for item in ["alpha", "beta", "gamma"]:
        stack.push(item)
    assert list(stack) == ["gamma", "beta", "alpha"]
    assert len(stack) == 3


def test_pop_empty_raises():
    stack = LinkedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_underflow_after_draining():
    stack = LinkedStack()
    stack.push("only")
    assert stack.pop() == "only"
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_length_tracks_operations():
    stack = LinkedStack()
    items = list(range(20))
    for item in items:
        stack.push(item)
    assert len(stack) == len(items)
    stack.pop()
    assert len(stack) == len(items) - 1
    assert not stack.is_empty()