import pytest

from menustructs.queues import (
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_bounded_fifo_order(cls):
    queue = cls(5)
    for item in [10, 20, 30]:
        queue.enqueue(item)
    assert list(queue) == [10, 20, 30]
    assert queue.dequeue() == 10
    assert list(queue) == [20, 30]
    assert len(queue) == 2


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_bounded_default_capacity_is_five(cls):
    queue = cls()
    for item in ["a", "b", "c", "d", "e"]:
        queue.enqueue(item)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue("f")


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue, LinkedQueue])
def test_empty_dequeue_raises(cls):
    queue = cls()
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("cls", [LinearQueue, CircularQueue])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(0)


def test_linear_queue_does_not_reuse_slots_until_drained():
    queue = LinearQueue(3)
    for item in [1, 2, 3]:
        queue.enqueue(item)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert queue.dequeue() == 2
    assert queue.dequeue() == 3
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(4)
    assert list(queue) == [4]


def test_circular_queue_reuses_freed_slots():
    queue = CircularQueue(3)
    for item in [1, 2, 3]:
        queue.enqueue(item)
    assert queue.dequeue() == 1
    assert not queue.is_full()
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(5)


def test_circular_queue_wraps_repeatedly():
    queue = CircularQueue(2)
    for item in range(10):
        queue.enqueue(item)
        assert queue.dequeue() == item
    assert queue.is_empty()


def test_linked_queue_is_unbounded_and_ordered():
    queue = LinkedQueue()
    items = [f"item{n}" for n in range(50)]
    for item in items:
        queue.enqueue(item)
    assert len(queue) == len(items)
    assert list(queue) == items
    assert [queue.dequeue() for _ in items] == items
    assert queue.is_empty()


def test_iteration_is_a_snapshot():
    queue = LinkedQueue()
    queue.enqueue("x")
    queue.enqueue("y")
    seen = []
    for item in queue:
        seen.append(item)
        queue.enqueue("z")
    assert seen == ["x", "y"]