import pytest

from dsakit.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_fifo_order():
    for q in (ArrayQueue(), CircularQueue(), LinkedQueue()):
        for value in (10, 20, 30):
            q.enqueue(value)
        assert list(q) == [10, 20, 30]
        assert q.front() == 10
        assert q.dequeue() == 10
        assert list(q) == [20, 30]
        assert len(q) == 2


def test_demo_sequence():
    values = [10, 20, 30]
    for q in (ArrayQueue(values), CircularQueue(values), LinkedQueue(values)):
        assert q.dequeue() == 10
        q.enqueue(40)
        q.enqueue(50)
        assert list(q) == [20, 30, 40, 50]
        assert len(q) == 4
        for expected in (20, 30, 40, 50):
            assert q.dequeue() == expected
        assert q.is_empty()


def test_empty_front_raises():
    for q in (ArrayQueue(), CircularQueue(), LinkedQueue()):
        with pytest.raises(QueueEmptyError, match="Queue is empty"):
            q.front()
        assert len(q) == 0


def test_empty_dequeue_raises():
    for q in (ArrayQueue([1]), CircularQueue([1]), LinkedQueue([1])):
        assert q.dequeue() == 1
        with pytest.raises(QueueEmptyError):
            q.dequeue()
        assert len(q) == 0


def test_queue_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedQueue().front()


def test_str_format():
    values = [10, 20, 30]
    assert str(ArrayQueue(values)) == "Queue content: 10 20 30"
    assert str(CircularQueue(values)) == "Queue content: 10 20 30"
    assert str(LinkedQueue(values)) == "Queue content: 10 20 30"


def test_array_queue_full_after_capacity_enqueues():
    q = ArrayQueue(capacity=10)
    for value in range(10):
        q.enqueue(value)
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(99)


def test_array_queue_does_not_reuse_slots():
    q = ArrayQueue(range(3), capacity=3)
    assert q.dequeue() == 0
    assert q.is_full()
    with pytest.raises(QueueFullError):
        q.enqueue(7)
    assert list(q) == [1, 2]


def test_circular_queue_reuses_slots_and_wraps():
    q = CircularQueue(range(3), capacity=3)
    assert q.is_full()
    assert q.dequeue() == 0
    assert not q.is_full()
    q.enqueue(3)
    assert list(q) == [1, 2, 3]
    assert q.front() == 1
    assert [q.dequeue() for _ in range(3)] == [1, 2, 3]
    assert q.is_empty()


def test_circular_queue_full_raises():
    q = CircularQueue(capacity=2)
    q.enqueue("a")
    q.enqueue("b")
    with pytest.raises(QueueFullError, match="Queue is full"):
        q.enqueue("c")
    assert list(q) == ["a", "b"]


def test_circular_queue_long_run_keeps_order():
    q = CircularQueue(capacity=4)
    seen = []
    for value in range(20):
        q.enqueue(value)
        if len(q) == 4:
            seen.append(q.dequeue())
    seen.extend(q.dequeue() for _ in range(len(q)))
    assert seen == list(range(20))


def test_linked_queue_is_unbounded():
    q = LinkedQueue(range(1000))
    assert len(q) == 1000
    assert q.front() == 0
    assert list(q) == list(range(1000))


@pytest.mark.parametrize("cls", [ArrayQueue, CircularQueue])
def test_bad_capacity(cls):
    with pytest.raises(ValueError):
        cls(capacity=0)


@pytest.mark.parametrize("cls", [ArrayQueue, CircularQueue])
def test_default_capacity_is_ten(cls):
    q = cls(range(10))
    assert q.capacity == 10
    assert q.is_full()