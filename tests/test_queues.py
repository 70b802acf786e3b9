import pytest

from dsakit.queues import (
    ArrayQueue,
    CircularQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_fifo():
    queue = ArrayQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert list(queue) == [1, 2, 3]
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert list(queue) == [3]
    assert len(queue) == 1


def test_array_queue_default_capacity_is_ten():
    queue = ArrayQueue()
    for value in range(10):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(10)
    assert len(queue) == 10


def test_array_queue_is_linear():
    queue = ArrayQueue(capacity=3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert list(queue) == [2, 3]


def test_array_queue_reusable_after_drain():
    queue = ArrayQueue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert [queue.dequeue(), queue.dequeue()] == [1, 2]
    queue.enqueue(3)
    queue.enqueue(4)
    assert list(queue) == [3, 4]


def test_array_queue_empty_raises():
    queue = ArrayQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(1)
    queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linked_queue_fifo_and_length():
    queue = LinkedQueue()
    for value in ("a", "b", "c"):
        queue.enqueue(value)
    assert len(queue) == 3
    assert queue.dequeue() == "a"
    assert list(queue) == ["b", "c"]
    assert len(queue) == 2


def test_linked_queue_interleaved():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    queue.enqueue(2)
    queue.enqueue(3)
    assert queue.dequeue() == 2
    assert list(queue) == [3]


def test_linked_queue_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().dequeue()


def test_circular_queue_example():
    queue = CircularQueue()
    values = [10, 20, 30, 40, 50, 60, 70]
    for value in values:
        queue.enqueue(value)
    assert list(queue) == values
    assert queue.dequeue() == 10
    assert list(queue) == values[1:]
    assert len(queue) == 6


def test_circular_queue_drain_and_refill():
    queue = CircularQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    assert [queue.dequeue(), queue.dequeue()] == [1, 2]
    assert list(queue) == []
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(3)
    assert list(queue) == [3]


def test_circular_queue_empty_raises():
    with pytest.raises(QueueEmptyError):
        CircularQueue().dequeue()