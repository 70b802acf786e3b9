"""Queues backed by an array, a linked list and a circular linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


class QueueFullError(Exception):
    """Raised when enqueuing into a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional[_Node] = None


class ArrayQueue:
    """Linear queue in a fixed array.

    Slots are not reused until the queue has been fully drained, so the
    queue reports full once ``capacity`` values have been enqueued since
    it was last empty.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._slots) >= self.capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots = []
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class LinkedQueue:
    """Unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularQueue:
    """Unbounded queue on a circular linked list; the rear links to the front."""

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.value

    def __iter__(self) -> Iterator[Any]:
        if self._rear is None:
            return
        node = self._rear.next
        while True:
            yield node.value
            if node is self._rear:
                return
            node = node.next

    def __len__(self) -> int:
        return self._size