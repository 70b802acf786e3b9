"""Linked list stored in a fixed pool of array slots with a free list."""

from __future__ import annotations

from typing import Any, Iterator

_NIL = -1


class ArrayLinkedList:
    """Linked list whose nodes live in a fixed-size slot array.

    Unused slots are chained on a free list; -1 marks the end of a chain.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._data: list = [None] * capacity
        self._next: list = [index + 1 for index in range(capacity)]
        if capacity:
            self._next[-1] = _NIL
        self._avail = 0 if capacity else _NIL
        self._head = _NIL
        self._size = 0

    def _take_slot(self) -> int:
        if self._avail == _NIL:
            raise OverflowError("no free node left")
        slot = self._avail
        self._avail = self._next[slot]
        return slot

    def _chain(self, start: int) -> Iterator[int]:
        slot = start
        while slot != _NIL:
            yield slot
            slot = self._next[slot]

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` at the start of the list."""
        slot = self._take_slot()
        self._data[slot] = value
        self._next[slot] = self._head
        self._head = slot
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Insert ``value`` at the end of the list."""
        slot = self._take_slot()
        self._data[slot] = value
        self._next[slot] = _NIL
        if self._head == _NIL:
            self._head = slot
        else:
            tail = self._head
            while self._next[tail] != _NIL:
                tail = self._next[tail]
            self._next[tail] = slot
        self._size += 1

    def free_slots(self) -> int:
        """Number of slots still on the free list."""
        return sum(1 for _ in self._chain(self._avail))

    def __iter__(self) -> Iterator[Any]:
        for slot in self._chain(self._head):
            yield self._data[slot]

    def __len__(self) -> int:
        return self._size