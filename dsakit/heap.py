"""Fixed-capacity binary min-heap."""

from __future__ import annotations

from typing import Any


class HeapOverflowError(Exception):
    """Raised when inserting into a full heap."""


class MinHeap:
    """Array-backed min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def _sift_up(self, index: int, to_root: bool = False) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not to_root and items[parent] <= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def insert(self, key: Any) -> None:
        """Add ``key``; raises HeapOverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise HeapOverflowError("could not insert key: heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key at ``index`` to ``new_value``."""
        self._check_index(index)
        if new_value > self._items[index]:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        last = items.pop()
        if not items:
            return last
        root = items[0]
        items[0] = last
        self._sift_down(0)
        return root

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def delete_key(self, index: int) -> Any:
        """Remove the key stored at ``index`` and return it."""
        self._check_index(index)
        value = self._items[index]
        self._sift_up(index, to_root=True)
        self.extract_min()
        return value

    def __len__(self) -> int:
        return len(self._items)