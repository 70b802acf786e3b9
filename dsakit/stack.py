"""Bounded array stack."""

from __future__ import annotations

from typing import Any


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(Exception):
    """Raised when popping from an empty stack."""


class BoundedStack:
    """Stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def push(self, value: Any) -> int:
        """Push ``value`` and return the position it occupies."""
        if len(self._items) >= self.capacity:
            raise StackFullError("stack is full")
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def items(self) -> list:
        """Return ``(position, value)`` pairs from the top down."""
        return list(reversed(list(enumerate(self._items))))

    def __len__(self) -> int:
        return len(self._items)