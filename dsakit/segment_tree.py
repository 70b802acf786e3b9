"""Segment tree answering range-maximum queries."""

from __future__ import annotations

from typing import Any, Iterable


class MaxSegmentTree:
    """Range-maximum segment tree with point updates."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("segment tree needs at least one value")
        self._size = len(self._values)
        self._tree: list = [None] * (4 * self._size)
        self._build(1, 0, self._size - 1)

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._values[start]
            return
        mid = (start + end) // 2
        self._build(2 * node, start, mid)
        self._build(2 * node + 1, mid + 1, end)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def _query(self, node: int, start: int, end: int, left: int, right: int):
        if start > right or end < left:
            return None
        if left <= start and end <= right:
            return self._tree[node]
        mid = (start + end) // 2
        parts = (
            self._query(2 * node, start, mid, left, right),
            self._query(2 * node + 1, mid + 1, end, left, right),
        )
        return max(part for part in parts if part is not None)

    def _update(self, node: int, start: int, end: int, index: int, value: Any) -> None:
        if start == end:
            self._values[start] = value
            self._tree[node] = value
            return
        mid = (start + end) // 2
        if index <= mid:
            self._update(2 * node, start, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, end, index, value)
        self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def query(self, left: int, right: int) -> Any:
        """Maximum of the values at positions ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < self._size:
            raise IndexError(f"invalid range [{left}, {right}]")
        return self._query(1, 0, self._size - 1, left, right)

    def update(self, index: int, value: Any) -> None:
        """Set the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, self._size - 1, index, value)

    def first_at_least(self, x: Any, start: int = 0) -> int:
        """Index of the first value >= ``x`` at or after ``start``, or -1."""
        if start < 0:
            raise IndexError("start must not be negative")
        low, high = start, self._size - 1
        answer = -1
        while low <= high:
            mid = (low + high) // 2
            if self.query(low, mid) < x:
                low = mid + 1
            else:
                answer = mid
                high = mid - 1
        return answer

    def __len__(self) -> int:
        return self._size