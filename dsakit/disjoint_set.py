"""Union-find over the elements 1..n."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets of the integers ``1`` to ``size``.

    Uses union by rank and path compression.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._parent = list(range(size + 1))
        self._rank = [1] * (size + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self.size:
            raise IndexError(f"element {x} out of range 1..{self.size}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._rank[a] < self._rank[b]:
            self._parent[a] = b
        elif self._rank[a] > self._rank[b]:
            self._parent[b] = a
        else:
            self._parent[a] = b
            self._rank[b] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)