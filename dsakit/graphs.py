"""Graph traversals and single-source shortest paths."""

from __future__ import annotations

import math
from collections import deque
from typing import Any, Hashable, Iterable, Mapping, Sequence


class NegativeCycleError(Exception):
    """Raised when a negative-weight cycle is reachable from the source."""


def build_adjacency(edges: Iterable[tuple[Hashable, Hashable]]) -> dict:
    """Build an undirected adjacency mapping from ``(u, v)`` pairs.

    Neighbours are listed in the order their edges were given.
    """
    adjacency: dict = {}
    for u, v in edges:
        adjacency.setdefault(u, []).append(v)
        adjacency.setdefault(v, []).append(u)
    return adjacency


def bfs_order(adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable) -> list:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    order = []
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for child in adjacency.get(node, ()):
            if child not in seen:
                seen.add(child)
                queue.append(child)
    return order


def bfs_distances(adjacency: Mapping[Hashable, Iterable[Hashable]], source: Hashable) -> dict:
    """Return the number of edges on a shortest path to each reachable node."""
    distances = {source: 0}
    queue = deque([source])
    while queue:
        current = queue.popleft()
        for child in adjacency.get(current, ()):
            if child not in distances:
                distances[child] = distances[current] + 1
                queue.append(child)
    return distances


def dfs_visit(adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable) -> list:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    visited = [start]
    seen = {start}
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for child in stack[-1]:
            if child not in seen:
                seen.add(child)
                visited.append(child)
                stack.append(iter(adjacency.get(child, ())))
                break
        else:
            stack.pop()
    return visited


def bellman_ford(
    vertex_count: int,
    edges: Iterable[Sequence[Any]],
    source: int,
) -> list:
    """Shortest distances from ``source`` over directed weighted edges.

    Vertices are numbered ``0`` to ``vertex_count - 1``; edges are
    ``(u, v, weight)`` triples and weights may be negative. Unreachable
    vertices get ``math.inf``. Raises NegativeCycleError when a cycle of
    negative total weight is reachable from the source.
    """
    edge_list = [(u, v, w) for u, v, w in edges]
    for u, v, _ in edge_list:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} out of range")
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} out of range")

    distances: list = [math.inf] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for u, v, weight in edge_list:
            if distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                changed = True
        if not changed:
            break

    for u, v, weight in edge_list:
        if distances[u] + weight < distances[v]:
            raise NegativeCycleError("graph contains a negative cycle")
    return distances