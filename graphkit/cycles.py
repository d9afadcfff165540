"""Cycle detection for undirected and directed graphs given as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]


def _component_has_cycle(root: int, adjacency: Adjacency, visited: list[bool]) -> bool:
    visited[root] = True
    queue: deque[tuple[int, int | None]] = deque([(root, None)])
    while queue:
        node, parent = queue.popleft()
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append((neighbour, node))
            elif neighbour != parent:
                return True
    return False


def has_undirected_cycle(adjacency: Adjacency) -> bool:
    """Return True if a breadth-first search meets an already visited vertex
    that is not the parent of the current one, in any component."""
    visited = [False] * len(adjacency)
    return any(
        not visited[root] and _component_has_cycle(root, adjacency, visited)
        for root in range(len(adjacency))
    )


def has_directed_cycle(adjacency: Adjacency) -> bool:
    """Return True if Kahn's algorithm cannot order every vertex."""
    vertex_count = len(adjacency)
    indegree = [0] * vertex_count
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1

    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    processed = 0
    while queue:
        node = queue.popleft()
        processed += 1
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return processed != vertex_count