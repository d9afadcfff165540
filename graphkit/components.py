"""Connected components of an undirected graph."""

from __future__ import annotations

from collections.abc import Sequence


def count_provinces(adjacency: Sequence[Sequence[int]]) -> int:
    """Return the number of connected components in an adjacency list."""
    visited = [False] * len(adjacency)
    count = 0
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        count += 1
        visited[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
    return count