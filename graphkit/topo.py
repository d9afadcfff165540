"""Topological ordering of a directed graph by depth-first search."""

from __future__ import annotations

from collections.abc import Sequence


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices in reverse depth-first finishing order.

    Roots are tried in ascending order and neighbours in list order; for an
    acyclic graph every edge points from an earlier to a later vertex.
    """
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished