"""Two-colouring test for undirected graphs."""

from __future__ import annotations

from collections.abc import Sequence


def is_bipartite(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return True if the graph's vertices can be two-coloured.

    Disconnected graphs are handled by colouring every component.
    """
    color: list[int | None] = [None] * len(adjacency)
    for root in range(len(adjacency)):
        if color[root] is not None:
            continue
        color[root] = 0
        stack = [root]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[node]
                    stack.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True