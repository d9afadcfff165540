"""Breadth-first and depth-first traversal over an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Matrix = Sequence[Sequence[int]]


def _check_start(start: int, matrix: Matrix) -> None:
    if not 0 <= start < len(matrix):
        raise IndexError(f"start vertex {start} is outside the matrix")


def _neighbours(node: int, matrix: Matrix) -> Iterator[int]:
    return (i for i, cell in enumerate(matrix[node]) if cell == 1)


def bfs(start: int, matrix: Matrix) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_start(start, matrix)
    visited = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in _neighbours(node, matrix):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(start: int, matrix: Matrix) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first order.

    Neighbours are explored in ascending index order, as a recursive
    traversal would.
    """
    _check_start(start, matrix)
    visited = {start}
    order = [start]
    stack = [_neighbours(start, matrix)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(neighbour, matrix))
                break
        else:
            stack.pop()
    return order