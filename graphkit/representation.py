"""Build adjacency lists and matrices for undirected graphs read from text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

Edge = tuple[int, int]

MATRIX_HEADER = "Adjacency Matrix:"


def parse_edge_input(text: str) -> tuple[int, list[Edge]]:
    """Parse ``"<vertices> <edges>"`` followed by that many ``u v`` pairs.

    Returns the vertex count and the list of edges in input order.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected a vertex count and an edge count")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"non-integer token in input: {exc}") from None

    vertex_count, edge_count, *rest = numbers
    if vertex_count < 0 or edge_count < 0:
        raise ValueError("vertex and edge counts must not be negative")
    if len(rest) < 2 * edge_count:
        raise ValueError(
            f"expected {edge_count} edges, got {len(rest) // 2} complete pairs"
        )
    pairs = rest[: 2 * edge_count]
    edges = list(zip(pairs[::2], pairs[1::2]))
    return vertex_count, edges


def _check_edge(vertex_count: int, edge: Edge) -> Edge:
    u, v = edge
    for vertex in (u, v):
        if not 0 <= vertex <= vertex_count:
            raise ValueError(
                f"vertex {vertex} is outside the range 0..{vertex_count}"
            )
    return u, v


def adjacency_list(vertex_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return a list of ``vertex_count + 1`` neighbour lists (1-based vertices).

    Every edge is recorded in both directions, in input order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count + 1)]
    for edge in edges:
        u, v = _check_edge(vertex_count, edge)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def adjacency_matrix(vertex_count: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return a ``(vertex_count + 1)``-square 0/1 matrix (1-based vertices)."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    size = vertex_count + 1
    matrix = [[0] * size for _ in range(size)]
    for edge in edges:
        u, v = _check_edge(vertex_count, edge)
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render rows and columns 1..n of a 1-based matrix, one row per line."""
    return "\n".join(
        " ".join(str(cell) for cell in row[1:]) for row in matrix[1:]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its adjacency matrix."""
    parser = argparse.ArgumentParser(
        description="Read '<vertices> <edges>' and edge pairs from standard "
        "input and print the adjacency matrix."
    )
    parser.parse_args(argv)

    try:
        vertex_count, edges = parse_edge_input(sys.stdin.read())
        matrix = adjacency_matrix(vertex_count, edges)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(MATRIX_HEADER)
    body = format_matrix(matrix)
    if body:
        print(body)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())