"""Grid algorithms: flood fill and island counting."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_ORTHOGONAL = ((-1, 0), (0, 1), (1, 0), (0, -1))
_ALL_AROUND = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, new_color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the 4-connected region around
    ``(row, col)`` repainted in ``new_color``. The input is left unchanged."""
    if not (0 <= row < len(image) and 0 <= col < len(image[row])):
        raise IndexError(f"start cell ({row}, {col}) is outside the image")

    result = [list(line) for line in image]
    initial = image[row][col]
    height = len(image)
    width = len(image[0])
    result[row][col] = new_color
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        for dr, dc in _ORTHOGONAL:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < height
                and 0 <= nc < width
                and image[nr][nc] == initial
                and result[nr][nc] != new_color
            ):
                result[nr][nc] = new_color
                stack.append((nr, nc))
    return result


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count groups of ``'1'`` cells connected in any of the eight directions."""
    if not grid:
        return 0
    height = len(grid)
    width = len(grid[0])
    visited = [[False] * width for _ in range(height)]
    count = 0
    for r in range(height):
        for c in range(width):
            if visited[r][c] or grid[r][c] != "1":
                continue
            count += 1
            visited[r][c] = True
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in _ALL_AROUND:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < height
                        and 0 <= nc < width
                        and grid[nr][nc] == "1"
                        and not visited[nr][nc]
                    ):
                        visited[nr][nc] = True
                        queue.append((nr, nc))
    return count