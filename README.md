# graphkit

Plain-Python graph and grid algorithms with no dependencies.

## Install

```
pip install graphkit
```

## What is included

| Module | Functions |
| --- | --- |
| `graphkit.representation` | `parse_edge_input`, `adjacency_list`, `adjacency_matrix`, `format_matrix`, `main` |
| `graphkit.traversal` | `bfs`, `dfs` (over an adjacency matrix) |
| `graphkit.components` | `count_provinces` |
| `graphkit.bipartite` | `is_bipartite` |
| `graphkit.cycles` | `has_undirected_cycle`, `has_directed_cycle` |
| `graphkit.topo` | `topological_sort` |
| `graphkit.grid` | `flood_fill`, `count_islands` |

Graphs are plain Python lists; there is no graph class. Outside
`graphkit.representation`, vertices are numbered from 0 and an adjacency list is
a sequence of neighbour sequences, where entry `i` holds the neighbours of
vertex `i`.

## Examples

```python
from graphkit.traversal import bfs, dfs

matrix = [
    [0, 1, 0, 0, 1],
    [1, 0, 1, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 1, 0, 1],
    [1, 0, 0, 1, 0],
]
bfs(0, matrix)   # [0, 1, 4, 2, 3]
dfs(0, matrix)   # [0, 1, 2, 3, 4]
```

Both traversals visit neighbours in ascending index order and raise
`IndexError` when the start vertex is outside the matrix.

```python
from graphkit.bipartite import is_bipartite
from graphkit.components import count_provinces
from graphkit.cycles import has_directed_cycle, has_undirected_cycle
from graphkit.topo import topological_sort

is_bipartite([[1], [0, 2], [1, 3], [2]])           # True
is_bipartite([[1, 2], [0, 2], [1, 0]])             # False
count_provinces([[1, 2], [0], [0], [4], [3]])      # 2
has_undirected_cycle([[1, 2], [0, 2], [1, 0]])     # True
has_directed_cycle([[], [], [3], [1], [0, 1], [2, 0]])  # False
topological_sort([[], [], [3], [1], [0, 1], [0, 2]])    # [5, 4, 2, 3, 1, 0]
```

`topological_sort` returns vertices in reverse depth-first finishing order; it
does not check for cycles, so call `has_directed_cycle` first if the input may
not be acyclic.

```python
from graphkit.grid import count_islands, flood_fill

flood_fill([[1, 1, 1], [1, 1, 0], [1, 0, 1]], 1, 1, 2)
# [[2, 2, 2], [2, 2, 0], [2, 0, 1]]

count_islands([
    "11000",
    "11000",
    "00100",
    "00011",
])  # 1 — land touching diagonally joins one island
```

`flood_fill` repaints the four-way connected region and returns a new grid,
leaving its input untouched; a start cell outside the image raises
`IndexError`. Islands are groups of `"1"` cells counted with eight-way
connectivity, so cells that meet only at a corner belong to the same island.

## Building graphs from text

```python
from graphkit.representation import (
    adjacency_list, adjacency_matrix, format_matrix, parse_edge_input,
)

count, edges = parse_edge_input("3 2\n1 2\n2 3\n")  # (3, [(1, 2), (2, 3)])
adjacency_list(count, edges)   # [[], [2], [1, 3], [2]]
print(format_matrix(adjacency_matrix(count, edges)))
```

Here vertices are numbered from 1: the list and matrix have `count + 1`
entries, and `format_matrix` prints rows and columns 1 to `count`. Edges are
undirected and stored in both directions. Malformed input, negative counts and
vertices above `count` raise `ValueError`.

## Command line

`graphkit-matrix` reads a vertex count and an edge count, followed by that many
pairs of vertex numbers, from standard input, and prints the undirected
adjacency matrix:

```
$ printf '3 2\n1 2\n2 3\n' | graphkit-matrix
Adjacency Matrix:
0 1 0
1 0 1
0 1 0
```

On bad input it prints `error: ...` to standard error and exits with status 1.
It takes no options besides `--help`.

## Running the tests

```
pip install -e '.[test]'
pytest
```