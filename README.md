# graphalgos

A small, dependency-free library of classic graph algorithms in plain Python.

Graphs are plain Python data. An adjacency structure is either a list of
neighbour lists indexed by node, or a mapping from each node to its
neighbours. Weighted graphs hold `(neighbour, weight)` pairs in place of bare
neighbours. Grids are lists of rows.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `graphalgos.representations`

Builds graphs whose nodes are numbered `1..n`; a node outside that range
raises `ValueError`.

- `adjacency_matrix(n, edges, directed=False)` and
  `weighted_adjacency_matrix(n, edges, directed=False)` return `n x n`
  matrices (entry `[u - 1][v - 1]`; missing edges are 0).
- `adjacency_list(n, edges, directed=False)` and
  `weighted_adjacency_list(n, edges, directed=False)` return a dict from each
  node to its neighbours (or `(neighbour, weight)` pairs) in edge order.
- `matrix_to_adjacency_list(matrix)` turns a 0/1 matrix into a list of
  neighbour lists indexed from 0.
- `format_matrix(matrix)` and `format_adjacency_list(adj)` render them as
  text, one row or node per line; weighted entries appear as `neighbour,weight`.

### `graphalgos.disjoint_set`

- `DisjointSet(n)` over nodes `0..n-1` with path compression: `find`,
  `union_by_rank`, `union_by_size`, `connected` and `component_size`.
- `merge_accounts(accounts)` merges `[name, address, ...]` accounts that share
  an address; addresses and results come back sorted.
- `count_provinces(matrix)` counts connected groups in a 0/1 connection matrix.
- `operations_to_connect(n, connections)` returns how many cables must be
  moved to connect every computer, or `None` if there are too few cables.
- `kruskal_mst_weight(n, edges)` returns the weight of a minimum spanning
  forest of `(u, v, weight)` edges over nodes `0..n`.

### `graphalgos.traversal`

`bfs(adj, root)`, `dfs(adj, root)`, `count_components(adj)`,
`terminal_nodes(adj)`, `is_bipartite(adj)`, and cycle detection in undirected
graphs with `has_cycle_bfs(adj)` and `has_cycle_dfs(adj)`.

### `graphalgos.topology`

- `topological_order(adj)` (Kahn's algorithm; raises `ValueError` on a cycle)
  and `can_finish(adj)`.
- `can_finish_prerequisites(n, prerequisites)` for `(course, required)` pairs.
- `eventual_safe_nodes(adj)`, `count_strongly_connected(adj)` (Kosaraju),
  `articulation_points(adj)` and `bridges(adj)`.

### `graphalgos.shortest_paths`

Distances are returned as a dict holding only the reachable nodes.

- `bellman_ford(adj, source)` allows negative weights and raises
  `NegativeCycleError` (a `ValueError`) for a reachable negative cycle.
- `dijkstra(adj, source)` and `shortest_path(adj, source, target)` (a list of
  nodes, or `None` when the target is unreachable).
- `dag_shortest_distances(adj, source)` raises `ValueError` if a cycle is
  reachable; `relaxation_distances(adj, source)` re-queues a node whenever its
  distance improves and raises `NegativeCycleError` if it never settles.
- `binary_maze(grid, source, destination)` counts the fewest steps through
  cells equal to 1, or returns `None`.
- `min_multiplications(factors, start, end)` counts the fewest multiplications
  modulo 100000 from `start` to `end`, or returns `None`.
- `prim_mst_weight(adj)` returns the minimum spanning tree weight of the first
  node's component.

### `graphalgos.grids`

Every function returns new lists and leaves its input untouched.

- `flood_fill(image, row, col, color)`; raises `IndexError` for a start outside
  the image.
- `count_enclaves(grid)` counts land cells that cannot reach the border.
- `minutes_to_rot(grid)` and `count_rotted_by_spread(grid)` for fresh (1) and
  rotten (2) oranges; both return `None` if a fresh orange is never reached.
- `capture_regions(board)` turns every `'O'` cut off from the border into `'X'`;
  `clear_enclosed(grid)` does the same for 1s, setting them to 0.

## Example

```python
from graphalgos.disjoint_set import DisjointSet
from graphalgos.representations import weighted_adjacency_list
from graphalgos.shortest_paths import dijkstra

adj = weighted_adjacency_list(4, [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 5)])
print(dijkstra(adj, 1))  # {1: 0, 2: 3, 3: 1, 4: 8}

ds = DisjointSet(5)
ds.union_by_rank(1, 3)
print(ds.connected(1, 3))  # True
```

## What it does not do

There is no command-line program and nothing reads graphs from files or
standard input: every function takes its graph, grid or edge list as Python
data and returns its answer.