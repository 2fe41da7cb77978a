# algolib

A collection of classic algorithms written as plain Python functions and classes. It uses only the standard library.

## Contents

| Module | What it provides |
| --- | --- |
| `algolib.algebra` | `binpow` (exponentiation by squaring, with an optional modulus), `gcd` |
| `algolib.sequences` | `beautiful_permutation`, `longest_repetition` |
| `algolib.dp` | `frog_min_cost` (frog jumping at most *k* stones), `knapsack` (0/1 knapsack) |
| `algolib.matrix` | `mat_mul`, `mat_pow`, `count_paths` (walks of exactly *k* edges), `fibonacci` |
| `algolib.contest` | `digit_sum`, `card_game_wins`, `min_difference`, `note_columns`, `min_jumps` |
| `algolib.traversal` | `bfs` / `BfsResult`, `shortest_distances`, `has_cycle_bfs`, `has_cycle_dfs`, `kahn_toposort`, `CycleError`, `is_bipartite`, `dfs_reachable`, `connected_components`, `dfs_toposort` |
| `algolib.dsu` | `DisjointSet` with `find`, `union_by_rank` and `union_by_size` |
| `algolib.weighted` | `dijkstra`, `prim`, `kruskal` |
| `algolib.segtree` | `SegmentTree`, `min_tree`, `sum_tree`, `RangeAddTree` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Number theory

```python
from algolib.algebra import binpow, gcd

binpow(2, 10)        # 1024
binpow(3, 200, 13)   # 3**200 reduced modulo 13
gcd(12, 18)          # 6
gcd(0, 0)            # 0
```

### Matrices

`mat_mul` and `mat_pow` reduce modulo 1 000 000 007 by default; pass `mod=None` for exact results.

```python
from algolib.matrix import count_paths, fibonacci

fibonacci(10)                               # 55
count_paths(3, [(1, 2), (2, 3), (1, 3)], 2) # walks of 2 edges from node 1 to node 3
```

`count_paths` numbers its nodes from 1; every other graph function numbers them from 0.

### Graph traversal

Traversal functions take either an adjacency list (a list indexed by node) or a node count and an edge list:

```python
from algolib.traversal import bfs, kahn_toposort, is_bipartite

adj = [[1, 2], [3], [3], []]
result = bfs(adj, 0)
result.distances       # [0, 1, 1, 2]
result.path_to(3)      # [0, 1, 3]

kahn_toposort(3, [(1, 0), (2, 1)])   # [0, 1, 2]; each pair (a, b) means "a depends on b"
is_bipartite(3, [(0, 1), (1, 2), (2, 0)])   # False
```

Unreached nodes have `None` as their distance, and `path_to` returns `None` for them. Circular dependencies make `kahn_toposort` raise `CycleError`, a subclass of `ValueError`. `dfs_toposort` assumes an acyclic graph and does not check.

### Disjoint sets and weighted graphs

```python
from algolib.dsu import DisjointSet
from algolib.weighted import dijkstra, kruskal, prim

sets = DisjointSet(4)
sets.union_by_size(0, 1)   # True: two sets were joined
sets.find(1) == sets.find(0)

graph = [[(1, 4), (2, 1)], [(0, 4), (2, 2)], [(0, 1), (1, 2)]]
dijkstra(graph, 0)         # [0, 3, 1]
prim(graph)                # 3
kruskal(3, [(4, 0, 1), (2, 1, 2), (1, 0, 2)])   # 3; edges are (weight, u, v)
```

### Range queries

Positions start at 0 and range bounds are inclusive.

```python
from algolib.segtree import min_tree, sum_tree, RangeAddTree

tree = sum_tree([1, 2, 3, 4])
tree.query(1, 3)     # 9
tree.update(2, 10)
tree.query(1, 3)     # 16

lows = min_tree([5, 3, 8])
lows.query(0, 2)     # 3

adds = RangeAddTree([0, 0, 0])
adds.add_range(1, 2, 5)
adds.value_at(2)     # 5
```

`SegmentTree` accepts any associative `combine` function with its identity value.

## What this package does not do

It is a library only. It has no command-line programs and does not read problem input from standard input or write answers to standard output; call the functions from your own code and handle input and output there.