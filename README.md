# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Everything is a library call: functions take Python lists,
nodes or a `Graph` and return plain values.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

Helpers for matrices given as sequences of rows:
`format_matrix` (each value followed by a space, one row per line),
`find_target`, `max_element` (raises `ValueError` on an empty matrix),
`row_sums`, `diagonal_sum`, `transpose` (returns a new matrix), and
`segregate_negatives`, which returns a new list with the negative numbers
moved to the front by a two-pointer swap.

### `dsakit.heap`

- `MaxHeap(capacity)`: a max-heap holding at most `capacity` items, with
  `insert`, `pop`, `peek`, `len()` and iteration in stored order. Inserting
  into a full heap raises `HeapOverflowError`; `pop` and `peek` on an empty
  heap raise `IndexError`.
- `heapify(values, size, index)`, `build_heap(values)` and
  `heap_sort(values)` work in place on a 0-based Python list.

### `dsakit.heap_problems`

`kth_smallest(values, k)` and `kth_largest(values, k)` (1-based `k`,
`ValueError` when out of range), `RunningMedian` whose `add` returns the
median so far, `running_medians(values)`, and `merge_k_sorted(arrays)`.

### `dsakit.bst`

`TreeNode` plus functions on a binary search tree: `insert` (equal values go
left), `build_bst`, `search`, `delete` (a node with two children takes the
largest value of its left subtree), `min_node`, `max_node`, and the
traversals `preorder`, `inorder`, `postorder` and `level_order` (a list of
levels). `bst_from_sorted` builds a balanced tree; `bst_to_dll` relinks a
tree into a sorted doubly linked list (`left` is previous, `right` is next),
`dll_to_bst(head, count)` relinks it back, and `dll_values` reads a list.

### `dsakit.heap_tree`

`check_max_heap` returns a `HeapInfo(max_value, is_heap)`; `is_max_heap`
returns just the flag. `bst_to_max_heap` refills a BST's nodes in
post-order with its sorted values, turning it into a max-heap.

### `dsakit.linked_list`

`ListNode` and `SinglyLinkedList` with `insert_at_head`, `insert_at_tail`,
`insert_at_position` and `delete_at` (1-based positions, `IndexError` when
out of range). `str()` renders `10->20->`. Node-level functions:
`from_values`, `values_of`, `reverse`, `add_one` (digits most significant
first), `loop_start`, `remove_loop` and `reverse_in_groups(head, k)`.

### `dsakit.doubly_linked_list`

`DNode` and `DoublyLinkedList` with the same insert and delete methods;
`insert_at_position` appends when the position is past the end. Supports
`len()`, iteration and `reversed()`.

### `dsakit.mystring`

`MyString`, an immutable string with `len()`, `empty()`, `str()`, `find`
(returns `-1` when absent), and indexing that returns `"\0"` past the end.

### `dsakit.graph`

`Graph` stores `(neighbour, weight)` adjacency lists in insertion order.
`add_edge(u, v, weight=1, directed=False)`, `neighbors`, `edges`,
`format_adjacency`, `in_degrees`, `bfs`, `bfs_all` (one traversal per
component reached), `dfs`, `has_cycle_undirected_bfs`,
`has_cycle_undirected_dfs`, `has_cycle_directed`, `topological_sort_dfs(n)`,
`topological_sort_bfs(n)` (Kahn's order; nodes on a cycle are left out) and
`shortest_path_bfs(source, dest)` (raises `ValueError` if unreachable).

### `dsakit.shortest_paths`

- `dag_shortest_distances(graph, source, n)`: distances in a DAG.
- `dijkstra(graph, n, source)`: a list of `n + 1` distances indexed by node
  number.
- `bellman_ford(graph, nodes, source)`: a dict of distances; negative
  weights allowed, raises `NegativeCycleError` on a reachable negative cycle.
- `floyd_warshall(graph, n)`: an `n x n` distance matrix.

Unreachable nodes get `math.inf`.

### `dsakit.connectivity`

`reversed_graph`, `strongly_connected_components(graph, n)` (Kosaraju),
`bridges(graph, source)` as `(parent, child)` pairs, and
`eventual_safe_nodes(graph, start, end)`.

### `dsakit.disjoint_set`

`DisjointSet(n)` over nodes `0 .. n` with `find` (path compression),
`union_by_rank`, `union_by_size`, `connected` and `size_of`.

### `dsakit.mst`

`kruskal(graph, n)` and `prim(graph, n)` return a `SpanningTree` with the
total `weight` and the chosen `edges` as `(u, v, weight)`. Kruskal gives a
spanning forest; Prim grows from node 0.

## Examples

```python
from dsakit.graph import Graph
from dsakit.shortest_paths import dijkstra
from dsakit.mst import prim

g = Graph()
g.add_edge(0, 1, 5, False)
g.add_edge(0, 2, 1, False)
g.add_edge(1, 2, 3, False)

print(g.bfs(0))          # [0, 1, 2]
print(dijkstra(g, 3, 0)) # [0, 4, 1, inf]
print(prim(g, 3))        # SpanningTree(weight=4, edges=[(0, 2, 1), (2, 1, 3)])
```

```python
from dsakit.bst import build_bst, inorder, delete

root = build_bst([50, 30, 20, 35, 40, 60, 70, 80, 55])
print(inorder(root))  # [20, 30, 35, 40, 50, 55, 60, 70, 80]
root = delete(root, 30)
print(inorder(root))  # [20, 35, 40, 50, 55, 60, 70, 80]
```

```python
from dsakit.heap import MaxHeap

heap = MaxHeap(20)
for value in (10, 20, 5, 11, 6):
    heap.insert(value)
print(heap.pop())  # 20
```

## What it does not do

dsakit is a library only. It has no command-line program and reads no
input from the terminal; build the structures from your own data and call
the functions directly.