# dsakit

A collection of classic data structures and algorithms for integers and
short strings. Each one can be used as a library. Each one also has a small
interactive console that you start from the command line.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsakit.avl import AVLTree
from dsakit.bst import BinarySearchTree
from dsakit.heap import max_heap_sort, min_heap_sort
from dsakit.kruskal import Edge, kruskal_mst
from dsakit.prims import Graph
from dsakit.threaded import ThreadedBinaryTree
from dsakit.filters import BloomFilter, CuckooTable, CuckooCycleError
from dsakit.countmin import CountMinSketch

tree = AVLTree([10, 20, 30])
print(tree.preorder(), tree.height())      # [20, 10, 30] 2

bst = BinarySearchTree([50, 30, 70])
bst.delete(30)
print(70 in bst, bst.level_order(), bst.minimum())

print(max_heap_sort([12, 54, 68, 21]))     # ascending
print(min_heap_sort([12, 54, 68, 21]))     # descending

edges, cost = kruskal_mst(3, [Edge(1, 2, 5), Edge(2, 3, 1), Edge(1, 3, 4)])

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, 2)
print(graph.prim_mst_weight())             # 6

bloom = BloomFilter()
bloom.add("alice")
print(bloom.might_contain("alice"))        # True

sketch = CountMinSketch()
sketch.add("abc")
print(sketch.count("abc"))                 # 1
```

## Modules

- `dsakit.avl`: `AVLTree`, a self-balancing search tree with `insert`,
  `height`, `preorder`, `inorder` and `postorder`. Duplicate values are ignored.
- `dsakit.bst`: `BinarySearchTree`, an unbalanced search tree with `insert`,
  `delete`, `contains` (also `in`), `minimum`, `maximum` and the traversals
  `inorder`, `preorder`, `postorder` and `level_order`. Equal values go to the
  left. `minimum` and `maximum` raise `ValueError` on an empty tree.
- `dsakit.threaded`: `ThreadedBinaryTree`, a search tree whose empty links
  point to the in-order neighbours. `inorder` and `preorder` walk the threads.
  Equal values go to the right.
- `dsakit.heap`: `max_heapify` and `min_heapify` sift a value down in place.
  `max_heap_sort` returns a new list in ascending order, and `min_heap_sort`
  returns one in descending order.
- `dsakit.kruskal`: `Edge`, `DisjointSet`, `sort_edges` (a stable sort by
  weight) and `kruskal_mst`. `kruskal_mst` returns the tree's edges and its
  total weight. Vertices are numbered from 0 up to the vertex count.
- `dsakit.prims`: `Graph`, an adjacency matrix where a weight of 0 means no
  edge. It has `add_edge`, `format_matrix` and `prim_mst_weight`.
  `prim_mst_weight` raises `ValueError` for a graph that is not connected.
- `dsakit.filters`: `BloomFilter` uses three string hashes (`bloom_hash1`,
  `bloom_hash2`, `bloom_hash3`). `add` returns `False` when the name was
  probably present already. `CuckooTable` stores non-negative integers in two
  tables. It raises `CuckooCycleError` after more than five displacements.
- `dsakit.countmin`: `CountMinSketch` keeps four tables of ten counters and
  hashes the sum of a string's character codes (`string_value`). `count`
  never underestimates.

## Interactive consoles

Each console reads menu choices and values from standard input, separated by
whitespace. It stops at the end of the input.

```
dsakit-avl
dsakit-bst
dsakit-threaded
dsakit-heap
dsakit-kruskal
dsakit-prims
dsakit-filters
dsakit-countmin
```

## What it does not do

- Everything lives in memory. The consoles keep nothing between runs, and no
  structure can be saved or loaded.
- The AVL tree and the threaded tree support insertion only. They have no
  deletion or search.
- The Bloom filter and the cuckoo table cannot remove entries.
- Prim's algorithm reports only the total weight, not the tree's edges.