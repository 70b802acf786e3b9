# dsakit

A small collection of classic data structures and algorithms in plain Python.
It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `dsakit.avl` | `AVLTree` and `AVLNode`. `AVLTree` is a binary search tree that rebalances on insertion. It has `insert`, `delete`, `level_order`, `height`, `minimum` and `in`. |
| `dsakit.binary_tree` | `TreeNode`, plus the functions `insert_level_order`, `insert_at`, `morris_inorder`, `breadth_first`, `preorder`, `inorder` and `postorder`. |
| `dsakit.trie` | `Trie` over words of the letters a–z. It has `insert`, `search`, `delete` and `in`. |
| `dsakit.heap` | `MinHeap` with a fixed capacity. It has `insert`, `peek`, `extract_min`, `decrease_key`, `delete_key` and `len`. Also `HeapOverflowError`. |
| `dsakit.segment_tree` | `MaxSegmentTree`. It has `query` for the range maximum, `update` for a point update, `first_at_least` and `len`. |
| `dsakit.linked_list` | `LinkedList`. It has `append`, `push_front`, `remove`, `reverse`, `rotate_last_k`, `odd_even_rearrange`, `in`, iteration and `len`. |
| `dsakit.array_list` | `ArrayLinkedList`, a linked list kept in a fixed pool of slots. It has `insert_front`, `insert_back`, `free_slots`, iteration and `len`. |
| `dsakit.queues` | `ArrayQueue`, `LinkedQueue` and `CircularQueue`, each with `enqueue`, `dequeue`, iteration and `len`. Also `QueueFullError` and `QueueEmptyError`. |
| `dsakit.stack` | `BoundedStack` with `push`, `pop`, `items` and `len`. Also `StackFullError` and `StackEmptyError`. |
| `dsakit.graphs` | `build_adjacency`, `bfs_order`, `bfs_distances`, `dfs_visit`, `bellman_ford` and `NegativeCycleError`. |
| `dsakit.disjoint_set` | `DisjointSet` over the integers 1..n. It uses union by rank and path compression, and has `find`, `union` and `connected`. |
| `dsakit.algorithms` | `max_activities`, `fibonacci_memo`, `fibonacci_table`, `majority_element` and `contains_value`. |

## Examples

```python
from dsakit.avl import AVLTree

tree = AVLTree(range(1, 8))
print(tree.level_order())   # [4, 2, 6, 1, 3, 5, 7]
tree.delete(1)
print(4 in tree)            # True
```

```python
from dsakit.heap import MinHeap

heap = MinHeap(11)
for key in (3, 2, 15, 5, 4, 45):
    heap.insert(key)
print(heap.extract_min())   # 2
print(heap.peek())          # 3
```

```python
from dsakit.segment_tree import MaxSegmentTree

tree = MaxSegmentTree([1, 3, 2, 5, 4])
print(tree.query(0, 2))            # 3
print(tree.first_at_least(4, 0))   # 3
tree.update(1, 7)
print(tree.first_at_least(4, 0))   # 1
```

```python
from dsakit.graphs import build_adjacency, bfs_order, bellman_ford

adjacency = build_adjacency([(1, 2), (1, 3), (2, 4)])
print(bfs_order(adjacency, 1))                       # [1, 2, 3, 4]
print(bellman_ford(3, [(0, 1, 4), (1, 2, -2)], 0))   # [0, 4, 2]
```

```python
from dsakit.disjoint_set import DisjointSet

sets = DisjointSet(100)
sets.union(1, 2)
print(sets.connected(1, 2))   # True
```

```python
from dsakit.trie import Trie

trie = Trie(["hello", "world"])
print(trie.search("hello"), trie.search("word"))   # True False
```

## Behaviour worth knowing

- `AVLTree` rebalances on `insert` only. `delete` removes one node holding the key and does not rebalance. A missing key is ignored. Equal keys go to the right subtree.
- `insert_at` follows a path of `"l"`/`"r"` steps. The last step must land on a free position. Otherwise it raises `ValueError`.
- `morris_inorder` threads the tree while it walks it. The tree has its original shape again once the traversal ends.
- `Trie` raises `ValueError` for any character outside a–z. `delete` returns whether the word was present, and prunes nodes that no other word needs.
- `MinHeap.insert` raises `HeapOverflowError` once `capacity` keys are held. `extract_min` and `peek` raise `IndexError` on an empty heap. `decrease_key` raises `ValueError` if the new value is larger than the current key.
- `MaxSegmentTree.first_at_least(x, start)` returns the first index at or after `start` whose value is at least `x`, or `-1` if there is none.
- `LinkedList.remove` and `LinkedList.reverse` raise `ValueError` on an empty list. `remove` also raises it for a missing value. `rotate_last_k(k)` needs `0 <= k < len(list)`.
- `ArrayLinkedList` holds 100 slots by default. It raises `OverflowError` when no free slot is left.
- `ArrayQueue` holds 10 values by default. It does not reuse slots until it has been fully drained. So it reports full once `capacity` values have been enqueued since it was last empty.
- `LinkedQueue` and `CircularQueue` have no size limit.
- Each queue raises `QueueEmptyError` when you dequeue from it while it is empty.
- `BoundedStack` holds 5 values by default:
  - `push` returns the position the value now occupies, and raises `StackFullError` when the stack is full.
  - `pop` raises `StackEmptyError` when the stack is empty.
  - `items()` lists `(position, value)` pairs from the top down.
- `bellman_ford` works on vertices numbered `0` to `vertex_count - 1`:
  - Vertices it cannot reach get `math.inf`.
  - It raises `NegativeCycleError` when a negative cycle is reachable from the source.
- `fibonacci_memo` and `fibonacci_table` count the sequence as 0, 0, 1, 1, 2, 3, …, starting at index 0.
- `majority_element` returns Moore's voting candidate without checking that it really is a majority.

## What this package does not do

This package is a library only. It has no command-line program and no interactive menus. You do the input and output yourself by calling the classes and functions above.