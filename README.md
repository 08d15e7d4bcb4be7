# dsakit

Classic data structures in plain Python, with no third-party dependencies.

## Contents

| Module                 | Public names                                                                      |
|------------------------|-----------------------------------------------------------------------------------|
| `dsakit.dynamic_array` | `DynamicArray`                                                                    |
| `dsakit.linked_lists`  | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`                      |
| `dsakit.stacks`        | `ArrayStack`, `LinkedStack`                                                       |
| `dsakit.queues`        | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError` |
| `dsakit.hashing`       | `ChainedHashTable`, `OpenAddressingHashTable`                                     |
| `dsakit.heap`          | `MinHeap`                                                                         |
| `dsakit.trees`         | `BinarySearchTree`, `BinaryTree`, `TreeNode`, `NodeExistsError`                   |
| `dsakit.graphs`        | `AdjacencyListGraph`, `LabeledGraph`                                              |
| `dsakit.trie`          | `Trie`                                                                            |
| `dsakit.disjoint_set`  | `DisjointSet`                                                                     |
| `dsakit.demo`          | `main` (the `dsakit-demo` command)                                                |

## Installation

```
pip install .
```

## Examples

```python
from dsakit.dynamic_array import DynamicArray
from dsakit.stacks import ArrayStack
from dsakit.trees import BinarySearchTree
from dsakit.graphs import LabeledGraph
from dsakit.trie import Trie
from dsakit.disjoint_set import DisjointSet

arr = DynamicArray()
for value in (10, 20, 30):
    arr.push(value)
arr.pop()
arr[1] = 99
print(list(arr))            # [10, 99]

stack = ArrayStack()
stack.push(1)
stack.push(2)
print(stack.peek())         # 2

bst = BinarySearchTree()
for value in (30, 20, 40, 10, 25):
    bst.insert(value)
print(bst.inorder())        # [10, 20, 25, 30, 40]

graph = LabeledGraph()
graph.add_edge("A", "B")
graph.add_edge("A", "C")
print(graph.bfs("A"))       # ['A', 'B', 'C']

trie = Trie()
trie.insert("cat")
print(trie.search("cat"), trie.starts_with("ca"))  # True True

ds = DisjointSet(6)
ds.union(0, 1)
print(ds.connected(0, 1))   # True
```

## Behaviour worth knowing

- `DynamicArray`, `SinglyLinkedList` and `DoublyLinkedList` accept only
  indexes with `0 <= index < len(...)`; anything else, negative indexes
  included, raises `IndexError`.
- `pop()` on an empty array, linked list or stack returns `None`. `peek()` on
  an empty stack and `peek()` / `pop_min()` on an empty `MinHeap` raise
  `IndexError`.
- Queues raise `QueueEmptyError` (an `IndexError`) when read from or dequeued
  while empty. `ArrayQueue` and `CircularQueue` hold 10 values by default and
  raise `QueueFullError` (an `OverflowError`) when full. `ArrayQueue` never
  reuses dequeued slots, so it is full once `capacity` values have been
  enqueued in total; `CircularQueue` reuses them.
- Both hash tables place values by `value % capacity` (default capacity 7), so
  they expect integers. `ChainedHashTable` refuses duplicates and `find`
  returns a bool; `OpenAddressingHashTable` uses linear probing with
  tombstones, does not check for duplicates, and `find` returns the slot index
  or `None`.
- `BinarySearchTree` puts values equal to a node in its left subtree.
  `BinaryTree` raises `NodeExistsError` when a root or child already exists.
- `AdjacencyListGraph` covers integer nodes `0` to `99`; its `num_nodes` only
  sets how many are shown by `adjacency()` and `str()`. `LabeledGraph` is
  undirected; `dfs` and `bfs` return an empty list for an unknown start, and
  `neighbors` raises `KeyError`.
- `Trie` accepts only the letters `a` to `z` and raises `ValueError` for any
  other character.
- `DisjointSet` uses path compression and union by rank; elements outside
  `0 .. n - 1` raise `IndexError`.

## Demo

A walkthrough that exercises every structure and prints the results:

```
dsakit-demo
```

## Limits

The structures live in memory only: nothing is saved to disk, and none of
them is safe to share between threads without outside locking.

## Running the tests

```
pip install .[test]
pytest
```