# docsync

Data structures for collaborative document synchronisation: an ordered
map, a priority queue with removal of arbitrary elements, and a weighted
sequence tree that maps character positions to nodes. Pure Python, no
runtime dependencies.

## Installation

```
pip install docsync
```

To run the tests:

```
pip install "docsync[test]"
pytest
```

## What's inside

### `docsync.llrb`: left-leaning red-black tree

`LLRBTree` is an ordered map. Its keys must support `<`, `>` and `==`.
`str(tree)` joins the values' `str` with commas, in key order.

```python
from docsync.llrb import LLRBTree

tree = LLRBTree()
for n in (8, 5, 7, 9, 1):
    tree.put(n, n)

str(tree)          # "1,5,7,8,9"
tree.remove(8)     # raises KeyError for a key that is not present
tree.floor(6)      # (5, 5): greatest key <= 6, or None if there is none
len(tree)          # 4
list(tree)         # [1, 5, 7, 9]: keys in ascending order
```

`put` with a key that is already present replaces its value.

### `docsync.pq`: priority queue

`PriorityQueue` is a binary heap. The element that sorts first under `<`
is at the head. `release` removes the first element equal to the one given
and does nothing if there is none.

```python
from docsync.pq import PriorityQueue

queue = PriorityQueue()
for n in (10, 7, 1, 9):
    queue.push(n)

queue.peek()       # 1
queue.pop()        # 1
queue.release(9)
queue.values()     # the remaining elements in heap order
len(queue)         # 2
```

`pop` and `peek` on an empty queue raise `IndexError`.

### `docsync.splay`: weighted splay tree

`SplayTree` holds `SplayNode`s in sequence order. A node's value must
support `len()` and `str()`. Each node's weight is the total length of
the values in its subtree, so the tree can map a position in the joined
content to a node and an offset within it.

```python
from docsync.splay import SplayNode, SplayTree

tree = SplayTree()
a = tree.insert(SplayNode("A2"))
b = tree.insert(SplayNode("B23"))

tree.index_of(b)         # 2
tree.find(3)             # (b, 1)
tree.annotated_string()  # "[2,2]A2[5,3]B23"
tree.delete(a)
tree.index_of(a)         # -1: the node is no longer linked
str(tree)                # "B23"
```

- `insert(node)` places the node after the current root, and
  `insert_after(prev, node)` places it directly after `prev`. Both return
  the inserted node.
- `splay(node)` moves a node to the root.
- `find(index)` returns `(None, 0)` on an empty tree and raises
  `IndexError` when the index lies beyond the content.
- `update_subtree(node)` recomputes a node's weight from its value and
  children.

## What this package does not do

It provides in-memory data structures only. It has no document model, no
network client or server, no storage, and no authorisation or webhook
handling.