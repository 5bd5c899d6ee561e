# structkit

Hand-built data structures and sorting algorithms with checked behaviour.
Each container raises a specific exception when it is misused instead of
silently returning a default.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `structkit.stack` | `Stack`, a LIFO stack; `StackUnderflowError` |
| `structkit.maxheap` | `MaxHeap`, a list-backed max heap; `HeapUnderflowError` |
| `structkit.bst` | `BinarySearchTree` and its `TreeCursor`; `InvalidTreeCursorError` |
| `structkit.list_cursor` | `ListNode`, `ListCursor`, `InvalidCursorError` for doubly linked nodes |
| `structkit.sorting` | `sort`, `intro_sort`, `quick_sort`, `heap_sort`, `insertion_sort`, `partition`, `heapify`, `floor_log2`, `less`, `greater` |
| `structkit.cursors` | `IteratorCategory`, `advance`, `next_of`, `prev_of` |

## Examples

### Stack

```python
from structkit.stack import Stack, StackUnderflowError

s = Stack()
s.push(1)
s.push(2)
assert s.peek() == 2
assert list(s) == [2, 1]      # iteration runs from the top down
assert s.pop() == 2
assert len(s) == 1
```

`pop()` and `peek()` on an empty stack raise `StackUnderflowError`
(a subclass of `IndexError`).

### Max heap

```python
from structkit.maxheap import MaxHeap

heap = MaxHeap(4)
for value in (3, 9, 1, 7):
    heap.push(value)
assert heap.pop() == 9
assert heap.top() == 7
assert len(heap) == 3
```

`top()` and `pop()` on an empty heap raise `HeapUnderflowError`; a negative
capacity raises `ValueError`. `parent(index)`, `left(index)` and
`right(index)` give the array positions of related items (`parent(0)` raises
`IndexError`). `debug_print(file)` writes the stored items, each followed by
a space, then a newline; iteration yields items in that same stored order.

### Binary search tree

```python
from structkit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 3, 8, 1):
    tree.insert(value)
assert list(tree) == [1, 3, 5, 8]
assert list(reversed(tree)) == [8, 5, 3, 1]
assert 3 in tree
assert tree.find_min() == 1 and tree.find_max() == 8
assert tree.erase(3) is True
assert tree.erase(42) is False

cursor = tree.begin()
assert cursor.value() == 1
cursor.forward()
assert cursor.value() == 5
```

Equal values are stored to the left, so duplicates are kept. `find_min()`
and `find_max()` raise `ValueError` on an empty tree; reading or moving a
cursor that stands at `end()` raises `InvalidTreeCursorError`.
`print(file)` writes every element in order with no separator.

### Linked-list cursors

`ListCursor` walks chains of `ListNode` objects, forwards or in reverse. Its
owner is any object with a `head_node` attribute.

```python
from types import SimpleNamespace
from structkit.list_cursor import ListCursor, ListNode

a = ListNode(1)
b = ListNode(2, prev_node=a)
a.next_node = b
owner = SimpleNamespace(head_node=a)

c = ListCursor(owner, a)
c.forward()
assert c.value() == 2

r = ListCursor(owner, b, reverse=True)
r.forward()
assert r.value() == 1
assert r.base() == ListCursor(owner, b)   # forward cursor one to the right
```

A cursor whose node is `None` raises `InvalidCursorError` when read or moved.

### Cursor movement

`advance`, `next_of` and `prev_of` move any cursor that declares a
`category` of type `IteratorCategory`: random-access cursors jump with `+=`,
bidirectional ones step with `forward()`/`backward()`, and input or forward
cursors only step forward (a negative step raises `ValueError`).

```python
from structkit.cursors import IteratorCategory, next_of

assert IteratorCategory.RANDOM_ACCESS.includes(IteratorCategory.FORWARD)
moved = next_of(tree.begin())      # a copy; the original stays put
assert moved.value() == 5
```

### Sorting

```python
from structkit.sorting import sort, greater, quick_sort

data = [5, 2, 9, 1, 7]
sort(data)
assert data == [1, 2, 5, 7, 9]

sort(data, greater)
assert data == [9, 7, 5, 2, 1]

part = [4, 3, 2, 1, 0]
quick_sort(part, 1, 4)             # sorts part[1:4] only
assert part == [4, 1, 2, 3, 0]
```

`sort` works in place using introsort: insertion sort for ranges of 16 or
fewer items, Hoare partitioning otherwise, and heap sort once the depth limit
of `2 * floor_log2(len(seq))` is used up. The range functions take
`(seq, begin, end, comp)`; an invalid range raises `IndexError`.

## What the package does not provide

- No linked-list container: `structkit.list_cursor` supplies only nodes and
  cursors, and building and relinking the chain is left to the caller.
- No self-balancing tree: `BinarySearchTree` is unbalanced, so sorted
  insertions give it linear height.
- No console output stream or number formatting helpers.
- No command-line program.