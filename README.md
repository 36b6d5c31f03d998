# dsakit

Plain-Python implementations of classic data structures and algorithms:
bounded queues and a stack, a singly linked list, a binary search tree, a trie,
level-order traversal of binary trees, graph algorithms, sorting routines,
small array algorithms and backtracking searches.

The package needs no third-party libraries and runs on Python 3.10 or newer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.queues` | `CircularQueue`, `ReservedSlotQueue`, `ShiftingQueue`, `LinearQueue`, `StackQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.stack` | `Stack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.linked_list` | `SinglyLinkedList`, `Node`, `Student` |
| `dsakit.sorting` | `merge_sort`, `quick_sort`, `selection_sort`, `exchange_sort`, `heap_sort`, `shell_sort` |
| `dsakit.arrays` | `count_arithmetic_slices`, `dutch_flag_sort`, `sentinel_search` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.trie` | `Trie` |
| `dsakit.binary_tree` | `TreeNode`, `build_tree`, `level_order`, `level_order_rows` |
| `dsakit.graphs` | `Graph`, `dijkstra`, `floyd_warshall`, `format_distance_matrix`, `prim_mst` |
| `dsakit.recursion` | `letter_combinations`, `place_knights`, `format_board`, `combination_sum`, `unique_subsets` |

### Queues and stack

- `CircularQueue(capacity)`: a ring buffer holding up to `capacity` items.
- `ReservedSlotQueue(size)`: a ring buffer that keeps one slot free, so it
  holds at most `size - 1` items.
- `ShiftingQueue(capacity)`: a bounded queue whose items stay packed at the
  front; `dequeue` shifts the rest forward.
- `LinearQueue(capacity)`: front and rear only move forward, so slots freed
  by dequeuing are never reused.
- `StackQueue()`: an unbounded queue kept in a stack.
- `Stack(capacity)`: a bounded LIFO stack with `push`, `pop` and `peek`.

A full queue raises `QueueFullError`, an empty one `QueueEmptyError`; the
stack raises `StackOverflowError` and `StackUnderflowError`. The bounded
containers support `len()` and iterate from front to rear (the stack from
bottom to top).

### Linked list

`SinglyLinkedList(items=(), key=None)` uses 1-based positions. `key` is a
function that picks the field that `insert_after`, `delete_where` and `find`
match against; `Student(roll, age, name)` is a ready-made record for it.
Missing keys raise `KeyError`, bad positions and deletion from an empty list
raise `IndexError`. `reverse()` relinks the nodes in place.

### Sorting and arrays

Every sort returns a new list and leaves its input untouched.
`count_arithmetic_slices` counts contiguous runs of three or more items with a
constant difference; `dutch_flag_sort` sorts values that are 0, 1 or 2 and
raises `ValueError` for anything else; `sentinel_search` returns the 1-based
location of an item, raising `ValueError` when it is absent.

### Trees and tries

`BinarySearchTree` ignores duplicate inserts, raises `KeyError` when deleting a
missing value, and offers `in_order`, `pre_order` and `post_order` lists.
`Trie` stores words of the letters a-z only; other words raise `ValueError` on
`insert` and `search`, and are simply reported absent by `in`.
`build_tree` reads a pre-order listing in which `-1` marks a missing child.

### Graphs

- `Graph.dfs(start)` returns reachable vertices in depth-first order.
- `dijkstra(adjacency, source)` takes a mapping of vertex to
  `(neighbour, weight)` pairs and returns a dict of distances to reachable
  vertices.
- `floyd_warshall(vertex_count, edges)` works on vertices numbered
  `1..vertex_count`; row and column `i - 1` belong to vertex `i`, and
  unreachable pairs hold `math.inf`. `format_distance_matrix` prints those
  as `I`.
- `prim_mst(matrix)` grows a spanning tree from vertex 0 over a square
  adjacency matrix where 0 means no edge, returning `(from, to, weight)`
  edges; a disconnected graph raises `ValueError`.

### Backtracking

- `letter_combinations(digits)` spells phone-keypad words.
- `place_knights(rows, cols, knights)` yields every board of mutually safe
  knights as tuples of row strings (`K` knight, `A` attacked, `_` free);
  `format_board` renders one.
- `combination_sum(candidates, target)` reuses positive candidates freely.
- `unique_subsets(items)` skips adjacent duplicates, so sort the input first
  to get each subset once.

## Examples

```python
from dsakit.queues import CircularQueue, QueueFullError

q = CircularQueue(3)
for value in (10, 20, 30):
    q.enqueue(value)
try:
    q.enqueue(40)
except QueueFullError:
    print("full")
print(q.dequeue(), list(q))
```

```python
from dsakit.sorting import merge_sort, heap_sort

print(merge_sort([11, 22, 34, 54, 12, 98, 10]))
print(heap_sort([1, 14, 3, 7, 0]))
```

```python
from dsakit.bst import BinarySearchTree
from dsakit.trie import Trie

tree = BinarySearchTree([50, 30, 70, 20, 40])
print(tree.in_order(), 40 in tree)

words = Trie(["abcd", "spd", "spdking"])
print(words.search("spd"), "abcdk" in words)
```

```python
from dsakit.graphs import Graph, floyd_warshall, format_distance_matrix

g = Graph()
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(source, target)
print(g.dfs(2))

matrix = floyd_warshall(3, [(1, 2, 4), (2, 3, 1)])
print(format_distance_matrix(matrix))
```

```python
from dsakit.recursion import combination_sum, letter_combinations, unique_subsets

print(combination_sum([2, 3, 6, 7], 7))
print(letter_combinations("23"))
print(unique_subsets([1, 2, 2]))
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for driving the queues, stack, list or tree; build those around the
classes above if you need them. Nothing is stored between runs.