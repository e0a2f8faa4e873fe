# algolab

A collection of classic algorithms and data structures written as plain,
dependency-free Python.

## Installation

```
pip install algolab
```

To run the test suite:

```
pip install "algolab[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.arith` | Fibonacci (`fibonacci_recursive`, `fibonacci_memoized`, `fibonacci_tabulated`), `factorial`, `bit_xor`, `gcd`, `is_leap_year`, `leap_years`, `luhn_check`, `max_subarray_sum`, `pointer_bits` |
| `algolab.arrays` | `rotate_left`, `rotate_left_by_one` |
| `algolab.text` | `word_count` returning a `WordCount`, `hex_dump` |
| `algolab.segment_tree` | `MinSegmentTree` for range-minimum queries with point updates, `run_commands` |
| `algolab.linked_lists` | `SinglyLinkedList`, `SortedLinkedList` |
| `algolab.doubly` | `DoublyLinkedList`, `XorLinkedList` |
| `algolab.stacks` | `BoundedStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `algolab.queues` | `BoundedQueue`, `TwoStackQueue`, `QueueFullError`, `QueueEmptyError` |
| `algolab.typelist` | `TypeList`, a list of fixed-size byte items with an internal cursor |
| `algolab.trees` | `BinarySearchTree` with recursive-order and stack-driven traversals |
| `algolab.minheap` | `NameHeap`, a min-heap of (first name, last name) pairs, `run_commands` |
| `algolab.graphs` | `bfs`, `is_bipartite`, `dijkstra`, `floyd_warshall`, `WeightedGraph` |
| `algolab.sparse` | `SparseMatrix` with addition, multiplication and triplet views |

Some limits worth knowing:

- `fibonacci_memoized` accepts `n` from 0 to 99; `factorial` accepts `n >= 1`.
- `max_subarray_sum` counts the empty subarray, so it never returns a
  negative number.
- `MinSegmentTree.query` returns `999999` (`NO_MINIMUM`) for a range that
  holds no element.
- `WeightedGraph` treats a weight of 0 as "no edge", and `shortest_paths`
  reports 0 where there is no path.

## Examples

```python
from algolab.arith import factorial, fibonacci_tabulated, gcd, is_leap_year, luhn_check

factorial(5)               # 120
fibonacci_tabulated(40)    # 102334155
gcd(12, 18)                # 6
is_leap_year(2000)         # True
is_leap_year(1900)         # False
luhn_check("79927398713")  # True
```

```python
from algolab.stacks import BoundedStack, StackOverflowError

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("full")
```

```python
from algolab.trees import BinarySearchTree

tree = BinarySearchTree([2, 1, 4, 3, 5])
tree.inorder()    # [1, 2, 3, 4, 5]
tree.preorder()   # [2, 1, 4, 3, 5]
tree.postorder()  # [1, 3, 5, 4, 2]
```

```python
from algolab.sparse import SparseMatrix

matrix = SparseMatrix.from_dense([
    [0, 0, 3, 0, 4],
    [0, 0, 5, 7, 0],
    [0, 0, 0, 0, 0],
    [0, 2, 6, 0, 0],
])
matrix.triplet_table()
matrix.column_table()
matrix.to_dense()
```

## Command-line tools

Two commands read a script of operations from a file named on the command
line, or from standard input, and print the answers.

`algolab-rmq` answers range-minimum queries. The script starts with the
number of values and the number of commands, then the values; then each
command is either `q a b` (minimum of positions `a`..`b`, counted from 1) or
`u a b` (set position `a` to `b`):

```
$ printf '5 5\n1 5 2 4 3\nq 1 5\nq 1 3\nq 3 5\nu 3 6\nq 3 5\n' | algolab-rmq
1
1
2
3
```

`algolab-nameheap` runs a heap of names. The script starts with the number
of commands; each command is one of `InitHeap first last`,
`Insert first last` (prints the position where the name settled),
`FindMin`, `DeleteMin` or `Delete position`. A command that fails prints
`-1`:

```
$ printf '3\nInsert Ada Lovelace\nInsert Alan Turing\nFindMin\n' | algolab-nameheap
1
2
Ada Lovelace
```

## What is not included

The package has no sorting routines; use Python's built-in `sorted` or
`list.sort`. It keeps nothing on disk and offers no interactive menus: the
data structures live in memory and are driven from Python code or the two
script-reading commands above.