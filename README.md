# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `binary_search`, `find_pivot`, `linear_search`, `is_sorted` |
| `dsakit.sorting` | `quick_sort`, `bubble_sort`, `selection_sort` (each returns a new list) |
| `dsakit.numeric` | `binary_to_decimal`, `decimal_to_binary`, `power`, `is_prime` |
| `dsakit.arrays` | `remove_duplicates`, `swap_alternate`, `sum_of_window_min_max`, `same_character_type`, `reverse_string` |
| `dsakit.patterns` | text patterns returned as lists of rows: `solid_square`, `left_triangle`, `inverted_triangle`, `right_aligned_inverted`, `number_triangle`, `right_aligned_numbers`, `number_pyramid`, `alpha_rows`, `alpha_diagonal`, `alpha_reverse_triangle`, `countdown_stars`, `butterfly`, and `main` for the command |
| `dsakit.singly_linked` | `Node`, `SinglyLinkedList`, `detect_loop`, `floyd_meeting_point`, `loop_start`, `remove_loop` |
| `dsakit.doubly_linked` | `DoublyNode`, `DoublyLinkedList` |
| `dsakit.circular_linked` | `CircularNode`, `CircularLinkedList`, `is_circular` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.binary_tree` | `TreeNode`, `build_tree`, `build_tree_level_order`, `level_order`, `reverse_level_order`, `inorder`, `preorder`, `postorder`, `kth_ancestor` |
| `dsakit.bst` | `insert`, `build_bst`, `min_node`, `max_node` |
| `dsakit.heap` | `MaxHeap` (`insert`, `peek`, `pop`), `heapify`, `heap_sort` |
| `dsakit.kqueue` | `KQueue` (k queues sharing one array), `QueueFullError`, `QueueEmptyError` |
| `dsakit.graph` | `Graph` with an adjacency list (`add_edge`, `format`) |

Searches report a miss as `-1`. Linked lists use 1-based positions and raise
`IndexError` for positions out of range. Stacks and `KQueue` raise their own
exceptions on overflow and underflow.

## Examples

```python
from dsakit.searching import binary_search
from dsakit.sorting import quick_sort
from dsakit.numeric import decimal_to_binary

binary_search([2, 5, 6, 9, 10, 14], 9)   # 3
quick_sort([5, 2, 9, 1, 3])              # [1, 2, 3, 5, 9]
decimal_to_binary(6)                     # 110
```

```python
from dsakit.singly_linked import SinglyLinkedList

lst = SinglyLinkedList()
lst.push_back(10)
lst.push_back(20)
lst.insert(2, 15)
list(lst)   # [10, 15, 20]
```

```python
from dsakit.stacks import ArrayStack

stack = ArrayStack(5)
stack.push(10)
stack.push(20)
stack.pop()
stack.peek()   # 10
```

```python
from dsakit.bst import build_bst, min_node, max_node

root = build_bst([10, 8, 21, 7, 27, 5, 4, 3])
min_node(root).data   # 3
max_node(root).data   # 27
```

```python
from dsakit.binary_tree import build_tree, level_order

# preorder values, -1 marks a missing child
root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
level_order(root)   # [[1], [3, 5], [7, 11, 17]]
```

## Command line

The pattern printers are available as a command:

```
dsakit-patterns --help
dsakit-patterns number-pyramid 4
```

It prints the chosen pattern for a given size, one row per line.

## What it does not do

Apart from `dsakit-patterns`, the package does not prompt for input: trees,
graphs and lists are built from values passed in as arguments, not read
interactively from the keyboard.