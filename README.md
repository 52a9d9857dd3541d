# algokit

A small library of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `largest`, `smallest`, `contains`, `push_zeros_to_end`, `reverse_in_place`, `second_largest`, `sort_binary`, `swap_alternate`, `sorted_intersection` |
| `algokit.hashing` | `count_frequencies`, `bounded_frequencies`, `answer_queries` |
| `algokit.graphs` | `adjacency_matrix`, `format_matrix`, and the `algokit-graph` command |
| `algokit.recursion` | `repeat_name`, `count_up`, `count_down`, `sum_to`, `reverse_list`, `is_palindrome`, `fibonacci`, `subsequences`, `subsequences_with_sum`, `first_subsequence_with_sum`, `count_subsequences_with_sum` |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` (all in place), `quick_sort` (returns a sorted copy) |
| `algokit.stacks` | `ArrayStack`, `BoundedQueue`, `LinkedStack`, `LinkedQueue`, and the `Overflow` / `Underflow` errors |
| `algokit.strings` | `reverse_string`, `is_palindrome`, `defang_ip`, `is_rotated_by_two`, `is_pangram`, `sort_letters`, `longest_palindrome_length`, `sort_sentence` |
| `algokit.linked_list` | `LinkedList` (singly linked, 1-based positions) |
| `algokit.circular_list` | `CircularList` (1-based positions) |
| `algokit.doubly_linked_list` | `DoublyLinkedList` (1-based positions, in-place `reverse`) |
| `algokit.polynomial` | `Term`, `add_polynomials`, `format_polynomial` |
| `algokit.tree` | `TreeNode`, `build_level_order`, `build_preorder`, `preorder`, `inorder`, `postorder`, `level_order`, `size`, `total`, `count_leaves`, `count_internal`, `height` |
| `algokit.tree_properties` | `is_identical`, `mirror`, `is_balanced`, `spiral_order`, `are_cousins`, `min_burn_time`, `max_special_path_sum` |
| `algokit.tree_views` | `left_view`, `right_view`, `top_view`, `vertical_order`, `diagonal_order`, `boundary` |
| `algokit.tree_traversal` | `iterative_preorder`, `iterative_postorder`, `iterative_inorder`, `morris_inorder`, `morris_preorder`, `flatten` |
| `algokit.tree_construction` | `build_from_preorder`, `build_from_postorder` |

## Examples

```python
from algokit.arrays import largest, sorted_intersection
from algokit.recursion import fibonacci
from algokit.stacks import ArrayStack

largest([2, 5, 1, 3, 0])                           # 5
sorted_intersection([1, 2, 2, 3], [2, 2, 4])        # [2, 2]
fibonacci(4)                                        # 3

stack = ArrayStack()            # capacity 1000 by default
stack.push(6)
stack.push(3)
stack.push(7)
stack.pop()                                         # 7
len(stack)                                          # 2
```

Binary trees are made of `TreeNode` objects, built directly or with the
builders: `build_level_order` and `build_preorder` take a stream of values
in which `-1` marks a missing child, and `build_from_preorder` /
`build_from_postorder` rebuild a tree of distinct values from its inorder
listing and one other. Every tree function takes the root node.

```python
from algokit.tree import build_level_order, inorder

root = build_level_order([1, 2, 3, -1, -1, -1, -1])
inorder(root)                                       # [2, 1, 3]
```

## Errors

Removing or reading from an empty stack or queue in `algokit.stacks`
raises `Underflow` (a subclass of `IndexError`); adding to a full
`ArrayStack` or `BoundedQueue` raises `Overflow`. The list classes return
`None` when asked to remove from an empty list, and raise `IndexError` for
positions outside the list where a position is required. Malformed input
elsewhere, such as an empty sequence passed to `largest` or a vertex
outside the graph, raises `ValueError`.

## Command line

The `algokit-graph` command reads a vertex count, an edge count and then
the edges (`u v`, or `u v weight` with `--weighted`) as whitespace-separated
integers from standard input, and prints the adjacency matrix one row per
line. Edges fill both cells unless `--directed` is given.

```
printf '3 2\n0 1\n1 2\n' | algokit-graph
0 1 0
1 0 1
0 1 0
```

On bad input it prints an error to standard error and exits with status 1.