# dsakit

Classic data structures and algorithms written as plain Python functions and
classes, plus a small snake game for the terminal. There are no runtime
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

- `merge_sort(items)` and `quick_sort(items)` return a new ascending list.
  `quick_sort` uses the first element of each range as the pivot.

### `dsakit.searching`

- `binary_search(items, key)`: an index of `key` in a sorted sequence, or `-1`.
- `first_occurrence(items, key)`, `last_occurrence(items, key)`: index of the
  first or last `key` in a sorted sequence, or `-1`.
- `recursive_binary_search(items, key)`: `True` if `key` is in a sorted sequence.
- `linear_search(items, key)`: `True` if `key` occurs anywhere in `items`.
- `find_pivot(items)`: index of the smallest element of a rotated ascending
  sequence; raises `ValueError` when the sequence is empty.
- `lower_bound(items, key)`, `upper_bound(items, key)`: first index not less
  than / greater than `key`.

### `dsakit.recursion`

`factorial(n)` (1 for any `n` of 1 or less), `is_palindrome(text)`,
`is_sorted(items)`, `reverse_string(text)`, `recursive_sum(items)`, `add(a, b)`.

### `dsakit.arrays`

- `get_max(items)`, `get_min(items)`, `get_max_min(items)` (returns
  `(largest, smallest)`); each raises `ValueError` on empty input.
- `reverse_in_place(items)`, `swap_alternate(items)` (swaps elements 0 and 1,
  2 and 3, ...), `update_first(items, value)`: modify a list in place.
- `array_sum(items)`, `grid_contains(grid, target)`, `row_sums(grid)`.

### `dsakit.text`

`is_binary(text)` tells whether every character is `0` or `1`;
`reverse_with_stack(text)` reverses a string through a stack.

### `dsakit.singly_linked`

`Node` (`data`, `next`) and `SinglyLinkedList`, with `insert_at_head`,
`insert_at_tail`, `insert_at_position(position, data)` and
`delete_at(position)`. Positions count from 1; out-of-range positions raise
`IndexError`. `delete_at` returns the removed data. The list supports `len()`
and iteration.

Helpers that work on any chain of `Node` objects:
`is_circular(head)` (an empty chain counts as circular), `detect_loop(head)`,
`floyd_detect_loop(head)` (the meeting node, or `None`), `loop_start(head)`
and `remove_loop(head)`.

### `dsakit.doubly_linked`

`DoublyNode` and `DoublyLinkedList`, with the same operations as the singly
linked list, plus `reversed()` support.

### `dsakit.circular_linked`

`CircularLinkedList`, addressed through its tail. `insert_after(element, data)`
inserts after the first node holding `element` (in an empty list the new node
becomes the only one); `delete(value)` removes the first node holding `value`.
Both raise `ValueError` when the value is not found. Iteration starts at the
tail and goes round once.

### `dsakit.stack`

`ArrayStack(size)`: a stack holding at most `size` elements, with `push`,
`pop`, `peek` and `is_empty`. A full stack raises `StackOverflow`; an empty
one raises `StackUnderflow` (a subclass of `IndexError`).

### `dsakit.array_queue`

`ArrayQueue(size)`: a linear queue over `size` slots, with `enqueue`,
`dequeue`, `peek` and `is_empty`. Slots are not reused until the queue is
emptied, so after some dequeues it may raise `QueueFull` while holding fewer
than `size` elements. An empty queue raises `QueueEmpty` (a subclass of
`IndexError`).

### `dsakit.binary_tree`

`TreeNode` plus:

- `build_tree(values)`: build from values in preorder, `-1` marking a
  missing node.
- `build_from_level_order(values)`: build level by level, `-1` marking a
  missing child.
- `level_order(root)` (a list per level), `inorder(root)`, `preorder(root)`,
  `postorder(root)`.

Both builders raise `ValueError` if the values run out too early.

### `dsakit.bst`

`BinarySearchTree(values=())` with `insert`, `delete` (returns whether a value
was removed), `min_value`, `max_value` (both raise `ValueError` on an empty
tree), `inorder`, `preorder`, `postorder`, `level_order`, and support for
`in`, `len()` and iteration in ascending order. Values equal to a node go to
its left. `from_values(values)` inserts values until it meets `-1`.

### `dsakit.snake`

`SnakeGame` holds the state of one game (80 by 20 board by default);
`steer(key)` turns with `w`, `a`, `s`, `d` or ends the game with `x`,
`step()` advances one tick, and `render(player_name)` returns the board as
text. `Direction` lists the headings, and `difficulty_delay(choice)` maps
`"1"`, `"2"`, `"3"` to 50, 100 and 150 ms per tick (100 for anything else).

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import first_occurrence, last_occurrence
from dsakit.bst import from_values

print(merge_sort([3, 7, 0, 1, 5, 8]))           # [0, 1, 3, 5, 7, 8]
print(first_occurrence([1, 2, 3, 3, 5], 3))     # 2
print(last_occurrence([1, 2, 3, 3, 5], 3))      # 3

tree = from_values([10, 8, 21, 7, 27, -1])
print(tree.inorder())                            # [7, 8, 10, 21, 27]
print(tree.min_value(), tree.max_value())        # 7 27
```

## Snake

```
dsakit-snake
dsakit-snake --name alice --difficulty 3
```

Without `--name` or `--difficulty` the game asks for them. Steer with `w`,
`a`, `s`, `d`; press `x` to quit. Running into a wall or the tail ends the
game. Each fruit eaten scores 10 points and grows the tail.

## What it does not do

Apart from the snake game there is no command-line program: the data
structures and algorithms are library code that returns values rather than
reading input or printing results. Nothing is stored between runs, and the
snake game keeps no high scores.