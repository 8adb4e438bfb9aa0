# dsakit

A small collection of classic data-structure and algorithm routines in plain
Python. It has no dependencies outside the standard library.

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

### `dsakit.arrays`

Searching and scanning integer sequences.

- Searches in sorted sequences: `binary_search`, `find_first_occurrence`,
  `find_last_occurrence`, `count_occurrences`, `find_kth_missing`. The search
  functions return `-1` when the target is absent.
- `linear_search` returns the first index of a value, or `-1`.
- Rotated sorted sequences: `search_rotated`, `find_min_rotated`,
  `find_max_rotated`, `find_pivot` (the smallest element) and
  `find_rotation_count`.
- `find_peak_element` returns the index of an element larger than its
  neighbours.
- `find_highest`, `find_second_highest`, `find_leaders` (listed right to
  left), `majority_element` (the Boyer-Moore candidate) and `max_product`
  (largest product of a contiguous subarray).
- `prefix_sums` and `suffix_sums` return running totals.
- `NumArray` answers inclusive range sums with `sum_range(left, right)`
  and supports `len()`; an invalid range raises `IndexError`.
- In-place edits of lists: `remove_duplicates`,
  `remove_duplicates_at_most_twice` (both return the new length) and
  `move_zeros_to_end`.
- `isqrt` returns the integer square root; negative input raises
  `ValueError`.

Functions that have no meaningful answer for an empty sequence (such as
`find_highest`, `find_leaders`, `majority_element`, `max_product`,
`find_min_rotated`) raise `ValueError`. `find_second_highest` raises
`ValueError` for fewer than two elements and returns `None` when every
element equals the maximum.

### `dsakit.strings`

- `add_binary(a, b)` adds two binary strings; a non-binary digit raises
  `ValueError`.
- `is_valid_parentheses(s)` checks that `()`, `{}` and `[]` are balanced and
  properly nested.

### `dsakit.contests`

Short puzzle functions: `domino_piling(m, n)`, `even_odd_position(n, k)`,
`team_solutions(problems)` (each problem an iterable of three 0/1 votes) and
`watermelon(w)`.

### `dsakit.matrix`

`generate_spiral(n)`, `spiral_order(matrix)`, `rotate(matrix)` (a quarter
turn clockwise, in place; non-square input raises `ValueError`),
`set_zeroes(matrix)` (in place) and `is_valid_sudoku(board)`, where `"."`
marks an empty cell.

### `dsakit.linked_lists`

A `ListNode` type (nodes compare by identity), `from_values` and
`to_values` for converting to and from Python lists, and the usual
algorithms: `reverse_list`, `find_middle`, `has_cycle`, `is_circular`,
`get_intersection_node`, `merge_two_lists`, `is_palindrome`,
`delete_duplicates`, `add_one` (digits most significant first) and
`add_two_numbers` (digits least significant first).

`LinkedList` is a singly linked container with `insert_at_start`,
`insert_at_end` and `insert_at_position`; it supports iteration, `len()` and
renders as `1 -> 2 -> NULL`. Insertion at a negative position or past the
end is ignored.

### `dsakit.doubly_linked_list`

`DoublyLinkedList` supports insertion and deletion at either end or at a
position, `reverse`, `clear`, iteration in both directions (`reversed()`),
`len()` and `in`. Inserting past the end appends; deleting at a position
that does not exist does nothing.

## Examples

```python
from dsakit.arrays import binary_search, NumArray
from dsakit.strings import add_binary
from dsakit.linked_lists import from_values, to_values, reverse_list
from dsakit.matrix import spiral_order

binary_search([1, 2, 3, 4, 5, 6, 7, 8, 9], 5)      # 4
add_binary("11", "1")                               # "100"
NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2)     # 1
to_values(reverse_list(from_values([1, 2, 3, 4])))  # [4, 3, 2, 1]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])     # [1, 2, 3, 6, 9, 8, 7, 4, 5]
```

```python
from dsakit.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList()
for value in (1, 2, 3):
    dll.insert_at_end(value)
dll.insert_at_beginning(0)
print(dll)                   # 0 <-> 1 <-> 2 <-> 3 <-> NULL
print(dll.format_reversed()) # 3 <-> 2 <-> 1 <-> 0 <-> NULL
```

## What it does not do

dsakit is a library only. It installs no command-line programs, and the
puzzle functions in `dsakit.contests` take their inputs as arguments rather
than reading them from standard input.