# dsabook

Textbook linked-list algorithms and a few backtracking generators in plain
Python, with no third-party dependencies.

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

- `dsabook.singly`: `Node` (with `data` and `next`), `SinglyLinkedList`
  (`len()`, iteration, `search`, `insert_at_start`, `insert_at_end`,
  `insert_at`, `delete_at_start`, `delete_at_end`, `delete_at`) and the helpers
  `from_values`, `to_values`, `node_count` and `find`, which work on bare
  chains of nodes.
- `dsabook.doubly`: `DNode` and `DoublyLinkedList`, with the same insert and
  delete operations, which also supports `reversed()`.
- `dsabook.circular`: `CNode` and `CircularLinkedList` (`insert_at_end`,
  `insert_at_front`, `delete_first`, `delete_last`); `str()` gives the values
  separated by spaces.
- `dsabook.cycles`: `has_cycle_hashing`, `has_cycle_floyd`, `loop_start`,
  `loop_length`.
- `dsabook.positions`: `fractional_node`, `modular_node`,
  `modular_node_from_end`, the `nth_from_end_*` and `middle_*` variants, and
  `is_even_length`.
- `dsabook.reversal`: `reverse_iterative`, `reverse_recursive`,
  `reverse_pairs_recursive`, `reverse_pairs_iterative`, `reverse_in_blocks`,
  `swap_adjacent`.
- `dsabook.rearrange`: `reorder`, `rotate_right`, `partition`,
  `is_palindrome` (which leaves the chain as it found it).
- `dsabook.combine`: `add_numbers`, `merge_sorted_recursive`,
  `merge_sorted_iterative`, the `intersection_*` variants, `insert_sorted`,
  `remove_duplicates`.
- `dsabook.josephus`: `josephus_survivor`.
- `dsabook.backtracking`: `n_bit_strings`, `n_char_strings`.
- `dsabook.compare`: `same_elements`, a multiset equality check.

## Example

```python
from dsabook.singly import from_values, to_values
from dsabook.reversal import reverse_in_blocks
from dsabook.josephus import josephus_survivor
from dsabook.backtracking import n_bit_strings

head = from_values([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
print(to_values(reverse_in_blocks(head, 3)))   # [3, 2, 1, 6, 5, 4, 9, 8, 7, 10]

print(josephus_survivor(7, 3))                  # 5
print(sorted(n_bit_strings(3)))                 # ['000', '001', ..., '111']
```

## Conventions

- Algorithm functions take the head `Node` of a chain, or `None` for an empty
  chain. Functions that rearrange a chain relink its nodes in place and return
  the new head.
- Lookups that find nothing return `None`: the `positions` functions, the
  `intersection_*` functions, `loop_start` and `loop_length`.
- Invalid arguments raise `ValueError`: a `k` that is not positive in
  `fractional_node`, `modular_node`, `modular_node_from_end` and
  `reverse_in_blocks`; a negative `k` in `rotate_right`; a negative length in
  the backtracking generators; `n < 1` in `josephus_survivor`.
- `n_bit_strings(0)` and `n_char_strings(k, 0)` return an empty list.

## What it does not do

This is a library only: it installs no command-line program.