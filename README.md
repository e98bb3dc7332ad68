# dsapractice

A small collection of classic data-structure and algorithm exercises, written
as plain Python functions and classes, with a few small command-line programs.

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

| Module                    | Contents |
|---------------------------|----------|
| `dsapractice.arrays`      | `two_sum`, `max_area`, `max_profit`, `four_sum`, `remove_duplicates`, `remove_element`, `move_zeroes`, `intersection`, `max_consecutive_ones`, `sort_colors` |
| `dsapractice.strings`     | `is_palindrome`, `str_str`, `is_subsequence` |
| `dsapractice.linked_list` | `ListNode`, `from_values`, `to_values`, `has_cycle`, `detect_cycle`, `get_intersection_node`, `remove_nth_from_end`, `reverse_list`, `is_palindrome_list`, `swap_pairs`, `odd_even_list` |
| `dsapractice.design_list` | `MyLinkedList`, a singly linked list addressed by index |
| `dsapractice.search`      | `binary_search` |
| `dsapractice.grid`        | `to_grid`, splitting a flat sequence into rows |
| `dsapractice.sorting`     | `selection_sort`, `bubble_sort` (both return a new list) |
| `dsapractice.patterns`    | star pyramids and diamonds, each returned as a list of lines |
| `dsapractice.calculator`  | `calculate`, a tiny integer calculator |

## Examples

```python
from dsapractice.arrays import two_sum, four_sum
from dsapractice.strings import is_palindrome
from dsapractice.search import binary_search

two_sum([2, 7, 11, 15], 9)                       # (0, 1); None when no pair exists
four_sum([1, 0, -1, 0, -2, 2], 0)                # [[-2, -1, 1, 2], [-2, 0, 0, 2], [-1, 0, 0, 1]]
is_palindrome("A man, a plan, a canal: Panama")  # True
binary_search([1, 3, 5, 7, 9, 11], 9)            # 4; -1 when absent
```

Some functions work in place on a list: `move_zeroes` and `sort_colors`
rearrange it, while `remove_duplicates` and `remove_element` compact the kept
items to the front and return how many there are. `max_profit` raises
`ValueError` on an empty input.

Linked lists are built from and turned back into Python lists:

```python
from dsapractice.linked_list import from_values, to_values, swap_pairs

head = from_values([1, 2, 3, 4])
to_values(swap_pairs(head))                # [2, 1, 4, 3]
list(from_values([5, 6]))                  # [5, 6]; a ListNode iterates its values
```

`remove_nth_from_end` raises `IndexError` when `n` is not between 1 and the
length of the list. `is_palindrome_list` leaves the list as it found it.

`MyLinkedList` supports `len()` and iteration alongside its indexed methods.
Inserting or deleting at an out-of-range index does nothing; `get` at an
out-of-range index raises `IndexError`.

```python
from dsapractice.design_list import MyLinkedList

items = MyLinkedList()
items.add_at_head(1)
items.add_at_tail(3)
items.add_at_index(1, 2)
list(items)                                # [1, 2, 3]
items.get(1)                               # 2
items.delete_at_index(1)
len(items)                                 # 2
```

`calculate(a, b, op)` supports `+`, `-`, `*`, `%` (remainder with the sign of
`a`) and `|`; `>>` and `<<` give the fixed values `64 >> 2` and `10 << 2`; any
other operator gives `a & b`.

## Commands

```
dsa-binary-search [TARGET]   # index of TARGET (default 9) in 1 3 5 7 9 11, or -1
dsa-grid                     # read 12 integers from stdin, print them as 3 rows of 4
dsa-patterns [SIZE]          # print every star pattern at SIZE (default 5)
dsa-sort                     # read N then N integers from stdin, print them sorted twice
dsa-calc                     # read "a b op" from stdin and print the result
```

The commands that read standard input print an error and exit with status 1
when the input is missing or not made of integers.