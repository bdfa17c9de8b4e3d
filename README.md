# drillbook

A collection of small, classic programming exercises as plain Python
functions. The collection covers array manipulation, rotations, searching,
sorting, string handling and dynamic programming. It also has a linked list,
a graph and some text patterns.

## Installation

```
pip install drillbook
```

## Usage

```python
from drillbook.arrays import double_and_compact, kth_smallest
from drillbook.rotations import rotate_right, rotation_count, search_rotated
from drillbook.dp import coin_change_ways
from drillbook.sorting import merge_sort
from drillbook.linked_list import LinkedList
from drillbook.graph import Graph

double_and_compact([2, 2, 0, 4, 0, 8])      # [4, 4, 8, 0, 0, 0]
kth_smallest([7, 3, 9, 1], 2)               # 3
rotate_right([1, 2, 3, 4, 5], 2)            # [4, 5, 1, 2, 3]
rotation_count([15, 18, 2, 3, 6, 12])       # 2
search_rotated([3, 4, 5, 1, 2], 1)          # 3
coin_change_ways(4, [1, 2, 3])              # 4
merge_sort([5, 1, 4])                       # [1, 4, 5]

items = LinkedList([1, 2, 3])
items.reverse()
list(items)                                 # [3, 2, 1]

graph = Graph(4)
graph.add_edge(1, 2)
graph.neighbours(1)                         # [2]
```

When an input has no meaningful answer, the functions raise `ValueError`.
Examples are an empty list passed to `mean`, `median`, `largest` or
`minimum`, an out-of-range `k`, or a negative count.

## Modules

- `drillbook.arrays`
  - `double_and_compact`, `move_zeroes_to_end`
  - `largest`, `second_largest`, `mean`, `median`
  - `place_at_index`, `alternate_min_max`, `zigzag_arrange`
  - `reorder_by_index`, `kth_smallest`, `reversed_list`
- `drillbook.rotations`
  - `rotate_range_right`, `index_after_rotations`
  - `rotation_sums`, `max_rotation_sum`
  - `rotation_count`, `minimum`
  - `rotate_right_by_one`, `rotate_right`, `rotate_left`
  - `search_rotated`: returns an index or `None`.
- `drillbook.linked_list`
  - `Node`
  - `LinkedList`: supports `reverse()`, iteration and `len()`.
- `drillbook.dp`
  - `friend_pairings`, `catalan`, `coin_change_ways`, `egg_drop`, `fibonacci`
- `drillbook.graph`
  - `Graph`: a directed graph with vertices numbered from one.
  - It provides `add_edge`, `neighbours` and `render`. `render` returns a
    text listing of each vertex's neighbours.
- `drillbook.searching`
  - `binary_search` and `linear_search`. Each returns `True` or `False`.
- `drillbook.sorting`
  - `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`: each returns
    a sorted copy.
  - `is_power_of_two`
  - `thanos_sort_length`: the length of the sorted prefix that is left after
    the back half is discarded again and again.
- `drillbook.factorials`
  - `factorial`, `digit_count`, `trailing_zeros`
- `drillbook.strings`
  - `substring_count`, `substrings`
  - `sorted_unique_chars`, `remove_duplicates`
  - `length`, `concatenate`
  - `to_upper`, `to_lower`: these change ASCII letters only.
- `drillbook.patterns`
  - `counting_rows`, `star_staircase`, `digit_staircase`, `floyd_triangle`
  - `letter_staircase`, `right_aligned_numbers`, `star_pyramid`,
    `number_pyramid`
  - Each returns the pattern as a string with one line per row.

## What it does not do

drillbook is a library of functions only. It has no command-line programs.
It does not read numbers from standard input and it does not print results.
Call the functions and handle their return values yourself.

## Running the tests

```
pip install drillbook[test]
pytest
```