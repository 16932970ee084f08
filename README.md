# arraydrills

A collection of classic array and matrix exercises, each written as a plain
Python function that takes lists of integers. Many problems come in more than
one flavour (a fast version next to a counting or brute-force one), so you
can compare approaches and check one against another.

The package has no dependencies beyond the standard library.

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

| Module | Functions |
| --- | --- |
| `arraydrills.basics` | `selection_sort`, `largest_element`, `linear_search`, `max_consecutive_ones`, `second_largest`, `third_largest` |
| `arraydrills.inversions` | `count_inversions`, `count_inversions_brute`, `count_reverse_pairs`, `count_reverse_pairs_brute` |
| `arraydrills.majority` | `majority_element`, `majority_element_brute` |
| `arraydrills.products` | `max_product`, `max_product_brute` |
| `arraydrills.merging` | `merge_sorted`, `merge_without_space`, `merged` |
| `arraydrills.missing_repeating` | `find_missing_repeating`, `find_missing_repeating_counting`, `find_missing_repeating_brute`, and the `MissingRepeating` result tuple |
| `arraydrills.ksum` | `two_sum`, `two_sum_brute`, `two_sum_sorted`, `three_sum`, `three_sum_hashing`, `three_sum_brute`, `four_sum` |
| `arraydrills.leaders` | `leaders`, `leaders_brute` |
| `arraydrills.pascal` | `n_cr`, `pascal_element`, `nth_row`, `pascal_triangle`, `main` |
| `arraydrills.rearrange` | `rearrange_by_sign`, `rearrange_by_sign_split` |
| `arraydrills.matrix` | `rotate_clockwise`, `rotated_clockwise`, `spiral_order` |
| `arraydrills.sort012` | `sort_012`, `sort_012_counting` |
| `arraydrills.subarrays` | `generate_subarrays`, `max_subarray_sum`, `max_subarray_sum_better`, `max_subarray_sum_brute` |

## Examples

```python
from arraydrills.basics import linear_search, second_largest
from arraydrills.inversions import count_inversions
from arraydrills.ksum import two_sum
from arraydrills.missing_repeating import find_missing_repeating
from arraydrills.subarrays import max_subarray_sum
from arraydrills.matrix import spiral_order

linear_search([1, 2, 4, 6, 7], 9)          # -1, the target is absent
second_largest([1, 2])                     # 1
count_inversions([5, 4, 3, 2, 1])          # 10
two_sum([2, 6, 5, 8, 11], 14)              # (1, 3)
max_subarray_sum([-4, -3, -2, -1])         # -1

find_missing_repeating([3, 1, 2, 5, 4, 6, 7, 5])
# MissingRepeating(repeating=5, missing=8)

spiral_order([
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
])
# [1, 2, 3, 4, 8, 12, 16, 15, 14, 13, 9, 5, 6, 7, 11, 10]
```

## Conventions

- Functions whose names describe an action on the list work in place and
  return `None`: `selection_sort`, `merge_sorted`, `merge_without_space`,
  `rotate_clockwise`, `sort_012` and `sort_012_counting`.
  `rotated_clockwise` and `merged` return new lists and leave their input
  alone.
- Where a search finds nothing, the answer is `-1` (or `(-1, -1)` for the
  pair-returning `two_sum` and `two_sum_sorted`). This holds for
  `linear_search`, `second_largest`, `third_largest`, the majority functions
  and the fields of `MissingRepeating`.
- Bad input raises `ValueError`: an empty sequence for `largest_element`,
  `max_product` and the `max_subarray_sum` family; values outside `1..n` for
  `find_missing_repeating` and `find_missing_repeating_counting`; values other
  than 0, 1 and 2 for the `sort_012` functions; unequal numbers of positive
  and non-positive values for the `rearrange_by_sign` functions; a non-square
  matrix for `rotate_clockwise` and ragged rows for `rotated_clockwise` and
  `spiral_order`; negative arguments for `n_cr`.

## Pascal's triangle from the command line

The package installs one command, an interactive menu for Pascal's triangle:

```
arraydrills-pascal
```

It reads its answers from standard input. First choose an option:

1. the element at row `r` and column `c` (both counted from zero),
2. row `n` of the triangle,
3. every row from 0 up to `n`.

It then asks for the numbers it needs. A column beyond its row, or a negative
position, prints `Invalid position!`; an unknown option prints
`Invalid choice!`; input that is not a number where one is needed prints
`Invalid input!` and exits with status 1.

From Python, `main` takes the answers as a list of strings instead of
reading standard input:

```python
from arraydrills.pascal import main

main(["2", "4"])   # prints row 4: 1 4 6 4 1
```

## What it does not do

Pascal's triangle is the only exercise with a command; everything else is
used by importing its function. There is no exercise for elements that occur
more than a third of the time: the `majority` module covers only the
more-than-half case.