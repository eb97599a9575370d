# algodrills

A small collection of classic array and string problems. Most problems have
two solutions: a straightforward brute-force version (suffixed `_brute`) and
a faster one. On valid input each pair gives the same answers, so the pairs
are useful for study and for checking one against the other.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Problems

| Module | Functions |
| --- | --- |
| `algodrills.three_sum` | `three_sum_brute(nums)`, `three_sum(nums)` |
| `algodrills.stock` | `max_profit_brute(prices)`, `max_profit(prices)` |
| `algodrills.duplicates` | `contains_duplicate_brute(nums)`, `contains_duplicate(nums)` |
| `algodrills.smaller_numbers` | `smaller_numbers_than_current_brute(nums)`, `smaller_numbers_than_current(nums)` |
| `algodrills.mountain` | `longest_mountain_brute(arr)`, `longest_mountain(arr)` |
| `algodrills.points` | `min_time_to_visit_all_points_brute(points)`, `min_time_to_visit_all_points(points)` |
| `algodrills.missing_number` | `missing_number_brute(nums, n)`, `missing_number(nums, n)` |
| `algodrills.islands` | `num_islands(grid)` |
| `algodrills.disappeared` | `find_disappeared_numbers_brute(nums)`, `find_disappeared_numbers(nums)` |
| `algodrills.spiral` | `spiral_order(matrix)` |
| `algodrills.squares` | `sorted_squares_brute(nums)`, `sorted_squares(nums)` |
| `algodrills.two_sum` | `two_sum_brute(nums, target)`, `two_sum(nums, target)` |
| `algodrills.prefix` | `longest_common_prefix_brute(strs)`, `longest_common_prefix(strs)` |

## Examples

```python
from algodrills.three_sum import three_sum
from algodrills.stock import max_profit
from algodrills.missing_number import missing_number
from algodrills.prefix import longest_common_prefix

three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
max_profit([7, 1, 5, 3, 6, 4])              # 5
missing_number([5, 4, 2, 1], 5)             # 3
longest_common_prefix(["flower", "flow", "flight"])  # "fl"
```

```python
from algodrills.islands import num_islands

grid = [
    ["1", "1", "1", "1", "0"],
    ["1", "1", "0", "1", "0"],
    ["1", "1", "0", "0", "0"],
    ["0", "0", "0", "0", "0"],
]
num_islands(grid)  # 1
```

```python
from algodrills.spiral import spiral_order
from algodrills.two_sum import two_sum

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
two_sum([2, 7, 11, 15], 9)                        # (0, 1)
two_sum([1, 2], 10)                               # None
```

## Notes on behaviour

- `three_sum` and `three_sum_brute` return triplets in ascending order, with
  the list of triplets in lexicographic order. Neither changes its input.
- `max_profit` and `max_profit_brute` never return less than zero.
- `smaller_numbers_than_current` works on values from 0 to 100 and raises
  `ValueError` for anything outside that range; the brute-force version
  accepts any integers.
- `find_disappeared_numbers` requires every value to lie in `1..len(nums)`
  and raises `ValueError` otherwise; it does not change its input.
- `min_time_to_visit_all_points` and its brute-force version raise
  `ValueError` when given no points.
- `missing_number_brute` raises `ValueError` when no number in `1..n` is
  missing (which only happens when `n` is below 1).
- `two_sum` and `two_sum_brute` return a pair of indices as a tuple, or
  `None` when no pair adds up to the target.
- `num_islands` takes a grid of `"1"` and `"0"` strings and leaves it
  unchanged.
- `longest_common_prefix` does not reorder its input.

## What it does not do

This is a library of functions only. It has no command-line program and
prints nothing; call the functions from your own code.