# dynprog

A collection of classic dynamic programming algorithms as plain Python
functions. It uses nothing beyond the standard library.

## Installation

```
pip install .
```

## Modules

- `dynprog.linear`: `count_distinct_ways`, `frog_jump`,
  `max_non_adjacent_sum`, `house_robber`, and the constant `MOD`
  (1,000,000,007)
- `dynprog.increasing`: `longest_increasing_subsequence`, `divisible_set`,
  `longest_string_chain`, `longest_bitonic_sequence`, `number_of_lis`
- `dynprog.grids`: `unique_paths`, `maze_obstacles`, `min_path_sum`,
  `triangle_min_path_sum`, `max_falling_path_sum`, `maximum_chocolates`,
  `ninja_training`, `count_squares`, `largest_rectangle_in_histogram`,
  `maximal_rectangle`
- `dynprog.subsets`: `subset_sum_to_k`, `can_partition`,
  `min_subset_sum_difference`, `count_subsets_with_sum`,
  `count_partitions`, `target_sum`
- `dynprog.knapsack`: `minimum_elements`, `count_ways_to_make_change`,
  `unbounded_knapsack`, `cut_rod`
- `dynprog.stocks`: `max_profit`, `max_profit_with_fee`
- `dynprog.strings`: `lcs_length`, `lcs_string`, `longest_common_substring`,
  `longest_palindromic_subsequence`, `min_insertions_palindrome`,
  `min_insert_delete`, `shortest_common_supersequence`, `edit_distance`,
  `wildcard_match`
- `dynprog.intervals`: `matrix_chain_multiplication`, `min_cut_cost`,
  `max_coins`, `count_boolean_ways`, `min_palindrome_partitions`,
  `max_partition_sum`

## Example

```python
from dynprog.strings import edit_distance, lcs_string
from dynprog.knapsack import count_ways_to_make_change

edit_distance("horse", "ros")              # 3
lcs_string("adebc", "dcadb")               # "adb"
count_ways_to_make_change([1, 2, 3], 4)    # 4
```

## Notes on results and errors

- `count_distinct_ways`, `maze_obstacles`, `count_boolean_ways` and
  `count_partitions` return their counts modulo 1,000,000,007. The other
  counting functions, `target_sum` among them, return exact integers.
- `minimum_elements` returns -1 when the target cannot be reached.
- In `maze_obstacles` a cell holding -1 is blocked.
- Functions that need at least one element or cell (for example
  `max_non_adjacent_sum`, `house_robber`, `max_profit`, `divisible_set`,
  the grid functions and the subset functions) raise `ValueError` on empty
  input. The subset functions also reject negative values, and the
  knapsack functions reject non-positive coins, denominations and weights.

## What it does not do

This is a library only: it has no command-line program, and it does not
read input files or print results.

## Running the tests

```
pip install ".[test]"
pytest
```