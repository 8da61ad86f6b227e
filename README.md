# algoset

A library of well-known algorithms written as plain Python functions and a
few small classes. It needs nothing beyond the standard library.

## Modules

- `algoset.strings`: `longest_palindrome`, `int_to_roman`,
  `longest_common_prefix`, `letter_combinations`, `word_break`,
  `num_tile_possibilities`, `divide_string`, `smallest_number`,
  `minimum_recolors`, and the `KEYPAD` mapping of digits to letters
- `algoset.parentheses`: `is_valid_brackets`, `generate_parentheses`,
  `is_balanced`, `remove_invalid_parentheses`, `check_valid_string`
- `algoset.structures`: `Trie` (`insert`, `search`, `starts_with`) and
  `QueueStack` (`push`, `pop`, `top`, `is_empty`, `len()`)
- `algoset.nodes`: `TreeNode`, `ListNode`, `linked_list`, `list_values`,
  `min_depth`, `find_min`, `delete_node`, `remove_zero_sum_sublists`
- `algoset.combinatorics`: `next_permutation`, `is_valid_placement`,
  `solve_sudoku`, `combination_sum`, `permute`, `solve_n_queens`,
  `get_permutation`, `subsets`, `subsets_with_dup`, `add_operators`
- `algoset.arrays`: `trap`, `pascal_row`, `pascal_triangle`, `max_profit`,
  `longest_consecutive`, `candy`, `rob`, `majority_elements`,
  `find_duplicate`, `find_132_pattern`, `subarray_sum`,
  `len_longest_fib_subseq`, `hours_needed`, `min_eating_speed`,
  `count_good_numbers` (modulo `MOD`, 10**9 + 7), `rearrange_by_sign`,
  `maximum_digit_sum_pair`, `colored_cells`
- `algoset.grids`: `rotate`, `unique_paths_with_obstacles`, `min_path_sum`,
  `set_zeroes`, `minimum_total`, `num_islands`, `max_area_of_island`,
  `flood_fill`, `min_falling_path_sum`, `oranges_rotting`
- `algoset.graphs`: `can_finish`, `find_circle_num`, `eventual_safe_nodes`,
  `largest_path_value`, `most_profitable_path`

## Examples

```python
from algoset.strings import int_to_roman, longest_palindrome
from algoset.parentheses import generate_parentheses
from algoset.structures import Trie
from algoset.nodes import linked_list, list_values, remove_zero_sum_sublists

int_to_roman(1994)            # 'MCMXCIV'
longest_palindrome("babad")   # 'aba' (the later of equally long ones)
generate_parentheses(2)       # ['(())', '()()']

trie = Trie()
trie.insert("apple")
trie.search("apple")          # True
trie.starts_with("app")       # True

head = remove_zero_sum_sublists(linked_list([1, 2, -3, 3, 1]))
list_values(head)             # [3, 1]
```

## Behaviour worth knowing

- `next_permutation`, `solve_sudoku`, `rotate` and `set_zeroes` change the
  list they are given. `solve_sudoku` returns whether the board was solved
  and leaves an unsolvable board as it was. `flood_fill` and
  `oranges_rotting` leave their input unchanged.
- Bad input raises `ValueError`: `int_to_roman` outside 0 to 3999,
  `divide_string` with a group size below 1, `minimum_recolors` with no
  blocks, `combination_sum` with a candidate below 1, `get_permutation`
  with `n` or `k` out of range, `hours_needed` with a speed below 1,
  `rearrange_by_sign` with unequal numbers of positive and negative values,
  `rotate` on a matrix that is not square, `find_min` on an empty tree, and
  the grid functions and `minimum_total` on an empty grid or triangle.
- `QueueStack.pop` and `QueueStack.top` raise `IndexError` on an empty stack.

## What it does not do

The package is a library only: it has no command-line program, and it reads
and writes no files.

## Running the tests

```
pip install -e ".[test]"
pytest
```