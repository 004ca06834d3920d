# backtrack_kit

Backtracking solutions for classic combinatorial search problems, as plain
Python functions that take and return built-in types.

## Installation

```
pip install .
```

## Modules

### `backtrack_kit.combinations`

- `combination_sum(candidates, target)`: every combination of candidates
  (each usable any number of times) that sums to `target`. Combinations
  follow the order in which the candidates are given. Raises `ValueError`
  if any candidate is not positive.
- `combination_sum_unique(candidates, target)`: combinations summing to
  `target` where each candidate is used at most once, without duplicate
  combinations. Candidates are sorted first, so each combination is
  non-decreasing and the list is in lexicographic order. Raises `ValueError`
  if any candidate is not positive.
- `subset_sums(values)`: the sum of every subset of `values` (2ⁿ sums,
  including 0 for the empty subset).
- `subsets_with_duplicates(nums)`: all distinct subsets of a list that may
  hold repeated values, each sorted, listed in lexicographic order.
- `permutations(nums)`: all orderings of `nums`, in swap-based generation
  order.
- `permutation_sequence(n, k)`: the `k`-th (1-based) permutation of `1..n`
  in lexicographic order, as a string. Raises `ValueError` when `n < 1` or
  `k` is out of range.

```python
from backtrack_kit.combinations import combination_sum, permutation_sequence

combination_sum([2, 3, 6, 7], 7)   # [[2, 2, 3], [7]]
permutation_sequence(3, 3)          # "213"
```

### `backtrack_kit.words`

- `generate_parentheses(n)`: all balanced strings of `n` pairs of brackets.
- `letter_combinations(digits)`: phone-keypad letter strings for a digit
  string; an empty string gives an empty list, and a string holding
  anything but digits raises `ValueError`.
- `palindrome_partitions(text)`: every way to cut `text` into palindromes.
- `word_break(text, words)`: whether `text` can be split into dictionary
  words.
- `word_break_sentences(text, words)`: every such split, as space-separated
  sentences.
- `Trie(words=())`: a prefix tree with `insert(word)`, `can_segment(text)`
  and `segmentations(text)`.

```python
from backtrack_kit.words import generate_parentheses, word_break_sentences

generate_parentheses(2)
# ["(())", "()()"]
word_break_sentences("catsanddog", ["cat", "cats", "and", "sand", "dog"])
# ["cat sand dog", "cats and dog"]
```

### `backtrack_kit.grids`

- `solve_n_queens(n)`: every placement of `n` non-attacking queens, each
  board given as a list of row strings of `Q` and `.`.
- `find_maze_paths(maze)`: every path from the top-left to the bottom-right
  of a 0/1 square maze, spelled with `D`, `R`, `U`, `L`, never visiting a
  cell twice. Raises `ValueError` if the maze is not square.
- `solve_sudoku(board)`: returns a solved copy of a 9×9 board of digit
  characters and `.`; the board passed in is left unchanged. Raises
  `ValueError` for a malformed board or one that has no solution.
- `word_exists(board, word)`: whether `word` can be traced through
  horizontally or vertically adjacent cells of a character grid, using no
  cell twice.
- `graph_coloring(vertex_count, edges, colors)`: whether the graph can be
  coloured with at most `colors` colours so that no edge joins two vertices
  of the same colour. Raises `ValueError` for an edge naming a missing
  vertex.

```python
from backtrack_kit.grids import solve_n_queens, graph_coloring

len(solve_n_queens(4))                                   # 2
graph_coloring(3, [(0, 1), (1, 2), (2, 0)], 2)           # False
```

## What it does not do

The package is a library only: it has no command-line program, and it does
not read puzzles or boards from files. Call the functions from Python.

## Running the tests

```
pip install .[test]
pytest
```