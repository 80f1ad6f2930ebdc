# gridpuzzles

A small library of solvers for classic puzzles: flood fills and shortest paths
on grids, backtracking searches, and a handful of text and number problems.
Every solver is a plain function that takes Python values and returns the
answer. Bad input raises `ValueError`, or `KeyError` for a failed lookup.

## Installation

```
pip install .
```

## Modules

### `gridpuzzles.text`

- `rot13(text)`: rotates ASCII letters by 13 places.
- `players_by_initial(names)`: returns the sorted initials shared by at least
  five names, or `"PREDAJA"` when no initial qualifies.
- `is_palindrome(word)`: tells whether a word reads the same backwards.
- `make_palindrome(word)`: the alphabetically first palindrome that uses all
  the letters. Raises `ValueError` when no palindrome can be built.
- `PokemonIndex(names)`: `lookup(query)` maps a 1-based number to a name and a
  name to its number. Raises `KeyError` for an unknown name or a number out
  of range.
- `match_pattern(pattern, filename)`: matches a filename against a pattern
  that holds one `*`.
- `count_good_words(words)`: counts the words whose equal letters pair up
  without crossing.

### `gridpuzzles.numbers`

- `ones_multiple_length(n)`: the digit count of the smallest number made only
  of ones that `n` divides.
- `trailing_zeros(n)`: the number of trailing zeros of `n!`.
- `outfit_combinations(items)`: counts the non-empty outfits from
  `(name, category)` pairs, with at most one item per category.
- `max_window_sum(values, k)`: the largest sum of `k` consecutive values.
- `mod_pow(base, exponent, modulus)`: modular power by repeated squaring.
- `count_pairs_with_sum(values, target)`: counts the pairs of positions whose
  values add up to `target`.
- `format_clock(seconds)`: formats seconds as `MM:SS`.
- `lead_times(goals)`: takes `(team, "MM:SS")` goals in time order and
  returns the seconds each team led a 48-minute game.

### `gridpuzzles.grids`

- `count_components(grid)`: counts 4-connected groups of filled cells.
- `count_cabbage_worms(rows, cols, positions)`: counts cabbage patches.
- `empty_regions(rows, cols, rectangles)`: returns the sorted areas of the
  regions that `(x1, y1, x2, y2)` rectangles leave uncovered.
- `shortest_maze_path(maze)`: counts the cells on the shortest path from the
  top-left corner to the bottom-right corner. Returns 0 when the exit cannot
  be reached.
- `cloud_arrival(sky)`: for each cell, the minutes until a cloud drifting
  east arrives, or -1 if none ever does.
- `melt_cheese(board)`: returns the hours until all the cheese has melted and
  the number of cells that melted in the last hour.
- `population_moves(grid, low, high)`: counts the days on which population
  moves between countries.
- `max_safe_area(lab)`: returns the largest safe area left after building
  three walls.
- `quadtree(image)`: quadtree compression of a square image whose side is a
  power of two.

### `gridpuzzles.search`

- `ladder_additions(columns, rows, ladders)`: the fewest rungs to add, at
  most three, so that every column of the ladder ends where it starts.
  Returns -1 when three rungs are not enough.
- `scv_attacks(health)`: the fewest attacks of 9, 3 and 1 damage that
  destroy one to three SCVs.
- `chicken_distance(city, keep)`: the smallest total distance from the houses
  to the shops after closing all but `keep` shops.
- `count_camping_paths(field, distance)`: counts the paths of exactly
  `distance` cells from the bottom-left corner to the top-right corner that
  avoid `'T'`.
- `min_flower_cost(garden)`: the cheapest rent for three plus-shaped flowers
  that do not overlap.
- `hide_and_seek(start, target)`: the fastest time from `start` to `target`
  and the number of ways to reach it in that time.
- `tree_levels(values)`: rebuilds the levels of a complete binary tree from
  its in-order visit.
- `max_expression(expression)`: the largest value of a single-digit
  expression with optional brackets that do not nest.

## Example

```python
from gridpuzzles.text import rot13
from gridpuzzles.numbers import mod_pow
from gridpuzzles.grids import count_components

rot13("Hello")                      # 'Uryyb'
mod_pow(10, 11, 12)                 # 4
count_components([[1, 0], [0, 1]])  # 2
```

## What it does not do

The package is a library only. It has no command-line program and does not
read puzzle input from standard input. Your code parses the input and passes
the values to the functions.

## Running the tests

```
pip install ".[test]"
pytest
```