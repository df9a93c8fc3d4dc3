# aocsolve

Solvers for a 25-day series of programming puzzles. Each day has its own
module, `aocsolve.dayNN`, and its own command, `aocsolve-dayNN`. Only the
standard library is used; Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The commands `aocsolve-day01` to `aocsolve-day25` each read one puzzle input
file and print an answer:

```
aocsolve-day01                 # part 1, reads 1.txt from the current directory
aocsolve-day01 --part 2        # part 2
aocsolve-day07 path/to/input.txt --part 2
```

- The input file is an optional positional argument. By default it is
  `N.txt` in the current directory, where `N` is the day number without a
  leading zero (`1.txt`, `11.txt`, `25.txt`). Day 11 part 2 reads `11_.txt`
  by default.
- `--part 1` (the default) or `--part 2` selects the question. Day 25 has
  only one part and no `--part` option.
- Most commands print a single number. A few print more:
  - day 14 part 2 prints the second at which the robots form a picture,
    followed by the picture itself (nothing if none is found);
  - day 15 part 2 prints `====`, the final warehouse map, then the score;
  - day 18 part 2 prints the blocking byte as `x,y`;
  - day 17 part 2 prints the register value, or `None` if none is found;
  - day 24 part 2 prints diagnostic lines about the adder followed by the
    comma-joined list of swapped wires.

## Library use

Most modules have a `parse(text)` function that turns raw puzzle text into
Python values, plus functions that compute the answers. Day 3 works on the
text directly, day 9 has `parse_blocks` and `parse_spans`, day 13's `parse`
takes an optional `offset` added to each prize, day 15 adds `parse_wide`,
day 21 takes the door codes as strings and day 24 adds `parse_gates`.

```python
from aocsolve import day01, day11, day19

xs, ys = day01.parse("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
print(day01.total_distance(xs, ys))    # 11
print(day01.similarity_score(xs, ys))  # 31

stones = day11.parse("125 17")
print(day11.count_stones(stones, 25))  # 55312

towels, designs = day19.parse("r, wr, b\n\nbrwr\n")
print(day19.count_arrangements(towels, designs[0]))
```

What each module offers:

| Day | Names |
| --- | --- |
| 1 | `parse`, `total_distance`, `similarity_score` |
| 2 | `parse`, `is_safe`, `is_maybe_safe` |
| 3 | `sum_muls`, `sum_enabled_muls` |
| 4 | `parse`, `count_xmas`, `count_x_mas` |
| 5 | `parse`, `is_good`, `sort_pages`, `sum_correct_middles`, `sum_fixed_middles` |
| 6 | `parse`, `walk`, `has_loop`, `count_loop_obstructions` |
| 7 | `parse`, `solvable`, `total_calibration` |
| 8 | `parse`, `count_antinodes`, `count_harmonic_antinodes` |
| 9 | `parse_blocks`, `compact_blocks`, `parse_spans`, `compact_files` |
| 10 | `parse`, `trail_score`, `trail_rating` |
| 11 | `parse`, `blink`, `count_stones` |
| 12 | `parse`, `fence_price`, `discount_price` |
| 13 | `Machine`, `parse`, `min_tokens`, `min_tokens_far`, `FAR_OFFSET` |
| 14 | `Robot`, `parse`, `predict`, `safety_factor`, `looks_like_tree`, `render`, `find_tree` |
| 15 | `Warehouse`, `WideWarehouse`, `parse`, `parse_wide`, `solve` |
| 16 | `parse`, `lowest_score`, `best_seat_count` |
| 17 | `Computer`, `parse`, `run`, `find_quine_register` |
| 18 | `parse`, `shortest_path`, `has_path`, `first_blocking_byte` |
| 19 | `parse`, `can_make`, `count_arrangements` |
| 20 | `parse`, `count_short_cheats`, `count_long_cheats` |
| 21 | `numeric_sequences`, `directional_sequence`, `directional_sequences`, `shortest_two_robots`, `shortest_length`, `total_complexity` |
| 22 | `parse`, `next_secret`, `nth_secret`, `sum_secrets`, `best_bananas` |
| 23 | `parse`, `count_t_triangles`, `max_clique_password` |
| 24 | `Op`, `Gate`, `parse`, `parse_gates`, `simulate`, `check_adder`, `swap_answer`, `SWAPS` |
| 25 | `parse`, `count_fitting` |

Invalid input is reported with `ValueError` (for example a map with no
guard, a maze without a start or end, or an unreachable exit).

## Limitations

- Puzzle inputs are not fetched; the commands only read local files.
- Some sizes are fixed to the puzzle's values: day 14 uses a 101 x 103
  room, day 18 a 71 x 71 grid and the first 1024 bytes for part 1 (the
  library functions take `size` as a parameter).
- Day 17 part 2 (`find_quine_register`) assumes one particular program
  shape; it does not work for arbitrary programs.
- Day 24 part 2 does not search for the swapped wires. `check_adder` prints
  diagnostics, and the answer comes from the fixed pairs in `SWAPS`.