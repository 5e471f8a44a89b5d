# advent2024

Solutions to the first fifteen puzzles of Advent of Code 2024, days 1 to 15.
Each day is a module, `advent2024.day01` to `advent2024.day15`. It uses only the
Python standard library and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using

Every day module has the same three functions:

- `parse_input(text)` takes the puzzle input as a string and returns that day's
  `ParsedInput`.
- `part1(parsed)` and `part2(parsed)` return the two answers as integers.

```python
from pathlib import Path

from advent2024 import day01

parsed = day01.parse_input(Path("input.txt").read_text())
print(day01.part1(parsed))
print(day01.part2(parsed))
```

Input that does not fit the puzzle's format raises `ValueError`.

### Second solutions

Some days have a second, quicker solution that gives the same answers:

- `day06.part2_faster` reuses one grid and jumps from obstacle to obstacle
  when looking for loops.
- `day07.part1_faster` and `day07.part2_faster` work backwards from each result,
  undoing the operators from right to left.
- `day09.part1_faster` and `day09.part2_faster` take their input from
  `day09.parse_compact_input`, which describes the disk as spans of files
  (`FileSpan`) and free space (`FreeSpan`) rather than single blocks.

### Other entry points

- `day11.puzzle(parsed, num_blinks)` counts the stones after any number of
  blinks; `part1` and `part2` use 25 and 75.
- `day14.puzzle_part1(parsed, width, height)` and
  `day14.puzzle_part2(parsed, width, height)` take the size of the room, so the
  smaller 11 by 7 example room can be used. `part1` and `part2` use 101 by 103.
- `day15.widen_grid(grid)` doubles a warehouse map for the second part.

### Grids

Most grid puzzles build on `advent2024.geometry`:

- `Point(x, y)` and `Vector(dx, dy)`, with y growing downwards. A point plus a
  vector is a point; one point minus another is a vector.
  `Vector.rotate_clockwise()` turns a vector a quarter turn to the right.
- `Direction` holds `NORTH`, `EAST`, `SOUTH` and `WEST`, each with a `vector`.
- `Grid` is a rectangle of one-character squares. `get(point)` returns `None`
  outside the grid; `set`, `items`, `adjacent_points`, `find`, `copy` and
  `with_square` do what their names say.
- `parse_grid(text)` builds a grid from lines of equal length, and
  `make_grid(fill, width, height)` builds one filled with a single character.

## What it does not do

There is no command-line program: the package does not read input files or
download puzzle input itself. Read the input into a string and pass it to
`parse_input`.