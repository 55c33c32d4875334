# aoc2021

Solutions to the first fourteen puzzles of Advent of Code 2021. Each day lives
in its own module, `aoc2021.day1` to `aoc2021.day14`, and exposes
`solve(lines, part)`, which takes the puzzle input and an
`aoc2021.common.Part` (`Part.PART1` or `Part.PART2`) and returns the answer as
an integer. Invalid input raises `ValueError`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Solving a day

The `aoc2021` command solves both parts of one day and prints them:

```
aoc2021 7 --input input.txt
```

```
Solution for Part 1: ...
Solution for Part 2: ...
```

With `--input` the puzzle input is read from that file. Without it, the input
is downloaded from the Advent of Code site, which needs your session cookie in
the `SESSION` environment variable:

```
export SESSION=token
aoc2021 7
```

If the input cannot be read or fetched (for instance `SESSION` is not set),
the command prints `no data, no game ... sorry!` and exits with status 1. If
the input cannot be solved, it reports the error and exits with status 1.

A few days print or behave in ways worth knowing:

- day 13, part 2 prints the folded paper as rows of `#` and `.` before its
  answer;
- day 8, part 2 finds each display's wiring by trying random permutations, so
  it can take a moment, and gives up with an error after 65536 attempts.

From Python, `aoc2021.cli.solve_day(day, lines)` returns both answers as a
dict keyed by `Part`, and `aoc2021.cli.prepare_input(day, lines)` shapes raw
input lines the way that day's `solve` expects them (integers for day 1,
empty lines dropped for days 3 and 4).

## Starting a new day

`aoc2021-generate` writes a starting module `aoc2021/dayN.py`, whose `solve`
returns 0, and a matching `tests/test_dayN.py`:

```
aoc2021-generate --day 15
aoc2021-generate --day 15 --root path/to/project
```

`--root` defaults to the current directory. If either file already exists,
nothing is written and the command exits with status 1. The same is
available as `aoc2021.generate.generate(day, root)`, which returns the paths
it wrote and raises `FileExistsError` when the day exists.

## Library use

The helpers in `aoc2021.common` are usable on their own:

- `to_int(lines)` turns decimal strings into integers, skipping empty lines;
- `binary_to_decimal(lines)` does the same for binary strings;
- `trim(lines)` drops empty lines;
- `show_data(lines)` prints each line;
- `get_data(day)` downloads a day's input as a list of lines, raising
  `RuntimeError` when `SESSION` is not set.

## What it does not do

Only days 1 to 14 are solved; the `aoc2021` command accepts no other day
number. Downloaded input is not cached, so each run without `--input` fetches
it again.