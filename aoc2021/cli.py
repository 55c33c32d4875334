"""Command line for solving a day's puzzle."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from aoc2021 import (
    day1,
    day2,
    day3,
    day4,
    day5,
    day6,
    day7,
    day8,
    day9,
    day10,
    day11,
    day12,
    day13,
    day14,
)
from aoc2021.common import Part, get_data, to_int, trim

_SOLVERS: dict[int, Callable[..., int]] = {
    1: day1.solve,
    2: day2.solve,
    3: day3.solve,
    4: day4.solve,
    5: day5.solve,
    6: day6.solve,
    7: day7.solve,
    8: day8.solve,
    9: day9.solve,
    10: day10.solve,
    11: day11.solve,
    12: day12.solve,
    13: day13.solve,
    14: day14.solve,
}

_PARTS = (Part.PART1, Part.PART2)


def prepare_input(day: int, lines: Sequence[str]) -> list:
    """Shape the raw input lines the way a day's solver expects them."""
    if day not in _SOLVERS:
        raise ValueError(f"unknown day: {day}")
    if day == 1:
        return to_int(lines)
    if day in (3, 4):
        return trim(lines)
    return list(lines)


def solve_day(day: int, lines: Sequence[str]) -> dict[Part, int]:
    """Solve both parts of a day from its raw input lines."""
    prepared = prepare_input(day, lines)
    solver = _SOLVERS[day]
    return {part: solver(prepared, part) for part in _PARTS}


def main(argv: list[str] | None = None) -> int:
    """Solve a day, reading input from a file or downloading it."""
    parser = argparse.ArgumentParser(description="Solve a day's puzzle.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS), help="day number")
    parser.add_argument("--input", type=Path, help="read input from this file")
    args = parser.parse_args(argv)

    try:
        if args.input is not None:
            lines = args.input.read_text(encoding="utf-8").split("\n")
        else:
            lines = get_data(args.day)
    except (OSError, RuntimeError):
        print("no data, no game ... sorry!", file=sys.stderr)
        return 1

    try:
        answers = solve_day(args.day, lines)
    except ValueError as error:
        print(f"could not solve day {args.day}: {error}", file=sys.stderr)
        return 1

    for part, answer in answers.items():
        print(f"Solution for Part {part}: {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())