"""Scaffolding for a new day's module and its tests."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from string import Template

MODULE_TEMPLATE = Template(
    '''"""Solutions for day $day."""

from aoc2021.common import Part


def solve(lines: list[str], part: Part) -> int:
    """Return the answer to the given part of day $day."""
    return 0
'''
)

TEST_TEMPLATE = Template(
    '''import pytest

from aoc2021.common import Part
from aoc2021.day$day import solve


@pytest.mark.parametrize(
    ("lines", "part", "want"),
    [
        ([], Part.PART1, 0),
        ([], Part.PART2, 0),
    ],
)
def test_solve(lines, part, want):
    assert solve(lines, part) == want
'''
)


def generate(day: str, root: str | Path = ".") -> list[Path]:
    """Create the module and test files for a day under root.

    Returns the paths written. Raises FileExistsError if the day exists.
    """
    day = str(day)
    if not day:
        raise ValueError("day number is required")

    root = Path(root)
    module_path = root / "aoc2021" / f"day{day}.py"
    test_path = root / "tests" / f"test_day{day}.py"

    if module_path.exists() or test_path.exists():
        raise FileExistsError(f"day {day} already exists")

    written = []
    for path, template in ((module_path, MODULE_TEMPLATE), (test_path, TEST_TEMPLATE)):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(template.substitute(day=day), encoding="utf-8")
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point for scaffolding a day."""
    parser = argparse.ArgumentParser(description="Create the files for a new day.")
    parser.add_argument("--day", default="", help="day number")
    parser.add_argument("--root", default=".", help="project root directory")
    args = parser.parse_args(argv)

    if not args.day:
        parser.error("day number is required")

    try:
        generate(args.day, args.root)
    except FileExistsError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())