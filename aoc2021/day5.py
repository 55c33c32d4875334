"""Day 5: hydrothermal vent lines."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from aoc2021.common import Part, to_int

SIZE = 1000

_LINE = re.compile(r"^(\d+),(\d+)\s+->\s+(\d+),(\d+)\Z", re.ASCII)


@dataclass(frozen=True)
class Coord:
    x: int
    y: int


@dataclass(frozen=True)
class Line:
    start: Coord
    end: Coord


def parse(lines: Iterable[str]) -> list[Line]:
    """Parse lines such as '0,9 -> 5,9'."""
    result = []
    for text in lines:
        if not text:
            continue
        match = _LINE.match(text)
        if match is None:
            raise ValueError("could not parse coordinates")
        x1, y1, x2, y2 = to_int(match.groups())
        result.append(Line(Coord(x1, y1), Coord(x2, y2)))
    return result


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_points(line: Line, allow_diagonal: bool) -> Iterator[Coord]:
    """Yield the points a line covers.

    Horizontal and vertical lines are always drawn; 45 degree diagonals only
    when allowed; any other line covers nothing.
    """
    dx = line.end.x - line.start.x
    dy = line.end.y - line.start.y

    straight = dx == 0 or dy == 0
    diagonal = allow_diagonal and abs(dx) == abs(dy)
    if not (straight or diagonal):
        return

    step_x, step_y = _sign(dx), _sign(dy)
    for i in range(max(abs(dx), abs(dy)) + 1):
        yield Coord(line.start.x + i * step_x, line.start.y + i * step_y)


def solve(lines: Iterable[str], part: Part) -> int:
    """Count the points where at least two lines overlap."""
    if part is Part.PART1:
        allow_diagonal = False
    elif part is Part.PART2:
        allow_diagonal = True
    else:
        raise ValueError(f"unknown part: {part}")

    covered: Counter[Coord] = Counter()
    for line in parse(lines):
        for point in line_points(line, allow_diagonal):
            if not (0 <= point.x < SIZE and 0 <= point.y < SIZE):
                raise ValueError(f"point ({point.x},{point.y}) outside the field")
            covered[point] += 1

    return sum(count > 1 for count in covered.values())