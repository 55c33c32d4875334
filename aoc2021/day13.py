"""Day 13: folding transparent paper."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from aoc2021.common import Part

_COORD = re.compile(r"^(\d+),(\d+)\Z", re.ASCII)
_FOLD = re.compile(r"^fold\s+along\s+([xy])=(\d+)\Z", re.ASCII)

Point = tuple[int, int]


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    axis: Axis
    position: int


def parse(lines: Iterable[str]) -> tuple[list[Point], list[Fold]]:
    """Return the dots and fold instructions."""
    points: list[Point] = []
    folds: list[Fold] = []
    for line in lines:
        if not line:
            continue
        coord = _COORD.match(line)
        if coord is not None:
            points.append((int(coord.group(1)), int(coord.group(2))))
            continue
        instruction = _FOLD.match(line)
        if instruction is not None:
            folds.append(Fold(Axis(instruction.group(1)), int(instruction.group(2))))
    return points, folds


def fold(points: Iterable[Point], instruction: Fold) -> list[Point]:
    """Fold the paper; dots on the fold line disappear."""
    line = instruction.position
    result: list[Point] = []
    for x, y in points:
        coordinate = x if instruction.axis is Axis.X else y
        if coordinate == line:
            continue
        if coordinate > line:
            coordinate = 2 * line - coordinate
        result.append((coordinate, y) if instruction.axis is Axis.X else (x, coordinate))
    return result


def render(points: Iterable[Point]) -> str:
    """Draw the dots as rows of '#' and '.' starting from the origin."""
    dots = set(points)
    if not dots:
        return ""
    width = max(x for x, _ in dots)
    height = max(y for _, y in dots)
    return "\n".join(
        "".join("#" if (x, y) in dots else "." for x in range(width + 1))
        for y in range(height + 1)
    )


def solve(lines: Iterable[str], part: Part) -> int:
    """Count visible dots after the first fold (part 1) or all folds (part 2).

    Part 2 also prints the folded paper.
    """
    points, folds = parse(lines)

    if part is Part.PART1:
        if not folds:
            raise ValueError("no fold instructions found")
        return len(set(fold(points, folds[0])))

    if part is Part.PART2:
        for instruction in folds:
            points = fold(points, instruction)
        print(render(points))
        return len(set(points))

    return 0