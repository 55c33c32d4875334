"""Day 11: flashing dumbo octopuses."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from aoc2021.common import Part

logger = logging.getLogger(__name__)

_STEPS = 100


@dataclass
class Grid:
    """Octopus energy levels stored row by row."""

    energies: list[int] = field(default_factory=list)
    rows: int = 0
    cols: int = 0

    def neighbors(self, index: int) -> list[int]:
        """Return the existing neighbours, diagonals included."""
        row, col = divmod(index, self.cols)
        has_left = col > 0
        has_right = col < self.cols - 1
        has_top = row > 0
        has_bottom = row < self.rows - 1

        candidates = [
            (has_left, index - 1),
            (has_right, index + 1),
            (has_top, index - self.cols),
            (has_bottom, index + self.cols),
            (has_top and has_left, index - self.cols - 1),
            (has_top and has_right, index - self.cols + 1),
            (has_bottom and has_left, index + self.cols - 1),
            (has_bottom and has_right, index + self.cols + 1),
        ]
        return [position for present, position in candidates if present]

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        flashed = [False] * len(self.energies)
        count = 0

        self.energies = [energy + 1 for energy in self.energies]

        while any(energy > 9 for energy in self.energies):
            for index in range(len(self.energies)):
                if self.energies[index] <= 9:
                    continue
                count += 1
                flashed[index] = True
                self.energies[index] = 0
                for neighbor in self.neighbors(index):
                    if not flashed[neighbor]:
                        self.energies[neighbor] += 1

        return count

    def is_synchronized(self) -> bool:
        """Return True when every octopus has just flashed."""
        return all(energy == 0 for energy in self.energies)


def parse(lines: Iterable[str]) -> Grid:
    """Build a grid from lines of digits."""
    grid = Grid()
    for line in lines:
        if not line:
            continue
        grid.rows += 1
        grid.cols = len(line)
        for char in line:
            if char not in "0123456789":
                logger.warning("could not parse int: %r", char)
                continue
            grid.energies.append(int(char))
    return grid


def solve(lines: Iterable[str], part: Part) -> int:
    """Count flashes over 100 steps (part 1) or find the first synchronized step (part 2)."""
    if part not in (Part.PART1, Part.PART2):
        raise ValueError(f"unknown part: {part}")

    grid = parse(lines)
    total = 0
    for step in itertools.count(1):
        total += grid.step()
        if part is Part.PART1 and step >= _STEPS:
            return total
        if part is Part.PART2 and grid.is_synchronized():
            return step
    raise AssertionError("unreachable")