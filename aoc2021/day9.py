"""Day 9: smoke basins on a height map."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from aoc2021.common import Part

logger = logging.getLogger(__name__)

_RIDGE = 9


@dataclass
class Grid:
    """A height map stored row by row."""

    heights: list[int] = field(default_factory=list)
    rows: int = 0
    cols: int = 0

    def neighbors(self, index: int) -> list[int]:
        """Return the left, right, top and bottom neighbours that exist."""
        row, col = divmod(index, self.cols)
        found = []
        if col > 0:
            found.append(index - 1)
        if col < self.cols - 1:
            found.append(index + 1)
        if row > 0:
            found.append(index - self.cols)
        if row < self.rows - 1:
            found.append(index + self.cols)
        return found

    def is_low(self, index: int) -> bool:
        """Return True when every neighbour is strictly higher."""
        height = self.heights[index]
        return all(self.heights[n] > height for n in self.neighbors(index))

    def _region(self, index: int) -> set[int]:
        """Return the cells reachable from index without crossing a 9."""
        seen = {index}
        stack = [index]
        while stack:
            current = stack.pop()
            for neighbor in self.neighbors(current):
                if neighbor not in seen and self.heights[neighbor] != _RIDGE:
                    seen.add(neighbor)
                    stack.append(neighbor)
        return seen

    def basin_size(self, index: int) -> int:
        """Return how many non-9 cells the basin around index holds."""
        return sum(self.heights[cell] != _RIDGE for cell in self._region(index))


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
            grid.heights.append(int(char))
    return grid


def solve(lines: Iterable[str], part: Part) -> int:
    """Sum the low points' risk (part 1) or multiply the three largest basins (part 2)."""
    grid = parse(lines)
    lows = [index for index in range(len(grid.heights)) if grid.is_low(index)]

    if part is Part.PART1:
        return sum(grid.heights[index] + 1 for index in lows)

    if part is Part.PART2:
        flooded: set[int] = set()
        sizes = []
        for index in lows:
            if index in flooded:
                continue
            region = grid._region(index)
            flooded |= region
            sizes.append(sum(grid.heights[cell] != _RIDGE for cell in region))
        if len(sizes) < 3:
            raise ValueError("fewer than three basins found")
        return math.prod(sorted(sizes, reverse=True)[:3])

    return 0