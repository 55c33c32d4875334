"""Day 7: aligning crab submarines."""

from __future__ import annotations

from collections.abc import Sequence

from aoc2021.common import Part, to_int


def fuel_cost(positions: Sequence[int], target: int, nonlinear: bool) -> int:
    """Return the fuel needed to move every crab to target."""
    distances = (abs(position - target) for position in positions)
    if nonlinear:
        return sum(d * (d + 1) // 2 for d in distances)
    return sum(distances)


def min_cost(positions: Sequence[int], nonlinear: bool) -> int:
    """Return the cheapest cost over targets from the lowest position up to,
    but not including, the highest; 0 when that range is empty."""
    if not positions:
        return 0
    low = min(positions)
    high = max(0, max(positions))
    return min(
        (fuel_cost(positions, target, nonlinear) for target in range(low, high)),
        default=0,
    )


def solve(lines: Sequence[str], part: Part) -> int:
    """Return the minimal fuel for linear (part 1) or growing (part 2) costs."""
    positions = to_int(lines[0].split(","))
    if part is Part.PART1:
        return min_cost(positions, nonlinear=False)
    if part is Part.PART2:
        return min_cost(positions, nonlinear=True)
    raise ValueError(f"unknown part: {part}")