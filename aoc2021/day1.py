"""Day 1: counting depth increases."""

from __future__ import annotations

from collections.abc import Sequence

from aoc2021.common import Part

_WINDOWS = {Part.PART1: 1, Part.PART2: 3}


def solve(depths: Sequence[int], part: Part) -> int:
    """Count how often a sliding-window sum grows over the previous one."""
    try:
        width = _WINDOWS[part]
    except KeyError:
        raise ValueError(f"Invalid part: {part}") from None

    sums = [sum(window) for window in zip(*(depths[k:] for k in range(width)))]
    return sum(later > earlier for earlier, later in zip(sums, sums[1:]))