"""Day 6: lanternfish population growth."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableMapping, Sequence

from aoc2021.common import Part, to_int

_DAYS = {Part.PART1: 80, Part.PART2: 256}


def evolve_one_day(school: MutableMapping[int, int]) -> None:
    """Advance a timer-to-count mapping by one day, in place."""
    spawning = school.get(0, 0)
    for age in range(8):
        school[age] = school.get(age + 1, 0)
    school[6] += spawning
    school[8] = spawning


def solve(lines: Sequence[str], part: Part) -> int:
    """Return the number of fish after 80 or 256 days."""
    try:
        days = _DAYS[part]
    except KeyError:
        raise ValueError("Unknown part") from None

    school: Counter[int] = Counter(to_int(lines[0].split(",")))
    for _ in range(days):
        evolve_one_day(school)
    return sum(school.values())