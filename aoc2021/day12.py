"""Day 12: counting paths through a cave system."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from aoc2021.common import Part

logger = logging.getLogger(__name__)

START = "start"
END = "end"


@dataclass
class CaveSystem:
    """Caves and the caves each one connects to."""

    connections: dict[str, list[str]] = field(default_factory=lambda: defaultdict(list))

    def is_large(self, name: str) -> bool:
        """Large caves have upper-case names."""
        return name.upper() == name

    def can_visit(self, name: str, path: Sequence[str], part: Part) -> bool:
        """Return True when the cave may be entered after following path."""
        if self.is_large(name):
            return True

        if part is Part.PART1:
            return name not in path

        if part is Part.PART2:
            if name in (START, END):
                return name not in path
            if name not in path:
                return True
            visits = Counter(cave for cave in path if not self.is_large(cave))
            return all(count <= 1 for count in visits.values())

        return False

    def count_paths(self, path: Sequence[str], part: Part) -> int:
        """Count the distinct ways to reach the end from the end of path."""
        last = path[-1]
        if last == END:
            return 1
        if last not in self.connections:
            raise ValueError(f"unknown cave: {last}")

        return sum(
            self.count_paths((*path, neighbor), part)
            for neighbor in self.connections[last]
            if self.can_visit(neighbor, path, part)
        )


def parse(lines: Iterable[str]) -> CaveSystem:
    """Build a cave system from lines such as 'start-A'."""
    system = CaveSystem()
    for line in lines:
        if not line:
            continue
        names = line.split("-")
        if len(names) != 2:
            logger.warning("invalid line: %s", line)
            continue
        first, second = names
        system.connections[first].append(second)
        system.connections[second].append(first)
    return system


def solve(lines: Iterable[str], part: Part) -> int:
    """Return the number of paths from start to end."""
    return parse(lines).count_paths((START,), part)