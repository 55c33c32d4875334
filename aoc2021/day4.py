"""Day 4: playing bingo with a giant squid."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from aoc2021.common import Part, to_int

SIZE = 5

_ROW = re.compile(r"^\s*(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\Z", re.ASCII)

# Every row followed by every column, as flat cell indices.
_LINES = tuple(
    [tuple(row * SIZE + col for col in range(SIZE)) for row in range(SIZE)]
    + [tuple(row * SIZE + col for row in range(SIZE)) for col in range(SIZE)]
)


@dataclass
class Board:
    """A bingo board of SIZE x SIZE numbers stored row by row."""

    values: list[int]
    marked: list[bool] = field(init=False)

    def __post_init__(self) -> None:
        if len(self.values) != SIZE * SIZE:
            raise ValueError(f"a board needs {SIZE * SIZE} numbers, got {len(self.values)}")
        self.marked = [False] * len(self.values)

    def mark(self, value: int) -> None:
        """Mark every cell holding value."""
        for position, cell in enumerate(self.values):
            if cell == value:
                self.marked[position] = True

    def has_won(self) -> bool:
        """Return True when a full row or column is marked."""
        return any(all(self.marked[position] for position in line) for line in _LINES)

    def unmarked_sum(self) -> int:
        """Return the sum of the numbers not yet marked."""
        return sum(value for value, hit in zip(self.values, self.marked) if not hit)


def parse_numbers(lines: Iterable[str]) -> list[int]:
    """Return the drawn numbers from the first comma-separated line."""
    for line in lines:
        if not line:
            continue
        fields = line.split(",")
        if len(fields) < 2:
            continue
        return to_int(fields)
    raise ValueError("No numbers found")


def parse_boards(lines: Iterable[str]) -> list[Board]:
    """Collect every complete board from the rows of five numbers."""
    boards: list[Board] = []
    pending: list[int] = []

    for line in lines:
        if not line:
            continue
        match = _ROW.match(line)
        if match is None:
            continue
        pending.extend(to_int(match.groups()))
        if len(pending) >= SIZE * SIZE:
            boards.append(Board(pending))
            pending = []

    return boards


def solve(lines: Sequence[str], part: Part) -> int:
    """Return the score of the first (part 1) or last (part 2) winning board."""
    numbers = parse_numbers(lines)
    boards = parse_boards(lines)
    winners: set[int] = set()

    for number in numbers:
        for position, board in enumerate(boards):
            board.mark(number)
            if not board.has_won():
                continue
            if part is Part.PART1:
                return number * board.unmarked_sum()
            if part is Part.PART2:
                winners.add(position)
                if len(winners) == len(boards):
                    return number * board.unmarked_sum()

    return 0