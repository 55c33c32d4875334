"""Day 10: syntax scoring of navigation subsystem chunks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from aoc2021.common import Part


class Status(Enum):
    """How a line of chunks ended."""

    COMPLETE = "complete"
    CORRUPTED = "corrupted"
    INCOMPLETE = "incomplete"


class UnknownChunkError(ValueError):
    """Raised for a character that is not a chunk delimiter, or a stray closer."""


@dataclass(frozen=True)
class _Chunk:
    opener: str
    closer: str
    incomplete_score: int
    corrupted_score: int


_CHUNKS = (
    _Chunk("(", ")", 1, 3),
    _Chunk("[", "]", 2, 57),
    _Chunk("{", "}", 3, 1197),
    _Chunk("<", ">", 4, 25137),
)
_BY_OPENER = {chunk.opener: chunk for chunk in _CHUNKS}
_BY_CLOSER = {chunk.closer: chunk for chunk in _CHUNKS}


def parse_line(line: str) -> tuple[Status, int]:
    """Check a line and return its status with its score.

    A corrupted line scores the first illegal closing character; an
    incomplete line scores the sequence of closers that would finish it;
    a complete line scores 0.
    """
    stack: list[_Chunk] = []

    for char in line:
        if char in _BY_OPENER:
            stack.append(_BY_OPENER[char])
        elif char in _BY_CLOSER:
            if not stack:
                raise UnknownChunkError(f"closing {char!r} with no open chunk")
            if stack[-1].closer != char:
                return Status.CORRUPTED, _BY_CLOSER[char].corrupted_score
            stack.pop()
        else:
            raise UnknownChunkError(f"unknown chunk type: {char!r}")

    if stack:
        score = 0
        for chunk in reversed(stack):
            score = score * 5 + chunk.incomplete_score
        return Status.INCOMPLETE, score

    return Status.COMPLETE, 0


def solve(lines: Iterable[str], part: Part) -> int:
    """Sum corrupted scores (part 1) or take the middle completion score (part 2)."""
    corrupted_total = 0
    incomplete_scores: list[int] = []

    for line in lines:
        if not line:
            continue
        try:
            status, score = parse_line(line)
        except UnknownChunkError:
            continue
        if status is Status.CORRUPTED:
            corrupted_total += score
        elif status is Status.INCOMPLETE:
            incomplete_scores.append(score)

    if part is Part.PART1:
        return corrupted_total
    if part is Part.PART2:
        if not incomplete_scores:
            raise ValueError("no incomplete lines found")
        incomplete_scores.sort()
        return incomplete_scores[(len(incomplete_scores) - 1) // 2]
    return 0