"""Day 8: decoding scrambled seven-segment displays."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from aoc2021.common import Part

MAX_ATTEMPTS = 1 << 16

SEGMENTS = "abcdefg"

# Segment a is the highest of seven bits, g the lowest.
SEGMENT_TO_MASK = {
    "a": 0x40,
    "b": 0x20,
    "c": 0x10,
    "d": 0x08,
    "e": 0x04,
    "f": 0x02,
    "g": 0x01,
}

SEGMENT_TO_INT = {
    0x77: 0,
    0x12: 1,
    0x5D: 2,
    0x5B: 3,
    0x3A: 4,
    0x6B: 5,
    0x6F: 6,
    0x52: 7,
    0x7F: 8,
    0x7B: 9,
}


def parse(segments: str) -> int:
    """Turn a string of lit segments into a display bit pattern."""
    display = 0
    for segment in segments:
        try:
            display |= SEGMENT_TO_MASK[segment]
        except KeyError:
            raise ValueError(f"unknown segment: {segment!r}") from None
    return display


def get_number(display: int) -> int:
    """Return the digit a display pattern shows."""
    try:
        return SEGMENT_TO_INT[display]
    except KeyError:
        raise ValueError("segments on the display are not valid") from None


def count_uniq(line: str) -> int:
    """Count output digits whose segment count identifies them (1, 4, 7, 8)."""
    fields = line.split("|")
    if len(fields) != 2:
        raise ValueError("cannot parse input line")
    return sum(len(word) in (2, 3, 4, 7) for word in fields[1].split(" "))


def random_mapping(rng: random.Random | None = None) -> dict[str, str]:
    """Return a random wiring from scrambled segment to real segment."""
    rng = random.Random() if rng is None else rng
    shuffled = list(SEGMENTS)
    rng.shuffle(shuffled)
    return dict(zip(SEGMENTS, shuffled))


@dataclass
class Reading:
    """The ten observed patterns and the four output digits of one line."""

    inputs: list[int] = field(default_factory=list)
    outputs: list[int] = field(default_factory=list)

    def check(self) -> bool:
        """Return True when every observed pattern is a valid digit."""
        return all(display in SEGMENT_TO_INT for display in self.inputs)

    def output_value(self) -> int:
        """Return the output digits read as one decimal number."""
        value = 0
        for display in self.outputs:
            value = value * 10 + get_number(display)
        return value


def parse_reading_line(line: str, mapping: Mapping[str, str] | None = None) -> Reading:
    """Parse a line, rewiring every segment through mapping when given."""
    fields = line.split("|")
    if len(fields) != 2:
        raise ValueError("cannot parse reading")

    table = str.maketrans(dict(mapping)) if mapping else None

    def displays(text: str) -> list[int]:
        words = (word for word in text.split(" ") if word)
        if table is not None:
            words = (word.translate(table) for word in words)
        return [parse(word) for word in words]

    return Reading(displays(fields[0]), displays(fields[1]))


def brute_force_line(line: str, rng: random.Random | None = None) -> int:
    """Try random wirings until one decodes every pattern, then read the output."""
    rng = random.Random() if rng is None else rng
    for _ in range(MAX_ATTEMPTS):
        reading = parse_reading_line(line, random_mapping(rng))
        if reading.check():
            return reading.output_value()
    raise ValueError("max iterations reached, could not find the answer")


def solve(lines: Iterable[str], part: Part) -> int:
    """Count easy digits (part 1) or sum the decoded outputs (part 2)."""
    total = 0
    rng = random.Random()
    for line in lines:
        if not line:
            continue
        if part is Part.PART1:
            total += count_uniq(line)
        elif part is Part.PART2:
            total += brute_force_line(line, rng)
    return total