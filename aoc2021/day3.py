"""Day 3: binary diagnostic."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, IntEnum

from aoc2021.common import Part, binary_to_decimal


class Popularity(IntEnum):
    ZERO_IS_MOST_COMMON = 0
    ONE_IS_MOST_COMMON = 1
    EQUAL = 2

    def flip(self) -> Popularity:
        """Swap which bit is the most common; EQUAL stays EQUAL."""
        if self is Popularity.ZERO_IS_MOST_COMMON:
            return Popularity.ONE_IS_MOST_COMMON
        if self is Popularity.ONE_IS_MOST_COMMON:
            return Popularity.ZERO_IS_MOST_COMMON
        return self


class Rate(Enum):
    GAMMA = 0
    EPSILON = 1
    OXYGEN = 2
    CO2 = 3


def bit_at(value: int, index: int) -> int:
    """Return the bit of value at the given index."""
    return (value >> index) & 1


def most_common_bit(values: Sequence[int], index: int) -> Popularity:
    """Return which bit is most common among values at the given index."""
    ones = sum(bit_at(value, index) for value in values)
    if 2 * ones > len(values):
        return Popularity.ONE_IS_MOST_COMMON
    if 2 * ones < len(values):
        return Popularity.ZERO_IS_MOST_COMMON
    return Popularity.EQUAL


def filter_by_bit(values: Sequence[int], index: int, bit: int) -> list[int]:
    """Keep only the values whose bit at index equals bit."""
    return [value for value in values if bit_at(value, index) == bit]


def get_rate(values: Sequence[int], width: int, rate: Rate) -> int:
    """Compute a rate over values of the given bit width."""
    values = list(values)
    digits = []

    for index in reversed(range(width)):
        bit = most_common_bit(values, index)

        if rate is Rate.GAMMA:
            digits.append(str(int(bit)))
        elif rate is Rate.EPSILON:
            digits.append(str(int(bit.flip())))
        elif rate is Rate.OXYGEN:
            wanted = 1 if bit is Popularity.EQUAL else int(bit)
            values = filter_by_bit(values, index, wanted)
        else:
            wanted = 0 if bit is Popularity.EQUAL else int(bit.flip())
            values = filter_by_bit(values, index, wanted)

        if rate in (Rate.OXYGEN, Rate.CO2) and len(values) == 1:
            return values[0]

    if rate in (Rate.OXYGEN, Rate.CO2):
        raise ValueError(f"No value found for rate {rate.name}")

    return int("".join(digits), 2)


def solve(lines: Sequence[str], part: Part) -> int:
    """Return the power consumption (part 1) or life support rating (part 2)."""
    width = len(lines[0])
    values = binary_to_decimal(lines)

    if part is Part.PART1:
        return get_rate(values, width, Rate.GAMMA) * get_rate(values, width, Rate.EPSILON)
    if part is Part.PART2:
        return get_rate(values, width, Rate.OXYGEN) * get_rate(values, width, Rate.CO2)
    raise ValueError(f"Unknown Part {part}")