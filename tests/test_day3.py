import pytest

from aoc2021.common import Part
from aoc2021.day3 import (
    Popularity,
    Rate,
    bit_at,
    filter_by_bit,
    get_rate,
    most_common_bit,
    solve,
)

REPORT = [
    "00100",
    "11110",
    "10110",
    "10111",
    "10101",
    "01111",
    "00111",
    "11100",
    "10000",
    "11001",
    "00010",
    "01010",
]
VALUES = [int(line, 2) for line in REPORT]


@pytest.mark.parametrize(("part", "want"), [(Part.PART1, 198), (Part.PART2, 230)])
def test_solve(part, want):
    assert solve(REPORT, part) == want


@pytest.mark.parametrize(
    ("rate", "want"),
    [(Rate.GAMMA, 22), (Rate.EPSILON, 9), (Rate.OXYGEN, 23), (Rate.CO2, 10)],
)
def test_get_rate(rate, want):
    assert get_rate(VALUES, 5, rate) == want


def test_gamma_with_tie_is_an_error():
    with pytest.raises(ValueError):
        get_rate([0b10, 0b01], 2, Rate.GAMMA)


def test_oxygen_without_single_value_is_an_error():
    with pytest.raises(ValueError):
        get_rate([0b11, 0b11], 2, Rate.OXYGEN)


def test_flip():
    assert Popularity.ZERO_IS_MOST_COMMON.flip() is Popularity.ONE_IS_MOST_COMMON
    assert Popularity.ONE_IS_MOST_COMMON.flip() is Popularity.ZERO_IS_MOST_COMMON
    assert Popularity.EQUAL.flip() is Popularity.EQUAL


def test_bit_at():
    assert [bit_at(0b101, i) for i in range(3)] == [1, 0, 1]


def test_most_common_bit():
    assert most_common_bit(VALUES, 4) is Popularity.ONE_IS_MOST_COMMON
    assert most_common_bit(VALUES, 0) is Popularity.ZERO_IS_MOST_COMMON
    assert most_common_bit([0b1, 0b0], 0) is Popularity.EQUAL


def test_filter_by_bit():
    assert filter_by_bit([0b10, 0b11, 0b01], 1, 1) == [0b10, 0b11]


def test_invalid_part():
    with pytest.raises(ValueError):
        solve(REPORT, Part.PART0)