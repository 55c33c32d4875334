import random

import pytest

from aoc2021.common import Part
from aoc2021.day8 import (
    brute_force_line,
    count_uniq,
    get_number,
    parse,
    parse_reading_line,
    random_mapping,
    solve,
)

EXAMPLE = [
    "be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe",
    "edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc",
    "fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg",
    "fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb",
    "aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea",
    "fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb",
    "dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe",
    "bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef",
    "egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb",
    "gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce",
]

SINGLE = "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf"
SINGLE_WIRING = {"d": "a", "e": "b", "a": "c", "f": "d", "g": "e", "b": "f", "c": "g"}


@pytest.mark.parametrize(
    ("segments", "want"),
    [
        ("abcefg", 0),
        ("cf", 1),
        ("acdeg", 2),
        ("acdfg", 3),
        ("bcdf", 4),
        ("abdfg", 5),
        ("abdefg", 6),
        ("acf", 7),
        ("abcdefg", 8),
        ("abcdfg", 9),
    ],
)
def test_display(segments, want):
    assert get_number(parse(segments)) == want


def test_segment_order_does_not_matter():
    assert parse("gfedcba") == parse("abcdefg") == 0x7F


def test_unknown_segment():
    with pytest.raises(ValueError):
        parse("abz")


def test_invalid_display():
    with pytest.raises(ValueError):
        get_number(parse("ab"))


@pytest.mark.parametrize(("part", "want"), [(Part.PART1, 26), (Part.PART2, 61229)])
def test_solve(part, want):
    assert solve(EXAMPLE, part) == want


def test_count_uniq():
    assert count_uniq(EXAMPLE[0]) == 2


def test_count_uniq_requires_separator():
    with pytest.raises(ValueError):
        count_uniq("ab cd")


def test_parse_reading_line_with_known_wiring():
    reading = parse_reading_line(SINGLE, SINGLE_WIRING)
    assert len(reading.inputs) == 10
    assert len(reading.outputs) == 4
    assert reading.check()
    assert reading.output_value() == 5353


def test_parse_reading_line_wrong_wiring_fails_check():
    reading = parse_reading_line(SINGLE)
    assert not reading.check()


def test_parse_reading_line_requires_separator():
    with pytest.raises(ValueError):
        parse_reading_line("abc def")


def test_random_mapping_is_permutation():
    mapping = random_mapping(random.Random(7))
    assert sorted(mapping) == list("abcdefg")
    assert sorted(mapping.values()) == list("abcdefg")


def test_brute_force_line():
    assert brute_force_line(SINGLE, random.Random(1)) == 5353