import pytest

from aoc2021.common import Part
from aoc2021.day14 import get_pairs, get_rules, get_stats, process, solve

EXAMPLE = [
    "NNCB",
    "",
    "CH -> B",
    "HH -> N",
    "CB -> H",
    "NH -> C",
    "HB -> C",
    "HC -> B",
    "HN -> C",
    "NN -> C",
    "BH -> H",
    "NC -> B",
    "NB -> B",
    "BN -> B",
    "BB -> N",
    "BC -> B",
    "CC -> N",
    "CN -> C",
]


@pytest.mark.parametrize(
    ("part", "want"),
    [
        (Part.PART1, 1588),
        (Part.PART2, 2188189693529),
    ],
)
def test_solve(part, want):
    assert solve(EXAMPLE, part) == want


def test_get_pairs_counts_adjacent_elements():
    assert get_pairs("NNCB") == {"NN": 1, "NC": 1, "CB": 1}


def test_get_rules_skips_template_and_blank_lines():
    rules = get_rules(EXAMPLE)
    assert len(rules) == 16
    assert rules["CH"] == "B"
    assert "NNCB" not in rules


def test_process_one_step_matches_expanded_template():
    rules = get_rules(EXAMPLE)
    assert process(get_pairs("NNCB"), rules) == get_pairs("NCNBCHB")


def test_stats_match_letter_counts():
    polymer = "NBCCNBBBCBHCB"
    assert get_stats(get_pairs(polymer)) == {"N": 2, "B": 6, "C": 4, "H": 1}


def test_process_without_rule_raises():
    with pytest.raises(ValueError, match="No rule for NN"):
        process(get_pairs("NN"), {})


def test_invalid_part_raises():
    with pytest.raises(ValueError):
        solve(EXAMPLE, Part.PART0)