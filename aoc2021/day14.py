"""Day 14: extended polymerization."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

from aoc2021.common import Part

_ITERATIONS = {Part.PART1: 10, Part.PART2: 40}

_RULE_SEPARATOR = " -> "


def get_pairs(template: str) -> Counter[str]:
    """Count each pair of adjacent elements in the polymer template."""
    return Counter(a + b for a, b in zip(template, template[1:]))


def get_rules(lines: Iterable[str]) -> dict[str, str]:
    """Collect the insertion rules from lines such as 'CH -> B'."""
    rules: dict[str, str] = {}
    for line in lines:
        if not line:
            continue
        fields = line.split(_RULE_SEPARATOR)
        if len(fields) != 2:
            continue
        pair, element = fields
        rules[pair] = element
    return rules


def process(pairs: Mapping[str, int], rules: Mapping[str, str]) -> Counter[str]:
    """Apply one insertion step to every pair."""
    result: Counter[str] = Counter()
    for pair, count in pairs.items():
        try:
            insert = rules[pair]
        except KeyError:
            raise ValueError(f"No rule for {pair}") from None
        result[pair[0] + insert] += count
        result[insert + pair[1]] += count
    return result


def get_stats(pairs: Mapping[str, int]) -> Counter[str]:
    """Count the elements of the polymer the pairs describe.

    Every element but the two at the ends is shared by two pairs, so each
    pair-based count is halved, rounding up.
    """
    halves: Counter[str] = Counter()
    for pair, count in pairs.items():
        halves[pair[0]] += count
        halves[pair[1]] += count
    return Counter({element: (count + 1) // 2 for element, count in halves.items()})


def solve(lines: Sequence[str], part: Part) -> int:
    """Return the most common minus the least common element count."""
    try:
        iterations = _ITERATIONS[part]
    except KeyError:
        raise ValueError("Invalid part") from None

    pairs = get_pairs(lines[0])
    rules = get_rules(lines)
    for _ in range(iterations):
        pairs = process(pairs, rules)

    counts = get_stats(pairs).values()
    return max(counts, default=0) - min(counts, default=0)