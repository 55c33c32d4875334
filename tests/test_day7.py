import pytest

from aoc2021.common import Part
from aoc2021.day7 import fuel_cost, min_cost, solve

CRABS = [16, 1, 2, 0, 4, 2, 7, 1, 2, 14]


@pytest.mark.parametrize(("part", "want"), [(Part.PART1, 37), (Part.PART2, 168)])
def test_solve(part, want):
    assert solve(["16,1,2,0,4,2,7,1,2,14"], part) == want


def test_fuel_cost_linear():
    assert fuel_cost(CRABS, 2, False) == 37
    assert fuel_cost(CRABS, 1, False) == 41


def test_fuel_cost_nonlinear():
    assert fuel_cost(CRABS, 5, True) == 168
    assert fuel_cost(CRABS, 2, True) == 206


def test_min_cost_is_not_above_any_candidate():
    best = min_cost(CRABS, False)
    assert all(best <= fuel_cost(CRABS, t, False) for t in range(min(CRABS), max(CRABS)))


def test_min_cost_excludes_highest_position():
    assert min_cost([0, 5, 5, 5], False) == 7


def test_min_cost_all_equal_is_zero():
    assert min_cost([3, 3, 3], True) == 0


def test_invalid_part():
    with pytest.raises(ValueError):
        solve(["1,2"], Part.PART0)