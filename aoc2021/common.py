"""Shared helpers: input conversion, puzzle parts and input download."""

from __future__ import annotations

import logging
import os
import urllib.request
from collections.abc import Iterable
from enum import IntEnum

logger = logging.getLogger(__name__)

_YEAR = 2021
_INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"


class Part(IntEnum):
    """Which half of a day's puzzle to solve."""

    PART0 = 0
    PART1 = 1
    PART2 = 2

    def __str__(self) -> str:
        return str(int(self))


def binary_to_decimal(lines: Iterable[str]) -> list[int]:
    """Convert non-empty binary strings to integers."""
    return [int(line, 2) for line in lines if line]


def to_int(lines: Iterable[str]) -> list[int]:
    """Convert non-empty decimal strings to integers."""
    return [int(line) for line in lines if line]


def trim(lines: Iterable[str]) -> list[str]:
    """Return the lines without the empty ones."""
    return [line for line in lines if line]


def show_data(lines: Iterable[str]) -> None:
    """Print every line."""
    for line in lines:
        print(line)


def get_data(day: int) -> list[str]:
    """Download the puzzle input for the given day, split into lines.

    The session cookie is read from the SESSION environment variable.
    """
    session = os.environ.get("SESSION")
    if session is None:
        raise RuntimeError("SESSION env not found")

    request = urllib.request.Request(
        _INPUT_URL.format(year=_YEAR, day=day),
        headers={"Cookie": f"session={session}"},
        method="GET",
    )
    with urllib.request.urlopen(request) as response:
        body = response.read()

    lines = body.decode().split("\n")
    logger.info("got %d lines of input data", len(lines))
    return lines