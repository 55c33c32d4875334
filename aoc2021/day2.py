"""Day 2: piloting the submarine."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from aoc2021.common import Part


class Command(Enum):
    FORWARD = "forward"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Instruction:
    command: Command
    value: int


@dataclass
class Position:
    horizontal: int = 0
    depth: int = 0
    aim: int = 0

    def apply(self, instruction: Instruction, part: Part) -> None:
        """Move according to an instruction under the rules of a part."""
        if part not in (Part.PART1, Part.PART2):
            raise ValueError(f"invalid part: {part}")

        command, value = instruction.command, instruction.value
        if part is Part.PART1:
            if command is Command.FORWARD:
                self.horizontal += value
            elif command is Command.UP:
                self.depth -= value
            else:
                self.depth += value
        else:
            if command is Command.DOWN:
                self.aim += value
            elif command is Command.UP:
                self.aim -= value
            else:
                self.horizontal += value
                self.depth += self.aim * value


def parse(line: str) -> Instruction:
    """Parse a line such as 'forward 5'."""
    if not line:
        raise ValueError("empty string")

    fields = line.split(" ")
    if len(fields) != 2:
        raise ValueError(f"invalid instruction: {line}")

    name, amount = fields
    try:
        command = Command(name)
    except ValueError:
        raise ValueError(f"invalid command: {name}") from None

    try:
        value = int(amount)
    except ValueError:
        raise ValueError(f"invalid value: {amount}") from None

    return Instruction(command, value)


def solve(lines: Iterable[str], part: Part) -> int:
    """Return final depth times horizontal position."""
    position = Position()
    for line in lines:
        if line:
            position.apply(parse(line), part)
    return position.depth * position.horizontal