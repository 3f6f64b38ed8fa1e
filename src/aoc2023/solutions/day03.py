"""Day 3: Gear Ratios"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from aoc2023.solution import Solution

_NUMBER_RE = re.compile(r"\d+")

Point = tuple[int, int]


@dataclass(frozen=True, slots=True)
class PartNumber:
    value: int
    row: int
    start: int
    end: int

    def neighbours(self) -> set[Point]:
        """Cells around the number, diagonals included."""
        return {
            (row, column)
            for row in range(self.row - 1, self.row + 2)
            for column in range(self.start - 1, self.end + 1)
            if row != self.row or not self.start <= column < self.end
        }


@dataclass(slots=True)
class Schematic:
    numbers: list[PartNumber]
    symbols: dict[Point, str]

    def part_numbers(self) -> list[PartNumber]:
        return [number for number in self.numbers if self.symbols.keys() & number.neighbours()]

    def gear_ratios(self) -> list[int]:
        """Products of the two numbers around each ``*`` touching exactly two."""
        touching: dict[Point, list[int]] = {point: [] for point, symbol in self.symbols.items() if symbol == "*"}
        for number in self.numbers:
            for point in touching.keys() & number.neighbours():
                touching[point].append(number.value)
        return [math.prod(values) for values in touching.values() if len(values) == 2]


def parse_schematic(text: str) -> Schematic:
    numbers: list[PartNumber] = []
    symbols: dict[Point, str] = {}
    for row, line in enumerate(text.strip().splitlines()):
        line = line.strip()
        for match in _NUMBER_RE.finditer(line):
            numbers.append(PartNumber(int(match.group()), row, match.start(), match.end()))
        for column, char in enumerate(line):
            if char != "." and not char.isdigit():
                symbols[(row, column)] = char
    return Schematic(numbers=numbers, symbols=symbols)


class Day03(Solution):
    day = 3
    title = "Gear Ratios"

    def part_one(self, text: str) -> int:
        return sum(number.value for number in parse_schematic(text).part_numbers())

    def part_two(self, text: str) -> int:
        return sum(parse_schematic(text).gear_ratios())
