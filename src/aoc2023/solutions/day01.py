"""Day 1: Trebuchet?!"""

from __future__ import annotations

from aoc2023.errors import InputParseError
from aoc2023.solution import Solution

SPELLED_DIGITS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def digits(line: str, *, spelled: bool = False) -> list[int]:
    """Digits in reading order. Spelled words may overlap (``eightwo``)."""
    found: list[int] = []
    for index, char in enumerate(line):
        if char.isdigit():
            found.append(int(char))
        elif spelled:
            for word, value in SPELLED_DIGITS.items():
                if line.startswith(word, index):
                    found.append(value)
                    break
    return found


def calibration_value(line: str, *, spelled: bool = False) -> int:
    """First and last digit of ``line`` read as a two digit number."""
    found = digits(line, spelled=spelled)
    if not found:
        raise InputParseError("No digits in calibration line", line=line)
    return found[0] * 10 + found[-1]


class Day01(Solution):
    day = 1
    title = "Trebuchet?!"

    def part_one(self, text: str) -> int:
        return sum(calibration_value(line.strip()) for line in text.splitlines() if line.strip())

    def part_two(self, text: str) -> int:
        return sum(calibration_value(line.strip(), spelled=True) for line in text.splitlines() if line.strip())
