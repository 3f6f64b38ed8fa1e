"""Day 6: Wait For It"""

from __future__ import annotations

import math
from dataclasses import dataclass

from aoc2023.errors import InputParseError
from aoc2023.solution import Solution


@dataclass(frozen=True, slots=True)
class Race:
    time: int
    record: int

    def beats(self, hold: int) -> bool:
        return hold * (self.time - hold) > self.record

    def victory_window(self) -> tuple[int, int] | None:
        """First and last hold times that beat the record.

        The roots of ``h * (time - h) = record`` bound the window. A root that
        lands on an integer only ties the record, so it is excluded.
        """
        discriminant = self.time * self.time - 4 * self.record
        if discriminant < 0:
            return None

        start = max(0, (self.time - math.isqrt(discriminant)) // 2)
        while start > 0 and self.beats(start - 1):
            start -= 1
        while start <= self.time // 2 and not self.beats(start):
            start += 1
        end = self.time - start
        if start > end:
            return None
        return start, end

    def victory_width(self) -> int:
        window = self.victory_window()
        if window is None:
            return 0
        return window[1] - window[0] + 1


def _parse_row(line: str, label: str) -> list[str]:
    name, separator, values = line.partition(":")
    if name.strip() != label or not separator:
        raise InputParseError(f"Expected {label} row", line=line)
    return values.split()


def parse_races(text: str, *, kerning: bool = False) -> list[Race]:
    """Parse the Time and Distance rows.

    With ``kerning`` the columns are one race whose digits were spaced apart.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) != 2:
        raise InputParseError(f"Expected Time and Distance rows, found {len(lines)} lines")
    times = _parse_row(lines[0], "Time")
    records = _parse_row(lines[1], "Distance")
    if kerning:
        times, records = ["".join(times)], ["".join(records)]
    if len(times) != len(records):
        raise InputParseError("Time and Distance rows have different lengths")
    try:
        return [Race(int(time), int(record)) for time, record in zip(times, records)]
    except ValueError:
        raise InputParseError("Race values must be integers") from None


class Day06(Solution):
    day = 6
    title = "Wait For It"

    def part_one(self, text: str) -> int:
        return math.prod(race.victory_width() for race in parse_races(text))

    def part_two(self, text: str) -> int:
        return math.prod(race.victory_width() for race in parse_races(text, kerning=True))
