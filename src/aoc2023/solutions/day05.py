"""Day 5: If You Give A Seed A Fertilizer"""

from __future__ import annotations

from aoc2023.almanac import lowest_location, lowest_location_in_ranges, parse_almanac
from aoc2023.solution import Solution


class Day05(Solution):
    day = 5
    title = "If You Give A Seed A Fertilizer"

    def part_one(self, text: str) -> int:
        return lowest_location(parse_almanac(text))

    def part_two(self, text: str) -> int:
        return lowest_location_in_ranges(parse_almanac(text))
