"""Registry of the implemented days."""

from aoc2023.solution import Solution

from .day01 import Day01
from .day02 import Day02
from .day03 import Day03
from .day04 import Day04
from .day05 import Day05
from .day06 import Day06
from .day07 import Day07
from .day08 import Day08

SOLUTIONS: dict[int, type[Solution]] = {
    solution.day: solution for solution in (Day01, Day02, Day03, Day04, Day05, Day06, Day07, Day08)
}

__all__ = ["SOLUTIONS", "Day01", "Day02", "Day03", "Day04", "Day05", "Day06", "Day07", "Day08"]
