"""Day selection on top of the solution registry."""

from __future__ import annotations

import re
from pathlib import Path

from aoc2023.errors import InvalidDayError
from aoc2023.solution import Solution
from aoc2023.solutions import SOLUTIONS

_DAY_RE = re.compile(r"(?:day)?\s*0*(\d+)", re.IGNORECASE)


def parse_day(value: str | int) -> int:
    """Accept ``5``, ``"5"``, ``"05"`` or ``"day05"``."""
    if isinstance(value, int):
        return value
    match = _DAY_RE.fullmatch(value.strip())
    if not match:
        raise InvalidDayError(f"The day entered is not valid: {value!r}")
    return int(match.group(1))


class SolutionLauncher:
    """Builds the solution for a requested day."""

    def __init__(self, registry: dict[int, type[Solution]] | None = None) -> None:
        self._registry = registry if registry is not None else SOLUTIONS

    def available_days(self) -> list[int]:
        return sorted(self._registry)

    def resolve(self, day: str | int) -> type[Solution]:
        number = parse_day(day)
        if number not in self._registry:
            raise InvalidDayError(f"Day {number} is not valid or has not been implemented yet")
        return self._registry[number]

    def build(self, day: str | int, input_path: Path | str | None = None) -> Solution:
        return self.resolve(day)(input_path)
