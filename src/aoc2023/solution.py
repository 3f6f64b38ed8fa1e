"""Base class shared by every day: input loading, timing and part results."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar

from aoc2023.config import settings
from aoc2023.errors import PartNotImplementedError

BUNDLED_ASSETS_DIR = Path(__file__).parent / "assets"


class Part(int, Enum):
    ONE = 1
    TWO = 2

    @property
    def label(self) -> str:
        return "First part" if self is Part.ONE else "Second part"


class PartStatus(str, Enum):
    """Outcome of running one part."""

    SUCCEEDED = "succeeded"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass(slots=True)
class PartResult:
    part: Part
    status: PartStatus
    answer: int | None = None
    elapsed_seconds: float = 0.0


def default_input_path(day: int, assets_dir: Path | None = None) -> Path:
    """Input used when none is given: ``<assets>/DayNN/Test.txt``."""
    base = assets_dir or settings.assets_dir or BUNDLED_ASSETS_DIR
    return Path(base) / f"Day{day:02d}" / "Test.txt"


class Solution:
    """One day of puzzles.

    Subclasses set ``day`` and override ``part_one`` and ``part_two``; each
    receives the raw input text and returns the numeric answer.
    """

    day: ClassVar[int]
    title: ClassVar[str] = ""

    def __init__(self, input_path: Path | str | None = None, *, logger: logging.Logger | None = None) -> None:
        self.input_path = Path(input_path) if input_path is not None else default_input_path(self.day)
        self._logger = logger or logging.getLogger("aoc2023.solution")

    def read_input(self) -> str:
        return self.input_path.read_text(encoding="utf-8")

    def part_one(self, text: str) -> int:
        raise PartNotImplementedError("The first part has not been implemented")

    def part_two(self, text: str) -> int:
        raise PartNotImplementedError("The second part has not been implemented")

    def run_part(self, part: Part) -> PartResult:
        """Read the input, solve ``part`` and time it.

        Parse failures propagate; only a missing part is turned into a result.
        """
        solver = self.part_one if part is Part.ONE else self.part_two
        started = time.perf_counter()
        try:
            answer = solver(self.read_input())
        except PartNotImplementedError:
            self._logger.info("part_not_implemented", extra={"day": self.day, "part": part.value})
            return PartResult(part=part, status=PartStatus.NOT_IMPLEMENTED)

        elapsed = time.perf_counter() - started
        self._logger.info(
            "part_finished",
            extra={"day": self.day, "part": part.value, "answer": answer, "elapsed_seconds": elapsed},
        )
        return PartResult(part=part, status=PartStatus.SUCCEEDED, answer=answer, elapsed_seconds=elapsed)

    def run(self) -> list[PartResult]:
        return [self.run_part(Part.ONE), self.run_part(Part.TWO)]
