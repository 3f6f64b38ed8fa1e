from __future__ import annotations

from pathlib import Path

import pytest

from aoc2023.cli import SolutionLauncher, parse_day
from aoc2023.errors import InvalidDayError
from aoc2023.solution import Part, PartStatus, Solution, default_input_path


class HalfDoneSolution(Solution):
    day = 42

    def part_one(self, text: str) -> int:
        return len(text.split())


def test_missing_part_is_reported_not_raised(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("a b c\n", encoding="utf-8")

    first, second = HalfDoneSolution(path).run()

    assert (first.status, first.answer) == (PartStatus.SUCCEEDED, 3)
    assert first.elapsed_seconds >= 0
    assert (second.part, second.status, second.answer) == (Part.TWO, PartStatus.NOT_IMPLEMENTED, None)


def test_missing_input_file_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        HalfDoneSolution(tmp_path / "absent.txt").run_part(Part.ONE)


def test_default_input_path_layout(tmp_path: Path) -> None:
    assert default_input_path(5, assets_dir=tmp_path) == tmp_path / "Day05" / "Test.txt"
    assert HalfDoneSolution().input_path.parts[-2:] == ("Day42", "Test.txt")


@pytest.mark.parametrize(("value", "expected"), [("5", 5), ("05", 5), ("day08", 8), ("Day 1", 1), (3, 3)])
def test_parse_day(value: str | int, expected: int) -> None:
    assert parse_day(value) == expected


@pytest.mark.parametrize("value", ["", "five", "9", "0", "-1"])
def test_launcher_rejects_unknown_days(value: str) -> None:
    with pytest.raises(InvalidDayError):
        SolutionLauncher().resolve(value)


def test_launcher_uses_given_registry(tmp_path: Path) -> None:
    launcher = SolutionLauncher({42: HalfDoneSolution})

    solution = launcher.build("42", tmp_path / "input.txt")

    assert launcher.available_days() == [42]
    assert isinstance(solution, HalfDoneSolution)
    assert solution.input_path == tmp_path / "input.txt"
