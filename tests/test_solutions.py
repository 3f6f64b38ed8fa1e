from __future__ import annotations

from pathlib import Path

import pytest

from aoc2023.errors import InputParseError
from aoc2023.solution import Part, PartStatus
from aoc2023.solutions import SOLUTIONS
from aoc2023.solutions.day01 import calibration_value
from aoc2023.solutions.day06 import Race
from aoc2023.solutions.day07 import HandType, parse_hand

BUNDLED_ANSWERS = {
    1: (142, 142),
    2: (8, 2286),
    3: (4361, 467835),
    4: (13, 30),
    5: (35, 46),
    6: (288, 71503),
    7: (6440, 5905),
    8: (6, 6),
}


@pytest.mark.parametrize(("day", "answers"), sorted(BUNDLED_ANSWERS.items()))
def test_bundled_examples(day: int, answers: tuple[int, int]) -> None:
    results = SOLUTIONS[day]().run()

    assert [result.part for result in results] == [Part.ONE, Part.TWO]
    assert all(result.status == PartStatus.SUCCEEDED for result in results)
    assert tuple(result.answer for result in results) == answers


def test_every_day_has_a_bundled_input() -> None:
    assert sorted(SOLUTIONS) == list(range(1, 9))
    for solution in SOLUTIONS.values():
        assert solution().input_path.exists()


def test_day01_spelled_digits(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text(
        "two1nine\neightwothree\nabcone2threexyz\nxtwone3four\n4nineeightseven2\nzoneight234\n7pqrstsixteen\n",
        encoding="utf-8",
    )

    assert SOLUTIONS[1](path).run_part(Part.TWO).answer == 281
    assert calibration_value("eightwo", spelled=True) == 82


def test_day01_line_without_digits_is_rejected() -> None:
    with pytest.raises(InputParseError):
        calibration_value("eightwothree")


def test_day06_tied_record_is_not_a_win() -> None:
    assert Race(time=30, record=200).victory_window() == (11, 19)
    assert Race(time=4, record=4).victory_width() == 0
    assert Race(time=3, record=10).victory_width() == 0


@pytest.mark.parametrize(
    ("cards", "jokers", "expected"),
    [
        ("32T3K", False, HandType.ONE_PAIR),
        ("KTJJT", False, HandType.TWO_PAIRS),
        ("KTJJT", True, HandType.FOUR_OF_A_KIND),
        ("JJJJJ", True, HandType.FIVE_OF_A_KIND),
        ("23456", True, HandType.HIGH_CARD),
        ("2345J", True, HandType.ONE_PAIR),
    ],
)
def test_day07_hand_types(cards: str, jokers: bool, expected: HandType) -> None:
    assert parse_hand(f"{cards} 1", jokers=jokers).type == expected


def test_day08_ghosts(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text(
        "LR\n\n11A = (11B, XXX)\n11B = (XXX, 11Z)\n11Z = (11B, XXX)\n22A = (22B, XXX)\n"
        "22B = (22C, 22C)\n22C = (22Z, 22Z)\n22Z = (22B, 22B)\nXXX = (XXX, XXX)\n",
        encoding="utf-8",
    )

    assert SOLUTIONS[8](path).run_part(Part.TWO).answer == 6


@pytest.mark.parametrize(
    ("day", "text"),
    [
        (2, "Game 1: 3 purple\n"),
        (4, "Card 1: 1 2 3\n"),
        (6, "Time: 7\n"),
        (7, "32T3X 765\n"),
    ],
)
def test_malformed_inputs_abort(tmp_path: Path, day: int, text: str) -> None:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")

    with pytest.raises(InputParseError):
        SOLUTIONS[day](path).run()
