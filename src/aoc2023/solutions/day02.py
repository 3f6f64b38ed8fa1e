"""Day 2: Cube Conundrum"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from aoc2023.errors import InputParseError
from aoc2023.solution import Solution

_GAME_RE = re.compile(r"Game (\d+)")
_CUBES_RE = re.compile(r"(\d+) (\w+)")


class Colour(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


BAG = {Colour.RED: 12, Colour.GREEN: 13, Colour.BLUE: 14}


@dataclass(frozen=True, slots=True)
class Game:
    id: int
    draws: tuple[dict[Colour, int], ...]

    def is_possible(self, bag: dict[Colour, int]) -> bool:
        return all(count <= bag[colour] for draw in self.draws for colour, count in draw.items())

    def minimum_bag(self) -> dict[Colour, int]:
        """Fewest cubes of each colour that make every draw possible."""
        minimum = {colour: 0 for colour in Colour}
        for draw in self.draws:
            for colour, count in draw.items():
                minimum[colour] = max(minimum[colour], count)
        return minimum


def _parse_draw(text: str, *, line: str) -> dict[Colour, int]:
    draw: dict[Colour, int] = {}
    for display in text.split(","):
        match = _CUBES_RE.fullmatch(display.strip())
        if not match:
            raise InputParseError("Could not parse cubes", line=line)
        try:
            colour = Colour(match.group(2))
        except ValueError:
            raise InputParseError(f"Unknown colour {match.group(2)!r}", line=line) from None
        draw[colour] = draw.get(colour, 0) + int(match.group(1))
    return draw


def parse_game(line: str) -> Game:
    header, separator, body = line.partition(":")
    match = _GAME_RE.fullmatch(header.strip())
    if not separator or not match:
        raise InputParseError("Could not parse game", line=line)
    return Game(id=int(match.group(1)), draws=tuple(_parse_draw(part, line=line) for part in body.split(";")))


def parse_games(text: str) -> list[Game]:
    return [parse_game(line.strip()) for line in text.splitlines() if line.strip()]


class Day02(Solution):
    day = 2
    title = "Cube Conundrum"

    def part_one(self, text: str) -> int:
        return sum(game.id for game in parse_games(text) if game.is_possible(BAG))

    def part_two(self, text: str) -> int:
        return sum(math.prod(game.minimum_bag().values()) for game in parse_games(text))
