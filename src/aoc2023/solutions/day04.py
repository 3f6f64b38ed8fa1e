"""Day 4: Scratchcards"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass

from aoc2023.errors import InputParseError
from aoc2023.solution import Solution

_CARD_RE = re.compile(r"Card\s+(\d+):([\d\s]+)\|([\d\s]+)")


@dataclass(frozen=True, slots=True)
class Card:
    id: int
    winning: frozenset[int]
    scratched: frozenset[int]

    @property
    def matches(self) -> int:
        return len(self.winning & self.scratched)

    @property
    def points(self) -> int:
        """One point for the first match, doubled for every further one."""
        return 2 ** (self.matches - 1) if self.matches else 0


def parse_card(line: str) -> Card:
    match = _CARD_RE.fullmatch(line)
    if not match:
        raise InputParseError("Could not parse card", line=line)
    return Card(
        id=int(match.group(1)),
        winning=frozenset(int(value) for value in match.group(2).split()),
        scratched=frozenset(int(value) for value in match.group(3).split()),
    )


def parse_cards(text: str) -> list[Card]:
    return [parse_card(line.strip()) for line in text.splitlines() if line.strip()]


def count_copies(cards: list[Card]) -> int:
    """Total cards held once every win has handed out its copies.

    Each card wins one copy of the next ``matches`` cards, once per copy of
    itself that is held.
    """
    copies: Counter[int] = Counter()
    for card in cards:
        copies[card.id] += 1
        for offset in range(1, card.matches + 1):
            copies[card.id + offset] += copies[card.id]
    known = {card.id for card in cards}
    return sum(count for card_id, count in copies.items() if card_id in known)


class Day04(Solution):
    day = 4
    title = "Scratchcards"

    def part_one(self, text: str) -> int:
        return sum(card.points for card in parse_cards(text))

    def part_two(self, text: str) -> int:
        return count_copies(parse_cards(text))
