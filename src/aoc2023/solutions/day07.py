"""Day 7: Camel Cards"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from aoc2023.errors import InputParseError
from aoc2023.solution import Solution

CARD_ORDER = "23456789TJQKA"
JOKER_CARD_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_TYPES_BY_SHAPE = {
    (5,): HandType.FIVE_OF_A_KIND,
    (4, 1): HandType.FOUR_OF_A_KIND,
    (3, 2): HandType.FULL_HOUSE,
    (3, 1, 1): HandType.THREE_OF_A_KIND,
    (2, 2, 1): HandType.TWO_PAIRS,
    (2, 1, 1, 1): HandType.ONE_PAIR,
}


@dataclass(frozen=True, slots=True)
class Hand:
    cards: str
    bid: int
    jokers: bool = False

    @property
    def type(self) -> HandType:
        """Hand type, with jokers joining the largest group of other cards."""
        regular = self.cards.replace("J", "") if self.jokers else self.cards
        shape = sorted(Counter(regular).values(), reverse=True) or [0]
        shape[0] += len(self.cards) - len(regular)
        return _TYPES_BY_SHAPE.get(tuple(shape), HandType.HIGH_CARD)

    def sort_key(self) -> tuple[HandType, tuple[int, ...]]:
        order = JOKER_CARD_ORDER if self.jokers else CARD_ORDER
        return self.type, tuple(order.index(card) for card in self.cards)


def parse_hand(line: str, *, jokers: bool = False) -> Hand:
    parts = line.split()
    if len(parts) != 2 or len(parts[0]) != 5 or any(card not in CARD_ORDER for card in parts[0]):
        raise InputParseError("Could not parse hand", line=line)
    try:
        bid = int(parts[1])
    except ValueError:
        raise InputParseError("Could not parse bid", line=line) from None
    return Hand(cards=parts[0], bid=bid, jokers=jokers)


def total_winnings(text: str, *, jokers: bool = False) -> int:
    hands = [parse_hand(line.strip(), jokers=jokers) for line in text.splitlines() if line.strip()]
    ranked = sorted(hands, key=Hand.sort_key)
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


class Day07(Solution):
    day = 7
    title = "Camel Cards"

    def part_one(self, text: str) -> int:
        return total_winnings(text)

    def part_two(self, text: str) -> int:
        return total_winnings(text, jokers=True)
