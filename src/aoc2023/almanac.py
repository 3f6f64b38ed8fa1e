"""Seed almanac: chained range mappings from seeds to locations.

Each ``Mapping`` translates values of one category into the next one using a
list of offset rules. Values outside every rule keep their number. The chain
of seven mappings turns a seed into a location.

Ranged seeds can cover billions of values, so the lowest location over them
is found by pulling every mapping's boundaries back to the seed level and
only evaluating the chain at those candidate seeds.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from aoc2023.errors import InputParseError

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"^(\w+)-to-(\w+) map:$")
_BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")


class Category(str, Enum):
    """Kinds of things tracked in the almanac, in chain order."""

    SEED = "seed"
    SOIL = "soil"
    FERTILIZER = "fertilizer"
    WATER = "water"
    LIGHT = "light"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    LOCATION = "location"


CHAIN: tuple[Category, ...] = tuple(Category)


@dataclass(frozen=True, slots=True)
class Range:
    """Inclusive integer interval ``[start, end]``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is greater than its end {self.end}")

    @classmethod
    def from_length(cls, start: int, length: int) -> Range:
        return cls(start, start + length - 1)

    def __contains__(self, value: int) -> bool:
        return self.start <= value <= self.end


@dataclass(slots=True)
class Mapping:
    """Offset rules translating ``source`` values into ``destination`` values.

    Forward rules are keyed by source ranges and backward rules by destination
    ranges. Both lists are filled together by ``add_range`` and the first
    matching rule wins in either direction.
    """

    source: Category
    destination: Category
    forward: list[tuple[Range, int]] = field(default_factory=list)
    backward: list[tuple[Range, int]] = field(default_factory=list)

    def add_range(self, source: int, destination: int, length: int) -> None:
        """Register ``length`` values starting at ``source`` mapped onto ``destination``."""
        offset = destination - source
        self.forward.append((Range.from_length(source, length), offset))
        self.backward.append((Range.from_length(destination, length), -offset))

    def get(self, value: int) -> int:
        return self._lookup(self.forward, value)

    def undo(self, value: int) -> int:
        """Translate a destination value back into its source value.

        Only meaningful when the forward source ranges do not overlap.
        """
        return self._lookup(self.backward, value)

    def source_cuts(self) -> set[int]:
        """Source values where the mapping may switch offsets, plus the floor."""
        cuts = {0}
        for rule_range, _ in self.forward:
            cuts.update((rule_range.start, rule_range.end))
        return cuts

    def preimages(self, value: int) -> set[int]:
        """Source values that may be sent onto ``value``.

        Covers every backward rule holding ``value`` and the identity
        fallback when no forward rule claims ``value`` itself.
        """
        found = {value + offset for rule_range, offset in self.backward if value in rule_range}
        if not any(value in rule_range for rule_range, _ in self.forward):
            found.add(value)
        return found

    @staticmethod
    def _lookup(rules: list[tuple[Range, int]], value: int) -> int:
        for rule_range, offset in rules:
            if value in rule_range:
                return value + offset
        return value


@dataclass(frozen=True, slots=True)
class Almanac:
    """Seeds plus the seed-to-location chain of mappings."""

    seeds: tuple[int, ...]
    mappings: tuple[Mapping, ...]

    def __post_init__(self) -> None:
        expected = list(zip(CHAIN, CHAIN[1:]))
        actual = [(mapping.source, mapping.destination) for mapping in self.mappings]
        if actual != expected:
            raise ValueError(f"Mappings must chain {' -> '.join(c.value for c in CHAIN)}")

    @property
    def seed_ranges(self) -> list[Range]:
        """Seeds read as ``(start, length)`` pairs."""
        if len(self.seeds) % 2:
            raise InputParseError(f"Seed ranges need an even number of values, got {len(self.seeds)}")
        pairs = zip(self.seeds[::2], self.seeds[1::2])
        return [Range.from_length(start, length) for start, length in pairs if length > 0]

    def mapping(self, source: Category) -> Mapping:
        for mapping in self.mappings:
            if mapping.source is source:
                return mapping
        raise KeyError(f"No mapping from {source.value}")

    def locate(self, seed: int) -> int:
        """Run ``seed`` through every mapping and return its location."""
        value = seed
        for mapping in self.mappings:
            value = mapping.get(value)
        return value


def lowest_location(almanac: Almanac) -> int:
    """Lowest location among the individual seeds."""
    return min(almanac.locate(seed) for seed in almanac.seeds)


def propagate_cuts(almanac: Almanac) -> set[int]:
    """Pull every mapping's cut points back to seed values.

    Walking the chain from the last mapping to the first, the current cut set
    is translated one category back and merged with the cuts of the mapping
    being crossed. Each cut contributes its ``undo`` value and every other
    preimage, so mappings that are not injective still keep their minima.
    The value right after each rule is added too, where the identity fallback
    takes over again.
    """
    cuts: set[int] = set()
    for mapping in reversed(almanac.mappings):
        translated: set[int] = set()
        for cut in cuts:
            translated.add(mapping.undo(cut))
            translated |= mapping.preimages(cut)
        resumes = {rule_range.end + 1 for rule_range, _ in mapping.forward}
        cuts = translated | mapping.source_cuts() | resumes
        logger.debug(
            "cuts_propagated",
            extra={"category": mapping.source.value, "cut_count": len(cuts)},
        )
    return cuts


def lowest_location_in_ranges(almanac: Almanac) -> int:
    """Lowest location over every seed covered by the seed ranges.

    The chain is piecewise linear with slope one, so its minimum over a range
    sits at the range start or at a propagated cut point inside the range.
    """
    ranges = almanac.seed_ranges
    if not ranges:
        raise InputParseError("No non-empty seed ranges")

    candidates = {cut for cut in propagate_cuts(almanac) if any(cut in seed_range for seed_range in ranges)}
    candidates.update(seed_range.start for seed_range in ranges)
    logger.debug("candidate_seeds", extra={"candidate_count": len(candidates)})
    return min(almanac.locate(seed) for seed in candidates)


def _parse_ints(text: str, *, line: str) -> list[int]:
    try:
        return [int(part) for part in text.split()]
    except ValueError:
        raise InputParseError("Expected integers", line=line) from None


def _parse_mapping(block: str, source: Category, destination: Category) -> Mapping:
    lines = block.strip().splitlines()
    header = lines[0].strip()
    match = _HEADER_RE.match(header)
    if not match:
        raise InputParseError("Could not parse map header", line=header)
    if (match.group(1), match.group(2)) != (source.value, destination.value):
        raise InputParseError(f"Expected {source.value}-to-{destination.value} map", line=header)

    mapping = Mapping(source, destination)
    for line in lines[1:]:
        values = _parse_ints(line, line=line)
        if len(values) != 3:
            raise InputParseError("Could not parse map rule", line=line)
        destination_start, source_start, length = values
        if length < 1:
            raise InputParseError("Map rule length must be positive", line=line)
        mapping.add_range(source=source_start, destination=destination_start, length=length)
    return mapping


def parse_almanac(text: str) -> Almanac:
    """Parse the ``seeds:`` line and the seven map blocks."""
    blocks = _BLOCK_SEPARATOR_RE.split(text.strip())
    seeds_line = blocks[0].strip()
    label, _, numbers = seeds_line.partition(":")
    if label != "seeds" or not numbers.strip():
        raise InputParseError("Could not parse seeds", line=seeds_line)
    seeds = _parse_ints(numbers, line=seeds_line)

    pairs = list(zip(CHAIN, CHAIN[1:]))
    if len(blocks) - 1 != len(pairs):
        raise InputParseError(f"Expected {len(pairs)} map blocks, found {len(blocks) - 1}")

    mappings = tuple(
        _parse_mapping(block, source, destination) for block, (source, destination) in zip(blocks[1:], pairs)
    )
    return Almanac(seeds=tuple(seeds), mappings=mappings)
