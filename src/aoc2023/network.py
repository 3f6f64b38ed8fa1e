"""Left/right node network walked by a repeating list of instructions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable

from aoc2023.errors import InputParseError, UnknownNodeError, WalkLimitExceededError

logger = logging.getLogger(__name__)

_NODE_RE = re.compile(r"(\w+) = \((\w+), (\w+)\)")
_BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")


class Direction(str, Enum):
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True, slots=True)
class Instructions:
    """Non-empty sequence of directions, read cyclically through a cursor."""

    directions: tuple[Direction, ...]

    def __post_init__(self) -> None:
        if not self.directions:
            raise ValueError("Instructions need at least one direction")

    @classmethod
    def parse(cls, text: str) -> Instructions:
        line = text.strip()
        try:
            return cls(tuple(Direction(char) for char in line))
        except ValueError:
            raise InputParseError("Could not parse instructions", line=line) from None

    def __len__(self) -> int:
        return len(self.directions)

    def cursor(self, position: int = 0) -> InstructionCursor:
        return InstructionCursor(self, position)


@dataclass(slots=True)
class InstructionCursor:
    """Read position over ``Instructions``; wraps to zero after the last one."""

    instructions: Instructions
    position: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.position < len(self.instructions):
            raise ValueError(f"Cursor position {self.position} is out of range")

    def next(self) -> Direction:
        direction = self.instructions.directions[self.position]
        self.position = (self.position + 1) % len(self.instructions)
        return direction


class Network:
    """Node table mapping each name to its ``(left, right)`` children.

    Walks share one network and never modify it.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, tuple[str, str]] = {}

    def add_node(self, name: str, left: str, right: str) -> None:
        self._nodes[name] = (left, right)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def names(self) -> list[str]:
        return list(self._nodes)

    def children(self, name: str) -> tuple[str, str]:
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def step(self, name: str, direction: Direction) -> str:
        left, right = self.children(name)
        return left if direction is Direction.LEFT else right


@dataclass(slots=True)
class Walk:
    """Position of one walker over a shared network."""

    network: Network
    current: str
    steps: int = 0

    def move(self, direction: Direction) -> str:
        self.current = self.network.step(self.current, direction)
        self.steps += 1
        return self.current


def _check_limit(steps: int, max_steps: int | None) -> None:
    if max_steps is not None and steps >= max_steps:
        raise WalkLimitExceededError(f"Walk did not finish within {max_steps} steps")


def walk(
    network: Network,
    instructions: Instructions,
    *,
    start: str = "AAA",
    end: str = "ZZZ",
    max_steps: int | None = None,
) -> int:
    """Number of steps needed to go from ``start`` to ``end``."""
    if start not in network:
        raise UnknownNodeError(start)

    walker = Walk(network, start)
    cursor = instructions.cursor()
    while walker.current != end:
        _check_limit(walker.steps, max_steps)
        walker.move(cursor.next())

    logger.debug("walk_finished", extra={"start": start, "end": end, "steps": walker.steps})
    return walker.steps


def ghost_walk(
    network: Network,
    instructions: Instructions,
    *,
    start_suffix: str = "A",
    end_suffix: str = "Z",
    max_steps: int | None = None,
) -> dict[str, int]:
    """Walk every ``start_suffix`` node at once and record each one's first end.

    All walkers follow the same instruction on each step. A walker stops
    moving as soon as it reaches a node ending in ``end_suffix``; the result
    maps each starting node to the step count of that first hit. A starting
    node that already ends in ``end_suffix`` is recorded with 0 steps, which
    makes ``lcm_all`` of the result 0.
    """
    walkers = {name: Walk(network, name) for name in network.names if name.endswith(start_suffix)}
    if not walkers:
        raise InputParseError(f"No starting nodes ending in {start_suffix!r}")

    hits = {name: 0 for name, walker in walkers.items() if walker.current.endswith(end_suffix)}
    cursor = instructions.cursor()
    steps = 0
    while len(hits) < len(walkers):
        _check_limit(steps, max_steps)
        direction = cursor.next()
        steps += 1
        for name, walker in walkers.items():
            if name in hits:
                continue
            if walker.move(direction).endswith(end_suffix):
                hits[name] = walker.steps
                logger.debug("ghost_arrived", extra={"start": name, "end": walker.current, "steps": walker.steps})

    return hits


def gcd(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return a // gcd(a, b) * b


def lcm_all(values: Iterable[int]) -> int:
    return reduce(lcm, values, 1)


def parse_network(text: str) -> tuple[Instructions, Network]:
    """Parse the instruction line and the ``NAME = (LEFT, RIGHT)`` block."""
    blocks = _BLOCK_SEPARATOR_RE.split(text.strip())
    if len(blocks) != 2:
        raise InputParseError(f"Expected instructions and a node block, found {len(blocks)} blocks")

    instructions = Instructions.parse(blocks[0])
    network = Network()
    for line in blocks[1].splitlines():
        line = line.strip()
        match = _NODE_RE.fullmatch(line)
        if not match:
            raise InputParseError("Could not parse node", line=line)
        network.add_node(match.group(1), match.group(2), match.group(3))
    return instructions, network
