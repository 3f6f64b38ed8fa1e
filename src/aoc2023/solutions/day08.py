"""Day 8: Haunted Wasteland"""

from __future__ import annotations

from aoc2023.config import settings
from aoc2023.network import ghost_walk, lcm_all, parse_network, walk
from aoc2023.solution import Solution


class Day08(Solution):
    day = 8
    title = "Haunted Wasteland"

    def part_one(self, text: str) -> int:
        instructions, network = parse_network(text)
        return walk(network, instructions, start="AAA", end="ZZZ", max_steps=settings.max_walk_steps)

    def part_two(self, text: str) -> int:
        """Ghosts loop back to their end node with a period equal to their first arrival."""
        instructions, network = parse_network(text)
        arrivals = ghost_walk(network, instructions, max_steps=settings.max_walk_steps)
        return lcm_all(arrivals.values())
