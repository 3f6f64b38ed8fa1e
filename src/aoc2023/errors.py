"""Exceptions raised by the solutions and the runner."""

from __future__ import annotations


class AdventError(Exception):
    """Base class for every error raised by aoc2023."""


class InputParseError(AdventError, ValueError):
    """The puzzle input does not follow the expected grammar."""

    def __init__(self, message: str, *, line: str | None = None) -> None:
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line


class PartNotImplementedError(AdventError, NotImplementedError):
    """A day's part has no solution yet."""


class UnknownNodeError(AdventError, KeyError):
    """A walk reached a node that was never registered in the network."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown node: {self.name}"


class WalkLimitExceededError(AdventError, RuntimeError):
    """A walk took more steps than the configured ceiling."""


class InvalidDayError(AdventError, LookupError):
    """The requested day is not valid or has not been implemented."""
