"""Advent of Code 2023 solutions."""

__version__ = "0.1.0"
