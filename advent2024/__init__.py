"""Advent of Code 2024 puzzle solutions for days 1 to 15, with shared grid geometry."""

__version__ = "0.1.0"