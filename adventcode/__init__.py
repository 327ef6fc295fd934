"""Solutions to the 2023 Advent of Code puzzles for days 1 to 11, with a runner and file scaffolding."""

__version__ = "0.1.0"