"""Solutions to the 2021 Advent of Code puzzles, days 1 to 17, one module per day."""

__version__ = "0.1.0"