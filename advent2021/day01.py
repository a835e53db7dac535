"""Sonar sweep: count depth increases."""

from collections.abc import Sequence


def _count_increases(values: Sequence[int]) -> int:
    return sum(1 for a, b in zip(values, values[1:]) if a < b)


def part1(depths: Sequence[int]) -> int:
    """Count how many measurements are larger than the previous one."""
    return _count_increases(list(depths))


def part2(depths: Sequence[int]) -> int:
    """Count increases between consecutive three-measurement sliding sums."""
    depths = list(depths)
    windows = [a + b + c for a, b, c in zip(depths, depths[1:], depths[2:])]
    return _count_increases(windows)