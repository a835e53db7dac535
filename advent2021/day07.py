"""Crab alignment fuel costs."""

import math
from collections.abc import Sequence


def _require(positions: Sequence[int]) -> list[int]:
    positions = list(positions)
    if not positions:
        raise ValueError("no crab positions given")
    return positions


def part1(positions: Sequence[int]) -> int:
    """Minimum fuel with constant cost per step: align on the median."""
    positions = _require(positions)
    median = sorted(positions)[len(positions) // 2]
    return sum(abs(x - median) for x in positions)


def _fuel_cost(a: int, b: int) -> int:
    distance = abs(a - b)
    return distance * (distance + 1) // 2


def part2(positions: Sequence[int]) -> int:
    """Minimum fuel with increasing step cost: try both integers around the mean."""
    positions = _require(positions)
    mean = sum(positions) / len(positions)
    candidates = {math.floor(mean), math.ceil(mean)}
    return min(sum(_fuel_cost(x, target) for x in positions) for target in candidates)