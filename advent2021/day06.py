"""Lanternfish population growth."""

from collections.abc import Iterable

_CYCLE_STATES = 9


def simulate(timers: Iterable[int], days: int) -> int:
    """Return the number of fish after ``days`` days."""
    counts = [0] * _CYCLE_STATES
    for timer in timers:
        if not 0 <= timer < _CYCLE_STATES:
            raise ValueError(f"invalid timer value: {timer}")
        counts[timer] += 1

    for _ in range(days):
        spawning = counts.pop(0)
        counts[6] += spawning
        counts.append(spawning)

    return sum(counts)


def part1(timers: Iterable[int]) -> int:
    return simulate(timers, 80)


def part2(timers: Iterable[int]) -> int:
    return simulate(timers, 256)