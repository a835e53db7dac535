"""Binary diagnostic: gamma/epsilon and life support ratings."""

from collections.abc import Sequence


def most_common_bit(numbers: Sequence[int], position: int) -> int:
    """Return the most common bit at ``position``; ties go to 1."""
    set_count = sum(num >> position & 1 for num in numbers)
    unset = len(numbers) - set_count
    return 1 if set_count >= unset else 0


def sieve(numbers: Sequence[int], num_bits: int, most_common: bool) -> int:
    """Filter numbers bit by bit from the most significant one until one remains."""
    remaining = list(numbers)
    for bit in reversed(range(num_bits)):
        if len(remaining) == 1:
            return remaining[0]
        target = most_common_bit(remaining, bit)
        if not most_common:
            target ^= 1
        remaining = [x for x in remaining if x >> bit & 1 == target]

    if len(remaining) != 1:
        raise ValueError("ran out of numbers to sift through")
    return remaining[0]


def _parse(lines: Sequence[str]) -> tuple[list[int], int]:
    if not lines:
        raise ValueError("no diagnostic lines given")
    return [int(line, 2) for line in lines], len(lines[0])


def part1(lines: Sequence[str]) -> int:
    numbers, num_bits = _parse(lines)
    gamma = 0
    for bit in range(num_bits):
        gamma |= most_common_bit(numbers, bit) << bit
    mask = (1 << num_bits) - 1
    epsilon = ~gamma & mask
    return gamma * epsilon


def part2(lines: Sequence[str]) -> int:
    numbers, num_bits = _parse(lines)
    o2 = sieve(numbers, num_bits, True)
    co2 = sieve(numbers, num_bits, False)
    return o2 * co2