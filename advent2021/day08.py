"""Seven-segment display decoding."""

from collections.abc import Iterable

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


def split_into_pattern_and_display(raw: str) -> tuple[list[str], list[str]]:
    """Split an entry into its signal patterns and output digits."""
    parts = raw.split(" | ")
    if len(parts) < 2:
        raise ValueError(f"invalid entry: {raw!r}")
    return parts[0].split(), parts[1].split()


def normalise_digit(raw: str) -> str:
    """Sort the segments of a digit."""
    return "".join(sorted(raw))


def _contains(checked: str, against: str) -> bool:
    return set(against) <= set(checked)


def determine_substitutions(signal: Iterable[str]) -> dict[str, int]:
    """Map each normalised pattern of the signal to the digit it shows."""
    remaining = {normalise_digit(raw) for raw in signal}
    substitutions: dict[str, int] = {}
    identified: dict[int, str] = {}

    for digit in remaining:
        value = _UNIQUE_LENGTHS.get(len(digit))
        if value is not None:
            identified[value] = digit
            substitutions[digit] = value

    def known(value: int) -> str:
        try:
            return identified[value]
        except KeyError:
            raise ValueError(f"could not identify digit {value}") from None

    for value in (1, 7, 4, 8):
        remaining.discard(known(value))

    for digit in remaining:
        if len(digit) == 5:
            if _contains(digit, known(1)):
                identified[3] = digit
                substitutions[digit] = 3
        elif len(digit) == 6:
            if _contains(digit, known(4)):
                value = 9
            elif not _contains(digit, known(1)):
                value = 6
            else:
                value = 0
            identified[value] = digit
            substitutions[digit] = value
        else:
            raise ValueError(f"invalid pattern length: {digit!r}")

    for value in (3, 9, 6, 0):
        remaining.discard(known(value))

    # only 2 and 5 are left; 5 is a subset of 9, while 2 is not
    for digit in remaining:
        value = 5 if _contains(known(9), digit) else 2
        identified[value] = digit
        substitutions[digit] = value

    return substitutions


def part1(lines: Iterable[str]) -> int:
    """Count output digits that use a unique number of segments."""
    return sum(
        1
        for line in lines
        for digit in split_into_pattern_and_display(line)[1]
        if len(digit) in _UNIQUE_LENGTHS
    )


def _decode(line: str) -> int:
    signal, display = split_into_pattern_and_display(line)
    if len(display) < 4:
        raise ValueError(f"display needs four digits: {line!r}")
    substitutions = determine_substitutions(signal)
    value = 0
    for digit in display[:4]:
        try:
            value = value * 10 + substitutions[normalise_digit(digit)]
        except KeyError:
            raise ValueError(f"unknown display digit: {digit!r}") from None
    return value


def part2(lines: Iterable[str]) -> int:
    """Sum of all decoded output values."""
    return sum(_decode(line) for line in lines)