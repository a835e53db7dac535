"""Hydrothermal vent line overlaps."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass


class MalformedVentLine(ValueError):
    """Raised when a vent line cannot be parsed."""


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class VentLine:
    start: tuple[int, int]
    end: tuple[int, int]

    def __str__(self) -> str:
        return f"{self.start[0]},{self.start[1]} -> {self.end[0]},{self.end[1]}"

    def is_vertical(self) -> bool:
        return self.start[0] == self.end[0]

    def is_horizontal(self) -> bool:
        return self.start[1] == self.end[1]

    def _slope(self) -> int | None:
        dx = self.end[0] - self.start[0]
        if dx == 0:
            return None
        return _trunc_div(self.end[1] - self.start[1], dx)

    def covered_points(self) -> list[tuple[int, int]]:
        """Points on the line, in order from start to end."""
        (x1, y1), (x2, y2) = self.start, self.end
        slope = self._slope()
        if slope is None:
            step = -1 if y1 > y2 else 1
            return [(x1, y) for y in range(y1, y2 + step, step)]
        intercept = y1 - slope * x1
        step = -1 if x1 > x2 else 1
        return [(x, slope * x + intercept) for x in range(x1, x2 + step, step)]


def _parse_point(raw: str, text: str) -> tuple[int, int]:
    parts = raw.split(",")
    if len(parts) < 2:
        raise MalformedVentLine(f"invalid vent line: {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise MalformedVentLine(f"invalid vent line: {text!r}") from exc


def parse_vent_line(text: str) -> VentLine:
    """Parse a line such as ``0,9 -> 5,9``."""
    parts = text.split(" -> ")
    if len(parts) < 2:
        raise MalformedVentLine(f"invalid vent line: {text!r}")
    return VentLine(_parse_point(parts[0], text), _parse_point(parts[1], text))


def _overlaps(lines: Iterable[VentLine]) -> int:
    coverage = Counter(point for line in lines for point in line.covered_points())
    return sum(1 for count in coverage.values() if count >= 2)


def part1(lines: Iterable[VentLine]) -> int:
    """Overlapping points counting only horizontal and vertical lines."""
    return _overlaps(
        line for line in lines if line.is_vertical() or line.is_horizontal()
    )


def part2(lines: Iterable[VentLine]) -> int:
    """Overlapping points counting all lines."""
    return _overlaps(lines)