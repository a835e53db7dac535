"""Smoke basin height map."""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int
    height: int

    @property
    def risk_level(self) -> int:
        return self.height + 1


@dataclass
class HeightMap:
    rows: list[list[int]]

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        if x > 0:
            yield x - 1, y
        if y > 0:
            yield x, y - 1
        if x + 1 < len(self.rows[y]):
            yield x + 1, y
        if y + 1 < len(self.rows):
            yield x, y + 1

    def _is_low_point(self, x: int, y: int, value: int) -> bool:
        return all(self.rows[ny][nx] > value for nx, ny in self._neighbours(x, y))

    def low_points(self) -> list[Point]:
        """Points lower than all of their orthogonal neighbours, row by row."""
        return [
            Point(x, y, value)
            for y, row in enumerate(self.rows)
            for x, value in enumerate(row)
            if self._is_low_point(x, y, value)
        ]

    def basin_around(self, point: Point) -> frozenset[Point]:
        """All points reachable from ``point`` without crossing height 9."""
        basin = {point}
        frontier = [point]
        while frontier:
            new_frontier = []
            for current in frontier:
                for nx, ny in self._neighbours(current.x, current.y):
                    height = self.rows[ny][nx]
                    if height == 9:
                        continue
                    candidate = Point(nx, ny, height)
                    if candidate not in basin:
                        basin.add(candidate)
                        new_frontier.append(candidate)
            frontier = new_frontier
        return frozenset(basin)


def parse_height_map(rows: Sequence[str]) -> HeightMap:
    """Parse rows of digits into a height map."""
    parsed = []
    for row in rows:
        if not row.isdigit():
            raise ValueError(f"invalid height map row: {row!r}")
        parsed.append([int(c) for c in row])
    return HeightMap(parsed)


def part1(rows: Sequence[str]) -> int:
    """Sum of risk levels of all low points."""
    return sum(point.risk_level for point in parse_height_map(rows).low_points())


def part2(rows: Sequence[str]) -> int:
    """Product of the sizes of the three largest basins."""
    height_map = parse_height_map(rows)
    sizes = sorted(
        (len(height_map.basin_around(p)) for p in height_map.low_points()),
        reverse=True,
    )
    return math.prod(sizes[:3])