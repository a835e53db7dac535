"""Chiton cave: lowest-risk path through a grid."""

import heapq
from collections.abc import Iterator
from dataclasses import dataclass

Pos = tuple[int, int]


def _map_value(tile: int, value: int) -> int:
    if tile == 0:
        return value
    result = value + tile
    return result - 9 if result > 9 else result


@dataclass
class RiskLevelMap:
    """Risk levels, indexed as ``rows[y][x]``."""

    rows: list[list[int]]

    def __getitem__(self, pos: Pos) -> int:
        x, y = pos
        return self.rows[y][x]

    def _successors(self, pos: Pos) -> Iterator[tuple[Pos, int]]:
        x, y = pos
        width, height = len(self.rows[0]), len(self.rows)
        candidates = []
        if x > 0:
            candidates.append((x - 1, y))
        if x < width - 1:
            candidates.append((x + 1, y))
        if y > 0:
            candidates.append((x, y - 1))
        if y < height - 1:
            candidates.append((x, y + 1))
        for candidate in candidates:
            yield candidate, self[candidate]

    def lowest_risk_path_cost(self) -> int:
        """Total risk of the cheapest path from top left to bottom right."""
        if not self.rows or not self.rows[0]:
            raise ValueError("empty risk map")
        start = (0, 0)
        end = (len(self.rows[0]) - 1, len(self.rows) - 1)
        best = {start: 0}
        queue = [(0, start)]
        while queue:
            cost, pos = heapq.heappop(queue)
            if pos == end:
                return cost
            if cost > best[pos]:
                continue
            for successor, risk in self._successors(pos):
                new_cost = cost + risk
                if new_cost < best.get(successor, new_cost + 1):
                    best[successor] = new_cost
                    heapq.heappush(queue, (new_cost, successor))
        raise ValueError("no path to the bottom right corner")

    def expand_five_folds(self) -> None:
        """Tile the map five times in each direction, raising risks per tile."""
        self.rows = [
            [_map_value(tile, value) for tile in range(5) for value in row]
            for row in self.rows
        ]
        original = [list(row) for row in self.rows]
        for tile in range(1, 5):
            self.rows.extend([_map_value(tile, v) for v in row] for row in original)


def parse_risk_map(text: str) -> RiskLevelMap:
    """Parse lines of digits into a risk map."""
    rows = []
    for line in text.splitlines():
        if not (line.isascii() and line.isdigit()):
            raise ValueError(f"invalid risk map row: {line!r}")
        rows.append([int(c) for c in line])
    return RiskLevelMap(rows)


def part1(risk_map: RiskLevelMap) -> int:
    return risk_map.lowest_risk_path_cost()


def part2(risk_map: RiskLevelMap) -> int:
    risk_map.expand_five_folds()
    return risk_map.lowest_risk_path_cost()