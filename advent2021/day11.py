"""Dumbo octopus flash simulation."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

GRID_SIZE = 10


@dataclass
class SquidGrid:
    """Energy levels, indexed as ``energy[y][x]``."""

    energy: list[list[int]]

    def _neighbours(self, x: int, y: int) -> Iterator[tuple[int, int]]:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                nx, ny = x + dx, y + dy
                if (dx or dy) and 0 <= nx < GRID_SIZE and 0 <= ny < GRID_SIZE:
                    yield nx, ny

    def _flash_all(self, to_flash: list[tuple[int, int]]) -> set[tuple[int, int]]:
        flashed: set[tuple[int, int]] = set()
        pending = list(reversed(to_flash))
        while pending:
            octopus = pending.pop()
            if octopus in flashed:
                continue
            flashed.add(octopus)
            for nx, ny in self._neighbours(*octopus):
                self.energy[ny][nx] += 1
                if self.energy[ny][nx] > 9 and (nx, ny) not in flashed:
                    pending.append((nx, ny))
        return flashed

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        to_flash = []
        for y, row in enumerate(self.energy):
            for x in range(len(row)):
                row[x] += 1
                if row[x] > 9:
                    to_flash.append((x, y))

        flashed = self._flash_all(to_flash)
        for x, y in flashed:
            self.energy[y][x] = 0
        return len(flashed)

    def simulate(self, steps: int) -> int:
        """Total flashes over ``steps`` steps."""
        return sum(self.step() for _ in range(steps))

    def wait_for_sync(self) -> int:
        """First step on which every octopus flashes."""
        step = 0
        while True:
            step += 1
            if self.step() == GRID_SIZE * GRID_SIZE:
                return step


def parse_grid(lines: Sequence[str]) -> SquidGrid:
    """Parse up to ten rows of up to ten digits; missing cells are zero."""
    if len(lines) > GRID_SIZE:
        raise ValueError("too many rows")
    energy = [[0] * GRID_SIZE for _ in range(GRID_SIZE)]
    for row, line in zip(energy, lines):
        if len(line) > GRID_SIZE:
            raise ValueError(f"row too long: {line!r}")
        for x, char in enumerate(line):
            if not char.isdigit():
                raise ValueError(f"invalid energy level: {char!r}")
            row[x] = int(char)
    return SquidGrid(energy)


def part1(lines: Sequence[str]) -> int:
    return parse_grid(lines).simulate(100)


def part2(lines: Sequence[str]) -> int:
    return parse_grid(lines).wait_for_sync()