"""Submarine piloting commands."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Command:
    direction: Direction
    magnitude: int


def parse_command(text: str) -> Command:
    """Parse a line such as ``forward 5``; raise ValueError if malformed."""
    parts = text.split()
    if len(parts) < 2:
        raise ValueError(f"invalid command: {text!r}")
    raw_direction, raw_magnitude = parts[0], parts[1]
    try:
        magnitude = int(raw_magnitude)
        direction = Direction(raw_direction)
    except ValueError as exc:
        raise ValueError(f"invalid command: {text!r}") from exc
    return Command(direction, magnitude)


@dataclass
class Submarine:
    x: int = 0
    y: int = 0
    aim: int = 0

    def move(self, command: Command) -> None:
        """Apply a command using the plain interpretation."""
        match command.direction:
            case Direction.FORWARD:
                self.x += command.magnitude
            case Direction.DOWN:
                self.y += command.magnitude
            case Direction.UP:
                self.y -= command.magnitude

    def steer(self, command: Command) -> None:
        """Apply a command using the aim interpretation."""
        match command.direction:
            case Direction.FORWARD:
                self.x += command.magnitude
                self.y += command.magnitude * self.aim
            case Direction.DOWN:
                self.aim += command.magnitude
            case Direction.UP:
                self.aim -= command.magnitude


def part1(commands: Iterable[Command]) -> int:
    sub = Submarine()
    for command in commands:
        sub.move(command)
    return sub.x * sub.y


def part2(commands: Iterable[Command]) -> int:
    sub = Submarine()
    for command in commands:
        sub.steer(command)
    return sub.x * sub.y