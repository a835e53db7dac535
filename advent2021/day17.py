"""Trick shot: launching a probe into a target area."""

from dataclasses import dataclass

_PREFIX = "target area: "


class MalformedTarget(ValueError):
    """Raised when the target description cannot be parsed."""


@dataclass(frozen=True)
class Target:
    """Inclusive coordinate ranges of the target area."""

    x_range: tuple[int, int]
    y_range: tuple[int, int]

    def contains(self, x: int, y: int) -> bool:
        return (
            self.x_range[0] <= x <= self.x_range[1]
            and self.y_range[0] <= y <= self.y_range[1]
        )

    def maximise_altitude(self) -> int:
        """Highest altitude a probe can reach while still hitting the target."""
        # The probe returns to y = 0 with velocity -(vy0 + 1), so the fastest
        # launch reaches the bottom of the target one step after crossing zero.
        vy0 = abs(self.y_range[0] + 1)

        def height(t: int) -> int:
            return vy0 * t - t * t // 2 + t // 2

        return max(height(vy0), height(vy0 + 1))

    def _hits(self, dx: int, dy: int) -> bool:
        x = y = 0
        while True:
            if self.contains(x, y):
                return True
            if x > self.x_range[1] or y < self.y_range[0]:
                return False
            x += dx
            y += dy
            dy -= 1
            if dx > 0:
                dx -= 1
            elif dx < 0:
                dx += 1


def _parse_range(raw: str, text: str) -> tuple[int, int]:
    _, sep, bounds = raw.partition("=")
    parts = bounds.split("..")
    if not sep or len(parts) != 2:
        raise MalformedTarget(f"invalid target: {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise MalformedTarget(f"invalid target: {text!r}") from None


def parse_target(text: str) -> Target:
    """Parse a line such as ``target area: x=20..30, y=-10..-5``."""
    if not text.startswith(_PREFIX):
        raise MalformedTarget(f"invalid target: {text!r}")
    ranges = text[len(_PREFIX):].split(", ")
    if len(ranges) < 2:
        raise MalformedTarget(f"invalid target: {text!r}")
    return Target(_parse_range(ranges[0], text), _parse_range(ranges[1], text))


def part1(target: Target) -> int:
    return target.maximise_altitude()


def part2(target: Target) -> int:
    """Number of distinct initial velocities that hit the target."""
    y_min = target.y_range[0]
    return sum(
        1
        for dx in range(target.x_range[1] * 2)
        for dy in range(y_min, abs(y_min))
        if target._hits(dx, dy)
    )