"""Transparent origami: folding a sheet of dots."""

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

_DOT = "\u2588"
_BLANK = "\u2800"
_FOLD_PREFIX = "fold along "


class MalformedManual(ValueError):
    """Raised when the manual, one of its points or one of its folds cannot be parsed."""


class Axis(Enum):
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class Fold:
    axis: Axis
    at: int


def _parse_unsigned(raw: str, text: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise MalformedManual(f"invalid number in {text!r}")
    return int(raw)


def _parse_point(text: str) -> tuple[int, int]:
    parts = text.split(",")
    if len(parts) < 2:
        raise MalformedManual(f"invalid point: {text!r}")
    return _parse_unsigned(parts[0], text), _parse_unsigned(parts[1], text)


def parse_fold(text: str) -> Fold:
    """Parse a line such as ``fold along y=7``."""
    if not text.startswith(_FOLD_PREFIX):
        raise MalformedManual(f"invalid fold: {text!r}")
    parts = text[len(_FOLD_PREFIX):].split("=")
    if len(parts) < 2:
        raise MalformedManual(f"invalid fold: {text!r}")
    try:
        axis = Axis(parts[0])
    except ValueError:
        raise MalformedManual(f"invalid fold axis: {text!r}") from None
    return Fold(axis, _parse_unsigned(parts[1], text))


@dataclass
class Manual:
    points: set[tuple[int, int]] = field(default_factory=set)
    folds: deque[Fold] = field(default_factory=deque)

    def fold(self) -> bool:
        """Apply the next pending fold; return False if none is left."""
        if not self.folds:
            return False
        fold = self.folds.popleft()
        at = fold.at
        if fold.axis is Axis.Y:
            kept = {(x, y) for x, y in self.points if y < at}
            kept.update((x, 2 * at - y) for x, y in self.points if y > at)
        else:
            kept = {(x, y) for x, y in self.points if x < at}
            kept.update((2 * at - x, y) for x, y in self.points if x > at)
        self.points = kept
        return True

    def render(self) -> str:
        """Draw the dots, one line per row, preceded by an empty line."""
        if not self.points:
            raise ValueError("no points to render")
        max_x = max(x for x, _ in self.points)
        max_y = max(y for _, y in self.points)
        rows = [
            "".join(
                _DOT if (x, y) in self.points else _BLANK for x in range(max_x + 1)
            )
            for y in range(max_y + 1)
        ]
        return "\n".join(["", *rows])


def parse_manual(text: str) -> Manual:
    """Parse the dot list and the fold instructions, separated by a blank line."""
    sections = text.replace("\r\n", "\n").split("\n\n")
    if len(sections) < 2:
        raise MalformedManual("manual needs points and folds separated by a blank line")
    points = {_parse_point(line) for line in sections[0].splitlines()}
    folds = deque(parse_fold(line) for line in sections[1].splitlines())
    return Manual(points, folds)


def part1(manual: Manual) -> int:
    """Number of dots visible after the first fold."""
    manual.fold()
    return len(manual.points)


def part2(manual: Manual) -> str:
    """The code shown after all folds."""
    while manual.fold():
        pass
    return manual.render()