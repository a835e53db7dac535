"""Syntax scoring of navigation subsystem bracket lines."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum


class BracketType(Enum):
    SQUARE = "square"
    CURLY = "curly"
    ANGLE = "angle"
    PARENTHESES = "parentheses"

    @property
    def error_score(self) -> int:
        return _ERROR_SCORES[self]

    @property
    def completion_score(self) -> int:
        return _COMPLETION_SCORES[self]


_ERROR_SCORES = {
    BracketType.PARENTHESES: 3,
    BracketType.SQUARE: 57,
    BracketType.CURLY: 1197,
    BracketType.ANGLE: 25137,
}

_COMPLETION_SCORES = {
    BracketType.PARENTHESES: 1,
    BracketType.SQUARE: 2,
    BracketType.CURLY: 3,
    BracketType.ANGLE: 4,
}


@dataclass(frozen=True)
class Bracket:
    typ: BracketType
    opening: bool

    def inverse(self) -> "Bracket":
        """The bracket of the same type facing the other way."""
        return Bracket(self.typ, not self.opening)

    @property
    def error_score(self) -> int:
        return self.typ.error_score

    @property
    def completion_score(self) -> int:
        return self.typ.completion_score


_BRACKETS = {
    "(": Bracket(BracketType.PARENTHESES, True),
    ")": Bracket(BracketType.PARENTHESES, False),
    "[": Bracket(BracketType.SQUARE, True),
    "]": Bracket(BracketType.SQUARE, False),
    "{": Bracket(BracketType.CURLY, True),
    "}": Bracket(BracketType.CURLY, False),
    "<": Bracket(BracketType.ANGLE, True),
    ">": Bracket(BracketType.ANGLE, False),
}


class CorruptedLine(ValueError):
    """Raised when a closing bracket does not match the open chunk."""

    def __init__(self, bracket: Bracket) -> None:
        super().__init__(f"corrupted line: unexpected {bracket.typ.value} closing bracket")
        self.bracket = bracket


class IncompleteLine(ValueError):
    """Raised when a line ends with chunks still open."""


def parse_bracket(char: str) -> Bracket:
    """Turn a single character into a bracket; raise ValueError otherwise."""
    try:
        return _BRACKETS[char]
    except KeyError:
        raise ValueError(f"invalid bracket type found - {char}") from None


def validate_line(line: str) -> None:
    """Raise CorruptedLine or IncompleteLine if the line is not well formed."""
    stack: list[Bracket] = []
    for bracket in map(parse_bracket, line):
        if bracket.opening:
            stack.append(bracket)
            continue
        if not stack or stack.pop().inverse() != bracket:
            raise CorruptedLine(bracket)
    if stack:
        raise IncompleteLine(f"incomplete line: {line!r}")


def complete_line(line: str) -> list[Bracket]:
    """The closing brackets needed to finish an incomplete line."""
    stack: list[Bracket] = []
    for bracket in map(parse_bracket, line):
        if bracket.opening:
            stack.append(bracket)
        elif stack:
            stack.pop()
    return [bracket.inverse() for bracket in reversed(stack)]


def completion_score(brackets: Iterable[Bracket]) -> int:
    score = 0
    for bracket in brackets:
        score = score * 5 + bracket.completion_score
    return score


def _error_score(line: str) -> int:
    try:
        validate_line(line)
    except CorruptedLine as err:
        return err.bracket.error_score
    except IncompleteLine:
        return 0
    return 0


def _is_incomplete(line: str) -> bool:
    try:
        validate_line(line)
    except IncompleteLine:
        return True
    except CorruptedLine:
        return False
    return False


def part1(lines: Iterable[str]) -> int:
    """Total syntax error score of corrupted lines."""
    return sum(_error_score(line) for line in lines)


def part2(lines: Sequence[str]) -> int:
    """Middle completion score of the incomplete lines."""
    scores = sorted(
        completion_score(complete_line(line)) for line in lines if _is_incomplete(line)
    )
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]