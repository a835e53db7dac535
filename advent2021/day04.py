"""Giant squid bingo."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

GRID_SIZE = 5


class MalformedBingoCard(ValueError):
    """Raised when a bingo board cannot be parsed."""


@dataclass
class _Field:
    value: int = 0
    marked: bool = False

    def __str__(self) -> str:
        return f"[{self.value:>2}]" if self.marked else f" {self.value:>2} "


@dataclass
class BingoBoard:
    rows: list[list[_Field]]

    def __str__(self) -> str:
        return "".join("".join(str(f) for f in row) + "\n" for row in self.rows)

    def mark(self, value: int) -> None:
        """Mark the first field holding ``value``, if any."""
        for row in self.rows:
            for cell in row:
                if cell.value == value:
                    cell.marked = True
                    return

    def has_won(self) -> bool:
        """True if any full row or column is marked."""
        if any(all(cell.marked for cell in row) for row in self.rows):
            return True
        return any(all(cell.marked for cell in column) for column in zip(*self.rows))

    def score(self) -> int:
        """Sum of all unmarked values."""
        return sum(cell.value for row in self.rows for cell in row if not cell.marked)


def _parse_value(raw: str) -> int:
    if not raw.isdigit():
        raise MalformedBingoCard(f"invalid bingo value: {raw!r}")
    value = int(raw)
    if value > 255:
        raise MalformedBingoCard(f"bingo value out of range: {raw!r}")
    return value


def parse_board(text: str) -> BingoBoard:
    """Parse a 5x5 board; missing fields are left as unmarked zeros."""
    rows = [[_Field() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]
    lines = text.splitlines()
    if len(lines) > GRID_SIZE:
        raise MalformedBingoCard("too many rows")
    for row, line in zip(rows, lines):
        values = line.split()
        if len(values) > GRID_SIZE:
            raise MalformedBingoCard("too many columns")
        for cell, raw in zip(row, values):
            cell.value = _parse_value(raw)
    return BingoBoard(rows)


@dataclass
class BingoGame:
    drawn_numbers: list[int]
    boards: list[BingoBoard]
    currently_played: int = field(default=0)

    def _draws(self) -> Iterator[int]:
        while self.currently_played < len(self.drawn_numbers):
            value = self.drawn_numbers[self.currently_played]
            self.currently_played += 1
            yield value
        raise ValueError("ran out of values to draw")

    def _play_round(self, drawn: int) -> int | None:
        for board in self.boards:
            board.mark(drawn)
            if board.has_won():
                return board.score() * drawn
        return None

    def _play_round_with_removal(self, drawn: int) -> int | None:
        board_count = len(self.boards)
        to_remove = []
        for index in reversed(range(board_count)):
            board = self.boards[index]
            board.mark(drawn)
            if board.has_won():
                if board_count == 1:
                    return board.score() * drawn
                to_remove.append(index)
        for index in to_remove:
            del self.boards[index]
        return None

    def play(self) -> int:
        """Score of the first board to win."""
        for drawn in self._draws():
            score = self._play_round(drawn)
            if score is not None:
                return score
        raise ValueError("ran out of values to draw")

    def play_until_final_board(self) -> int:
        """Score of the last board to win."""
        for drawn in self._draws():
            score = self._play_round_with_removal(drawn)
            if score is not None:
                return score
        raise ValueError("ran out of values to draw")


def parse_game(groups: Sequence[str]) -> BingoGame:
    """Build a game from the drawn-number line followed by board blocks."""
    if len(groups) <= 2:
        raise ValueError("a game needs drawn numbers and at least two boards")
    try:
        drawn = [int(value) for value in groups[0].split(",")]
    except ValueError as exc:
        raise ValueError(f"invalid drawn numbers: {groups[0]!r}") from exc
    boards = [parse_board(group) for group in groups[1:]]
    return BingoGame(drawn, boards)


def part1(groups: Sequence[str]) -> int:
    return parse_game(groups).play()


def part2(groups: Sequence[str]) -> int:
    return parse_game(groups).play_until_final_board()