import pytest

from advent2021.day04 import (
    MalformedBingoCard,
    parse_board,
    parse_game,
    part1,
    part2,
)

SAMPLE = [
    "7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1",
    "22 13 17 11  0\n8  2 23  4 24\n21  9 14 16  7\n6 10  3 18  5\n1 12 20 15 19",
    "3 15  0  2 22\n9 18 13 17  5\n19  8  7 25 23\n20 11 10 24  4\n14 21 16 12  6",
    "14 21 17 24  4\n10 16 15  9 19\n18  8 23 26 20\n22 11 13  6  5\n2  0 12  3  7",
]


def test_part1_sample_input():
    assert part1(SAMPLE) == 4512


def test_part2_sample_input():
    assert part2(SAMPLE) == 1924


def test_board_row_win_and_score():
    board = parse_board(SAMPLE[1])
    assert board.score() == 300
    for value in (22, 13, 17, 11):
        board.mark(value)
    assert not board.has_won()
    board.mark(0)
    assert board.has_won()
    assert board.score() == 300 - (22 + 13 + 17 + 11 + 0)


def test_board_column_win():
    board = parse_board(SAMPLE[1])
    for value in (13, 2, 9, 10, 12):
        board.mark(value)
    assert board.has_won()


def test_board_display():
    board = parse_board(SAMPLE[1])
    board.mark(22)
    assert str(board).splitlines()[0] == "[22] 13  17  11   0 "


def test_malformed_board():
    with pytest.raises(MalformedBingoCard):
        parse_board("1 2 x 4 5")


def test_too_few_groups():
    with pytest.raises(ValueError):
        parse_game(SAMPLE[:2])


def test_running_out_of_numbers():
    game = parse_game(["1,2"] + SAMPLE[1:])
    with pytest.raises(ValueError):
        game.play()