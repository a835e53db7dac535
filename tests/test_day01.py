import pytest

from advent2021.day01 import part1, part2

SAMPLE = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]


def test_part1_sample_input():
    assert part1(SAMPLE) == 7


def test_part2_sample_input():
    assert part2(SAMPLE) == 5


@pytest.mark.parametrize("depths", [[], [5], [5, 4, 3]])
def test_part1_no_increases(depths):
    assert part1(depths) == 0


def test_part2_too_short_for_two_windows():
    assert part2([1, 2, 3]) == 0


def test_part2_single_increase():
    assert part2([1, 1, 1, 2]) == 1