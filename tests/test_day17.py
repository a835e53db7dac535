import pytest

from advent2021.day17 import MalformedTarget, Target, parse_target, part1, part2

SAMPLE = "target area: x=20..30, y=-10..-5"


def test_part1_sample_input():
    assert part1(parse_target(SAMPLE)) == 45


def test_part2_sample_input():
    assert part2(parse_target(SAMPLE)) == 112


def test_parse_target():
    assert parse_target(SAMPLE) == Target((20, 30), (-10, -5))


@pytest.mark.parametrize(
    "text",
    [
        "x=20..30, y=-10..-5",
        "target area: x=20..30",
        "target area: x=20-30, y=-10..-5",
        "target area: x=a..30, y=-10..-5",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(MalformedTarget):
        parse_target(text)


def test_contains_is_inclusive():
    target = parse_target(SAMPLE)
    assert target.contains(20, -10)
    assert target.contains(30, -5)
    assert not target.contains(31, -5)
    assert not target.contains(25, -4)


def test_maximise_altitude_method():
    assert parse_target(SAMPLE).maximise_altitude() == 45