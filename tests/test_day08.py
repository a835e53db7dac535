import pytest

from advent2021.day08 import (
    determine_substitutions,
    normalise_digit,
    part1,
    part2,
    split_into_pattern_and_display,
)

SAMPLE = [
    "be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe",
    "edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc",
    "fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg",
    "fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb",
    "aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea",
    "fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb",
    "dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe",
    "bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef",
    "egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb",
    "gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce",
]

SINGLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)


def test_part1_sample_input():
    assert part1(SAMPLE) == 26


def test_part2_sample_input():
    assert part2(SAMPLE) == 61229


def test_part2_single_entry():
    assert part2([SINGLE]) == 5353


def test_determine_substitutions():
    signal, _ = split_into_pattern_and_display(SINGLE)
    expected = {
        "cagedb": 0,
        "ab": 1,
        "gcdfa": 2,
        "fbcad": 3,
        "eafb": 4,
        "cdfbe": 5,
        "cdfgeb": 6,
        "dab": 7,
        "acedgfb": 8,
        "cefabd": 9,
    }
    result = determine_substitutions(signal)
    assert result == {normalise_digit(k): v for k, v in expected.items()}


def test_normalise_digit():
    assert normalise_digit("gfcba") == "abcfg"


def test_split():
    patterns, display = split_into_pattern_and_display("ab cd | ef gh ij")
    assert patterns == ["ab", "cd"]
    assert display == ["ef", "gh", "ij"]


def test_split_without_separator():
    with pytest.raises(ValueError):
        split_into_pattern_and_display("ab cd ef")


def test_missing_unique_digit():
    with pytest.raises(ValueError):
        determine_substitutions(["abc", "abcd", "abcdefg"])