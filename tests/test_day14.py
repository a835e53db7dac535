import pytest

from advent2021.day14 import (
    MalformedRule,
    Rule,
    parse_polymer,
    parse_rule,
    part1,
    part2,
)

SAMPLE = """NNCB

CH -> B
HH -> N
CB -> H
NH -> C
HB -> C
HC -> B
HN -> C
NN -> C
BH -> H
NC -> B
NB -> B
BN -> B
BB -> N
BC -> B
CC -> N
CN -> C"""


def test_part1_sample_input():
    assert part1(parse_polymer(SAMPLE)) == 1588


def test_part2_sample_input():
    assert part2(parse_polymer(SAMPLE)) == 2188189693529


def test_parse_rule():
    assert parse_rule("CH -> B") == Rule(("C", "H"), "B")


def test_rule_apply():
    assert Rule(("C", "H"), "B").apply() == (("C", "B"), ("B", "H"))


@pytest.mark.parametrize("text", ["CH B", "C -> B", "CH -> "])
def test_parse_rule_rejects_malformed(text):
    with pytest.raises(MalformedRule):
        parse_rule(text)


def test_parse_polymer_requires_rules():
    with pytest.raises(MalformedRule):
        parse_polymer("NNCB")


def test_initial_element_count():
    polymer = parse_polymer(SAMPLE)
    assert polymer.front == "N"
    assert dict(polymer.element_count()) == {"N": 2, "C": 1, "B": 1}


def test_one_step_element_count():
    # NNCB becomes NCNBCHB after one step
    polymer = parse_polymer(SAMPLE)
    polymer.step()
    assert dict(polymer.element_count()) == {"N": 2, "C": 2, "B": 2, "H": 1}


def test_length_after_steps():
    # the sample polymer has length 3073 after 10 steps
    polymer = parse_polymer(SAMPLE)
    polymer.apply_steps(10)
    assert sum(polymer.element_count().values()) == 3073