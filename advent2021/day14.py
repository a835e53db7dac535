"""Extended polymerisation via pair insertion."""

from collections import Counter
from dataclasses import dataclass, field

Pair = tuple[str, str]


class MalformedRule(ValueError):
    """Raised when an insertion rule or the polymer description cannot be parsed."""


@dataclass(frozen=True)
class Rule:
    pair: Pair
    insertion: str

    def apply(self) -> tuple[Pair, Pair]:
        """The two pairs produced by inserting into ``pair``."""
        return (self.pair[0], self.insertion), (self.insertion, self.pair[1])


def parse_rule(text: str) -> Rule:
    """Parse a line such as ``CH -> B``."""
    parts = text.split(" -> ")
    if len(parts) < 2 or len(parts[0]) < 2 or not parts[1]:
        raise MalformedRule(f"invalid rule: {text!r}")
    return Rule((parts[0][0], parts[0][1]), parts[1][0])


@dataclass
class Polymer:
    front: str
    pairs: Counter[Pair] = field(default_factory=Counter)
    rules: list[Rule] = field(default_factory=list)

    def step(self) -> None:
        """Apply every insertion rule once, simultaneously."""
        pending = dict(self.pairs)
        new_pairs = Counter(self.pairs)
        for rule in self.rules:
            count = pending.pop(rule.pair, None)
            if count is None:
                continue
            left, right = rule.apply()
            new_pairs[rule.pair] -= count
            new_pairs[left] += count
            new_pairs[right] += count
        self.pairs = Counter({pair: n for pair, n in new_pairs.items() if n != 0})

    def apply_steps(self, count: int) -> None:
        for _ in range(count):
            self.step()

    def element_count(self) -> Counter[str]:
        """How often each element occurs in the polymer."""
        counts: Counter[str] = Counter()
        for (_, second), occurrences in self.pairs.items():
            counts[second] += occurrences
        counts[self.front] += 1
        return counts

    def max_frequency_difference(self) -> int:
        """Most common element count minus least common element count."""
        counts = self.element_count()
        return max(counts.values()) - min(counts.values())


def parse_polymer(text: str) -> Polymer:
    """Parse the template and the insertion rules, separated by a blank line."""
    sections = text.replace("\r\n", "\n").split("\n\n")
    if len(sections) < 2:
        raise MalformedRule("polymer needs a template and rules separated by a blank line")
    template = sections[0]
    pairs: Counter[Pair] = Counter(zip(template, template[1:]))
    front = template[0] if len(template) >= 2 else "Z"
    rules = [parse_rule(line) for line in sections[1].splitlines()]
    return Polymer(front, pairs, rules)


def part1(polymer: Polymer) -> int:
    polymer.apply_steps(10)
    return polymer.max_frequency_difference()


def part2(polymer: Polymer) -> int:
    polymer.apply_steps(40)
    return polymer.max_frequency_difference()