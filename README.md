# advent2021

Solutions to the first seventeen days of the 2021 Advent of Code puzzles,
written as a plain Python library with no runtime dependencies.

Every day lives in its own module, `advent2021.day01` through
`advent2021.day17`, and each module exposes `part1` and `part2`.

## Installation

```
pip install .
```

## What each day expects

| Module  | `part1` / `part2` take                         | Helpers                                   |
|---------|------------------------------------------------|-------------------------------------------|
| `day01` | a sequence of depths (ints)                    |                                           |
| `day02` | `Command` objects                              | `parse_command`, `Submarine`              |
| `day03` | lines of binary digits                         | `most_common_bit`, `sieve`                |
| `day04` | groups: drawn-number line, then board blocks   | `parse_game`, `parse_board`               |
| `day05` | `VentLine` objects                             | `parse_vent_line`                         |
| `day06` | fish timers (ints)                             | `simulate(timers, days)`                  |
| `day07` | crab positions (ints)                          |                                           |
| `day08` | display entry lines                            | `determine_substitutions`, `normalise_digit` |
| `day09` | rows of digits                                 | `parse_height_map`                        |
| `day10` | bracket lines                                  | `validate_line`, `complete_line`          |
| `day11` | rows of digits                                 | `parse_grid`                              |
| `day12` | edges as `(a, b)` tuples                       | `parse_edge`, `build_graph`               |
| `day13` | a `Manual`                                     | `parse_manual`, `parse_fold`              |
| `day14` | a `Polymer`                                    | `parse_polymer`, `parse_rule`             |
| `day15` | a `RiskLevelMap`                               | `parse_risk_map`                          |
| `day16` | a `Packet`                                     | `parse_packet`                            |
| `day17` | a `Target`                                     | `parse_target`                            |

The `part1` and `part2` functions of days 13, 14 and 15 change the object they
are given (folding, stepping or expanding it), so parse the input afresh for
each part. Day 13's `part2` returns the folded sheet drawn as a string of
block characters, one line per row, starting with an empty line.

## Usage

```python
from advent2021 import day01, day03

depths = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
print(day01.part1(depths))  # 7
print(day01.part2(depths))  # 5

report = ["00100", "11110", "10110", "10111", "10101", "01111",
          "00111", "11100", "10000", "11001", "00010", "01010"]
print(day03.part1(report))  # 198
```

Days with a structured input provide a parser:

```python
from advent2021 import day02, day16, day17

commands = [day02.parse_command(line) for line in ["forward 5", "down 5", "forward 8"]]
print(day02.part1(commands))  # 65

packet = day16.parse_packet("C200B40A82")
print(day16.part2(packet))  # 3

target = day17.parse_target("target area: x=20..30, y=-10..-5")
print(day17.part1(target))  # 45
```

Reading your own puzzle input is left to you, for example:

```python
from pathlib import Path
from advent2021 import day01

depths = [int(line) for line in Path("input").read_text().split()]
print(day01.part1(depths), day01.part2(depths))
```

## Errors

Malformed input raises `ValueError`. Several days raise a subclass of it
named after what was wrong: `MalformedBingoCard` (day 4), `MalformedVentLine`
(day 5), `MalformedEdge` (day 12), `MalformedManual` (day 13),
`MalformedRule` (day 14), `MalformedPacket` (day 16) and `MalformedTarget`
(day 17). Day 10's `validate_line` raises `CorruptedLine` or
`IncompleteLine`, both also subclasses of `ValueError`.

## What it does not do

There is no command-line program: the package does not find, download or
read puzzle input files, and does not print answers. Load the input yourself
and call the functions above.

## Running the tests

```
pip install .[test]
pytest
```