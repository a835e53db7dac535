[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2021"
version = "0.1.0"
description = "Solutions to the 2021 Advent of Code puzzles, days 1 to 17"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2021"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["advent2021"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
