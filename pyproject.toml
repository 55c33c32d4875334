[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2021"
version = "0.1.0"
description = "Solutions to the 2021 Advent of Code puzzles, days 1 to 14, with an input fetcher and a scaffold generator for new days."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "aoc", "puzzles", "2021"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2021 = "aoc2021.cli:main"
aoc2021-generate = "aoc2021.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2021"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
