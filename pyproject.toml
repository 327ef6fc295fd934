[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventcode"
version = "0.1.0"
description = "Solutions to the 2023 Advent of Code puzzles, with a small runner for sample and puzzle inputs"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2023"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
adventcode = "adventcode.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventcode"]

[tool.pytest.ini_options]
addopts = "-ra"
