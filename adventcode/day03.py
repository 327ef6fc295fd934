"""Gear ratios: find part numbers and gears in an engine schematic."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_NUMBER = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _PartNumber:
    row: int
    start: int
    end: int
    value: int

    def touches(self, row: int, column: int) -> bool:
        return abs(self.row - row) <= 1 and self.start - 1 <= column <= self.end + 1


def _is_symbol(character: str) -> bool:
    return not ("0" <= character <= "9") and character != "."


def _numbers(grid: list[str]) -> Iterator[_PartNumber]:
    for row, line in enumerate(grid):
        for match in _NUMBER.finditer(line):
            yield _PartNumber(row, match.start(), match.end() - 1, int(match.group()))


def _surroundings(grid: list[str], number: _PartNumber) -> Iterator[str]:
    for row in range(max(number.row - 1, 0), min(number.row + 2, len(grid))):
        line = grid[row]
        yield from line[max(number.start - 1, 0):number.end + 2]


def part_a(lines: Iterable[str]) -> int:
    """Sum every number that touches a symbol, diagonals included."""
    grid = list(lines)
    return sum(
        number.value
        for number in _numbers(grid)
        if any(map(_is_symbol, _surroundings(grid, number)))
    )


def part_b(lines: Iterable[str]) -> int:
    """Sum the products of the numbers around each ``*`` touching exactly two."""
    grid = list(lines)
    numbers = list(_numbers(grid))
    total = 0
    for row, line in enumerate(grid):
        for column, character in enumerate(line):
            if character != "*":
                continue
            adjacent = [n.value for n in numbers if n.touches(row, column)]
            if len(adjacent) == 2:
                total += adjacent[0] * adjacent[1]
    return total