"""Cosmic expansion: sum galaxy distances after empty rows and columns grow."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import combinations

Point = tuple[int, int]

DEFAULT_FACTOR = 1_000_000


def _rectangular(grid: Sequence[str]) -> int:
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError("every row of the image must have the same width")
    return widths.pop() if widths else 0


def expand_grid(grid: Iterable[str]) -> list[str]:
    """Double every row and every column that holds nothing but ``.``."""
    grid = list(grid)
    width = _rectangular(grid)
    empty_columns = {
        column for column in range(width) if all(row[column] == "." for row in grid)
    }
    expanded = []
    for row in grid:
        wide = "".join(
            character * 2 if column in empty_columns else character
            for column, character in enumerate(row)
        )
        expanded.append(wide)
        if set(row) <= {"."}:
            expanded.append(wide)
    return expanded


def _galaxies(grid: Sequence[str]) -> list[Point]:
    return [
        (row, column)
        for row, line in enumerate(grid)
        for column, character in enumerate(line)
        if character == "#"
    ]


def _distance_sum(points: Sequence[Point]) -> int:
    return sum(
        abs(r1 - r2) + abs(c1 - c2) for (r1, c1), (r2, c2) in combinations(points, 2)
    )


def part_a(lines: Iterable[str]) -> int:
    """Sum of Manhattan distances between every pair of galaxies, space doubled."""
    return _distance_sum(_galaxies(expand_grid(lines)))


def part_b(lines: Iterable[str], factor: int = DEFAULT_FACTOR) -> int:
    """Sum of pairwise distances when each empty row and column is *factor* wide."""
    if factor < 1:
        raise ValueError(f"expansion factor must be at least 1, got {factor}")
    grid = list(lines)
    width = _rectangular(grid)
    empty_rows = [row for row, line in enumerate(grid) if "#" not in line]
    empty_columns = [
        column for column in range(width) if all(line[column] != "#" for line in grid)
    ]
    growth = factor - 1
    points = [
        (
            row + growth * bisect_left(empty_rows, row),
            column + growth * bisect_left(empty_columns, column),
        )
        for row, column in _galaxies(grid)
    ]
    return _distance_sum(points)