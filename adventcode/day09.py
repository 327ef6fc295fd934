"""Mirage maintenance: extrapolate sequences through repeated differences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce


def _difference_rows(values: Sequence[int]) -> list[list[int]]:
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")
    rows = [list(values)]
    while True:
        row = rows[-1]
        differences = [after - before for before, after in zip(row, row[1:])]
        rows.append(differences)
        if all(value == 0 for value in differences):
            return [row for row in rows if row]


def extrapolate_next(values: Sequence[int]) -> int:
    """Predict the value that follows *values*."""
    return sum(row[-1] for row in _difference_rows(values))


def extrapolate_previous(values: Sequence[int]) -> int:
    """Predict the value that comes before *values*."""
    return reduce(
        lambda prediction, row: row[0] - prediction,
        reversed(_difference_rows(values)),
        0,
    )


def _parse(lines: Iterable[str]) -> list[list[int]]:
    sequences = []
    for line in lines:
        if not line.strip():
            continue
        try:
            sequences.append([int(token) for token in line.split()])
        except ValueError:
            raise ValueError(f"malformed sequence line: {line!r}") from None
    return sequences


def part_a(lines: Iterable[str]) -> int:
    """Sum of the next value of every sequence."""
    return sum(map(extrapolate_next, _parse(lines)))


def part_b(lines: Iterable[str]) -> int:
    """Sum of the previous value of every sequence."""
    return sum(map(extrapolate_previous, _parse(lines)))