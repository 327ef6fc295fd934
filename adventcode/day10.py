"""Pipe maze: trace the loop through the start tile and measure it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Point = tuple[int, int]

_PIPES: dict[str, tuple[Point, Point]] = {
    "|": ((-1, 0), (1, 0)),
    "-": ((0, -1), (0, 1)),
    "L": ((-1, 0), (0, 1)),
    "J": ((-1, 0), (0, -1)),
    "7": ((0, -1), (1, 0)),
    "F": ((0, 1), (1, 0)),
}


def _at(grid: Sequence[str], row: int, column: int) -> str:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column]
    return "."


def start_type(grid: Sequence[str], row: int, column: int) -> str:
    """Infer which pipe the start tile at (*row*, *column*) must be."""
    up = _at(grid, row - 1, column) in "|7F"
    down = _at(grid, row + 1, column) in "|LJ"
    left = _at(grid, row, column - 1) in "-LF"
    right = _at(grid, row, column + 1) in "-J7"
    if up and down:
        return "|"
    if left and right:
        return "-"
    if up and right:
        return "L"
    if up and left:
        return "J"
    if left and down:
        return "7"
    return "F"


def _find_start(grid: Sequence[str]) -> Point:
    for row, line in enumerate(grid):
        column = line.find("S")
        if column >= 0:
            return row, column
    raise ValueError("the maze has no start tile")


def _neighbours(pipe: str, point: Point) -> list[Point]:
    row, column = point
    return [(row + dr, column + dc) for dr, dc in _PIPES[pipe]]


def _loop(grid: Sequence[str]) -> list[Point]:
    start = _find_start(grid)
    previous = start
    current = _neighbours(start_type(grid, *start), start)[0]
    path = [start]
    while current != start:
        pipe = _at(grid, *current)
        if pipe not in _PIPES:
            raise ValueError(f"the loop is broken at {current}")
        ahead = _neighbours(pipe, current)
        if previous not in ahead:
            raise ValueError(f"pipe at {current} does not connect back to {previous}")
        path.append(current)
        previous, current = current, ahead[1] if ahead[0] == previous else ahead[0]
    return path


def part_a(lines: Iterable[str]) -> int:
    """Distance along the loop to the tile farthest from the start."""
    return len(_loop(list(lines))) // 2


def part_b(lines: Iterable[str]) -> int:
    """Number of tiles enclosed by the loop (shoelace area with Pick's theorem)."""
    loop = _loop(list(lines))
    area = sum(
        r1 * c2 - c1 * r2
        for (r1, c1), (r2, c2) in zip(loop, loop[1:] + loop[:1])
    )
    return abs(area) // 2 + 1 - len(loop) // 2