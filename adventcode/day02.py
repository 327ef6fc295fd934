"""Cube conundrum: decide which games fit a bag and how many cubes each needs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from math import prod

_COLOURS = ("red", "green", "blue")


@dataclass(frozen=True)
class CubeSet:
    """One handful of cubes drawn from the bag."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def fits(self, loadout: CubeSet) -> bool:
        return (
            self.red <= loadout.red
            and self.green <= loadout.green
            and self.blue <= loadout.blue
        )


@dataclass(frozen=True)
class Game:
    """A numbered game and the handfuls revealed during it."""

    number: int
    sets: list[CubeSet] = field(default_factory=list)


LOADOUT = CubeSet(red=12, green=13, blue=14)


def parse_game(line: str) -> Game:
    """Parse a line such as ``Game 3: 1 red, 2 blue; 4 green``."""
    header, colon, body = line.partition(":")
    if not colon or " " not in header:
        raise ValueError(f"malformed game line: {line!r}")
    try:
        number = int(header[header.index(" "):])
    except ValueError:
        raise ValueError(f"malformed game number: {line!r}") from None

    sets = []
    for chunk in body.split(";"):
        counts: dict[str, int] = {}
        for item in chunk.split(","):
            item = item.strip()
            if not item:
                continue
            parts = item.split()
            if len(parts) != 2 or parts[1] not in _COLOURS:
                raise ValueError(f"malformed cube count {item!r} in {line!r}")
            try:
                counts[parts[1]] = int(parts[0])
            except ValueError:
                raise ValueError(f"malformed cube count {item!r} in {line!r}") from None
        sets.append(CubeSet(**counts))
    return Game(number, sets)


def part_a(lines: Iterable[str]) -> int:
    """Sum the numbers of games possible with the standard loadout."""
    return sum(
        game.number
        for game in map(parse_game, lines)
        if all(cube_set.fits(LOADOUT) for cube_set in game.sets)
    )


def part_b(lines: Iterable[str]) -> int:
    """Sum the power of the minimum cube set needed for each game."""
    total = 0
    for game in map(parse_game, lines):
        total += prod(
            max((getattr(cube_set, colour) for cube_set in game.sets), default=0)
            for colour in _COLOURS
        )
    return total