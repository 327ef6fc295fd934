"""Boat races: count the button hold times that beat each record."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from math import isqrt, prod


@dataclass(frozen=True)
class Race:
    """A race lasting ``time`` milliseconds with a ``record`` distance."""

    time: int
    record: int

    def wins(self) -> int:
        """Count hold times from 0 to ``time`` that travel beyond the record."""
        time, record = self.time, self.record
        if time < 0:
            return 0
        discriminant = time * time - 4 * record
        if discriminant < 0:
            return 0
        hold = max(0, (time - isqrt(discriminant) - 1) // 2)
        while 2 * hold <= time and hold * (time - hold) <= record:
            hold += 1
        if 2 * hold > time:
            return 0
        return time - 2 * hold + 1


PUZZLE_RACES = (Race(48, 296), Race(93, 1928), Race(85, 1236), Race(95, 1391))
PUZZLE_RACE = Race(48938595, 296192812361391)


def part_a(races: Iterable[Race]) -> int:
    """Multiply together the number of ways to win each race."""
    return prod(race.wins() for race in races)


def part_b(race: Race) -> int:
    """Number of ways to win a single long race."""
    return race.wins()