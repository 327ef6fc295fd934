"""Scratchcards: score cards and count the copies they win."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """A scratchcard with its winning numbers and the numbers it holds."""

    number: int
    winning: tuple[int, ...]
    numbers: tuple[int, ...]

    def matches(self) -> int:
        """Count pairs of a winning number and an equal held number."""
        return sum(self.numbers.count(winning) for winning in self.winning)

    def points(self) -> int:
        """One point for the first match, doubled for each further match."""
        matches = self.matches()
        return 2 ** (matches - 1) if matches else 0


def _ints(text: str, line: str) -> tuple[int, ...]:
    try:
        return tuple(int(token) for token in text.split())
    except ValueError:
        raise ValueError(f"malformed numbers in card line: {line!r}") from None


def parse_card(line: str) -> Card:
    """Parse a line such as ``Card 1: 41 48 | 83 86 48``."""
    header, colon, body = line.partition(":")
    winning, bar, held = body.partition("|")
    if not colon or not bar or " " not in header:
        raise ValueError(f"malformed card line: {line!r}")
    try:
        number = int(header[header.index(" "):])
    except ValueError:
        raise ValueError(f"malformed card number: {line!r}") from None
    return Card(number, _ints(winning, line), _ints(held, line))


def part_a(lines: Iterable[str]) -> int:
    """Sum the points of every card."""
    return sum(parse_card(line).points() for line in lines)


def part_b(lines: Iterable[str]) -> int:
    """Count all cards held once every won copy has been processed."""
    cards = [parse_card(line) for line in lines]
    copies = [1] * len(cards)
    for index, card in enumerate(cards):
        for won in range(index + 1, min(index + 1 + card.matches(), len(cards))):
            copies[won] += copies[index]
    return sum(copies)