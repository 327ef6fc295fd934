"""Camel cards: rank poker-like hands and total the winnings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from enum import IntEnum

_STRENGTH = "23456789TJQKA"
_JOKER_STRENGTH = "J23456789TQKA"


class HandType(IntEnum):
    """Hand categories from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _classify(counts: list[int]) -> HandType:
    counts = sorted(counts, reverse=True)
    top = counts[0] if counts else 0
    second = counts[1] if len(counts) > 1 else 0
    if top >= 5:
        return HandType.FIVE_OF_A_KIND
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3:
        return HandType.FULL_HOUSE if second >= 2 else HandType.THREE_OF_A_KIND
    if top == 2:
        return HandType.TWO_PAIRS if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def hand_type(cards: str) -> HandType:
    """Classify a hand with every card standing for itself."""
    return _classify(list(Counter(cards).values()))


def joker_hand_type(cards: str) -> HandType:
    """Classify a hand where each ``J`` joins whichever group helps most."""
    counts = Counter(cards)
    jokers = counts.pop("J", 0)
    groups = sorted(counts.values(), reverse=True)
    if groups:
        groups[0] += jokers
    else:
        groups = [jokers]
    return _classify(groups)


def _parse(lines: Iterable[str]) -> list[tuple[str, int]]:
    hands = []
    for line in lines:
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"malformed hand line: {line!r}")
        cards, bid = fields
        if any(card not in _STRENGTH for card in cards):
            raise ValueError(f"unknown card in hand {cards!r}")
        try:
            hands.append((cards, int(bid)))
        except ValueError:
            raise ValueError(f"malformed bid in line: {line!r}") from None
    return hands


def _winnings(
    lines: Iterable[str],
    classify: Callable[[str], HandType],
    strength: str,
) -> int:
    hands = sorted(
        _parse(lines),
        key=lambda hand: (classify(hand[0]), [strength.index(c) for c in hand[0]]),
    )
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def part_a(lines: Iterable[str]) -> int:
    """Total winnings: each bid times its hand's rank."""
    return _winnings(lines, hand_type, _STRENGTH)


def part_b(lines: Iterable[str]) -> int:
    """Total winnings with ``J`` as a wildcard that is the weakest card alone."""
    return _winnings(lines, joker_hand_type, _JOKER_STRENGTH)