"""Seed almanac: push seeds and seed ranges through a chain of maps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class _Rule:
    destination: int
    source: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source + self.length


def _ints(text: str, line: str) -> list[int]:
    try:
        return [int(token) for token in text.split()]
    except ValueError:
        raise ValueError(f"malformed numbers in almanac line: {line!r}") from None


def _parse_almanac(lines: list[str]) -> tuple[list[int], list[list[_Rule]]]:
    if not lines:
        raise ValueError("empty almanac")
    _, colon, rest = lines[0].partition(":")
    if not colon:
        raise ValueError(f"malformed seeds line: {lines[0]!r}")
    seeds = _ints(rest, lines[0])

    maps: list[list[_Rule]] = []
    current: list[_Rule] | None = None
    for line in lines[1:]:
        if not line.strip():
            continue
        if "map" in line:
            current = []
            maps.append(current)
            continue
        numbers = _ints(line, line)
        if current is None or len(numbers) != 3:
            raise ValueError(f"unexpected almanac line: {line!r}")
        destination, source, length = numbers
        current.append(_Rule(destination, source, length))
    return seeds, maps


def _convert(rules: list[_Rule], value: int) -> int:
    for rule in rules:
        if rule.source <= value <= rule.source_end:
            return rule.destination + (value - rule.source)
    return value


def _map_range(rules: list[_Rule], start: int, length: int) -> Iterator[tuple[int, int]]:
    pending = [(start, length)]
    while pending:
        first, size = pending.pop()
        end = first + size
        for rule in reversed(rules):
            low = max(first, rule.source)
            high = min(end, rule.source_end)
            if low >= high:
                continue
            if low > first:
                pending.append((first, low - first))
            if end > high:
                pending.append((high, end - high))
            yield rule.destination + (low - rule.source), high - low
            break
        else:
            yield first, size


def part_a(lines: Iterable[str]) -> int:
    """Lowest location reached by any listed seed.

    A rule covers its source start up to and including start plus length.
    """
    seeds, maps = _parse_almanac(list(lines))
    if not seeds:
        raise ValueError("no seeds listed")
    locations = []
    for seed in seeds:
        for rules in maps:
            seed = _convert(rules, seed)
        locations.append(seed)
    return min(locations)


def part_b(lines: Iterable[str]) -> int:
    """Lowest location reached by any seed in the listed (start, length) pairs."""
    lines = list(lines)
    if len(lines) < 2 or lines[1].strip():
        raise ValueError("the seeds line must be followed by a blank line")
    seeds, maps = _parse_almanac(lines)
    numbers = iter(seeds)
    ranges = list(zip(numbers, numbers))
    if not ranges:
        raise ValueError("no seed ranges listed")
    for rules in maps:
        ranges = [
            mapped
            for start, length in ranges
            for mapped in _map_range(rules, start, length)
        ]
    return min(start for start, _ in ranges)