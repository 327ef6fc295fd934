"""Trebuchet calibration: recover two-digit values from noisy lines."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = "0123456789"
_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _calibration_value(digits: list[int], line: str) -> int:
    if not digits:
        raise ValueError(f"no digits found in line {line!r}")
    return digits[0] * 10 + digits[-1]


def spelled_digits(line: str) -> list[int]:
    """Return the digits of *line*, reading spelled-out words as digits too.

    The last letter of a matched word is kept, so overlapping words such as
    ``eightwo`` yield both digits.
    """
    digits: list[int] = []
    window = ""
    for character in line:
        if character in _DIGITS:
            digits.append(int(character))
            window = character
        else:
            window += character
        for value, word in enumerate(_WORDS, start=1):
            if word in window:
                digits.append(value)
                window = character
    return digits


def part_a(lines: Iterable[str]) -> int:
    """Sum the values formed by the first and last numeric digit of each line."""
    return sum(
        _calibration_value([int(ch) for ch in line if ch in _DIGITS], line)
        for line in lines
    )


def part_b(lines: Iterable[str]) -> int:
    """Sum the calibration values, counting spelled-out digits as well."""
    return sum(_calibration_value(spelled_digits(line), line) for line in lines)