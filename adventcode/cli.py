"""Command-line runner that executes the selected puzzle solutions."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from adventcode import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    unsolved,
)

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

TITLE = "Advent of Code"
YEAR = "2023"
STAR = f"{YELLOW} * {RESET}"
TOTAL_DAYS = 25

SAMPLES_DIR = Path("source") / "samples"
INPUTS_DIR = Path("source") / "inputs"

_FLAGS = ("--sample", "--input", "--parta", "--partb")
_SOLUTION_PREFIX = "--solution"
_SOLUTION_FLAGS = {
    f"{_SOLUTION_PREFIX}{day:02d}": day for day in range(1, TOTAL_DAYS + 1)
}

Solver = Callable[[Path], int]


class UsageError(ValueError):
    """Raised when no arguments select anything to run."""


@dataclass(frozen=True)
class Arguments:
    """Which days, parts and input kinds to run."""

    samples: bool = True
    inputs: bool = True
    part_a: bool = True
    part_b: bool = True
    days: tuple[int, ...] = ()

    @property
    def flags(self) -> list[str]:
        """The arguments in the order they are reported."""
        chosen = [
            flag
            for flag, enabled in (
                ("--input", self.inputs),
                ("--sample", self.samples),
                ("--parta", self.part_a),
                ("--partb", self.part_b),
            )
            if enabled
        ]
        chosen.extend(f"{_SOLUTION_PREFIX}{day:02d}" for day in self.days)
        return chosen


def _read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _from_lines(solve: Callable[[Iterable[str]], int]) -> Solver:
    def run(path: Path) -> int:
        return solve(_read_lines(path))

    return run


def _races(path: Path) -> int:
    return day06.part_a(day06.PUZZLE_RACES)


def _long_race(path: Path) -> int:
    return day06.part_b(day06.PUZZLE_RACE)


_SOLVED: dict[int, tuple[Solver, Solver]] = {
    1: (_from_lines(day01.part_a), _from_lines(day01.part_b)),
    2: (_from_lines(day02.part_a), _from_lines(day02.part_b)),
    3: (_from_lines(day03.part_a), _from_lines(day03.part_b)),
    4: (_from_lines(day04.part_a), _from_lines(day04.part_b)),
    5: (_from_lines(day05.part_a), _from_lines(day05.part_b)),
    6: (_races, _long_race),
    7: (_from_lines(day07.part_a), _from_lines(day07.part_b)),
    8: (_from_lines(day08.part_a), _from_lines(day08.part_b)),
    9: (_from_lines(day09.part_a), _from_lines(day09.part_b)),
    10: (_from_lines(day10.part_a), _from_lines(day10.part_b)),
    11: (_from_lines(day11.part_a), _from_lines(day11.part_b)),
}

_UNSOLVED = (_from_lines(unsolved.solve), _from_lines(unsolved.solve))


def _solvers(day: int) -> tuple[Solver, Solver]:
    return _SOLVED.get(day, _UNSOLVED)


def parse_args(argv: Sequence[str]) -> Arguments:
    """Build the run selection from command-line arguments.

    Unknown arguments are ignored. With no part chosen both parts run, and
    with no input kind chosen both samples and inputs are used.
    """
    if not argv:
        raise UsageError("no solutions specified for execution")
    given = set(argv)
    days = sorted(_SOLUTION_FLAGS[arg] for arg in argv if arg in _SOLUTION_FLAGS)
    samples = "--sample" in given
    inputs = "--input" in given
    part_a = "--parta" in given
    part_b = "--partb" in given
    if not part_a and not part_b:
        part_a = part_b = True
    if not samples and not inputs:
        samples = inputs = True
    return Arguments(samples, inputs, part_a, part_b, tuple(days))


def _input_paths(arguments: Arguments, root: Path, day: int) -> list[Path]:
    paths = []
    if arguments.samples:
        paths.append(root / SAMPLES_DIR / f"Sample{day:02d}.input")
    if arguments.inputs:
        paths.append(root / INPUTS_DIR / f"Input{day:02d}.input")
    return paths


def run_solutions(
    arguments: Arguments, root: str | Path = "."
) -> list[tuple[int, str, Path, int]]:
    """Run every selected day and part, printing each answer and its timing.

    Returns ``(day, part, input path, answer)`` for each run, in run order.
    """
    root = Path(root)
    results = []
    for day in arguments.days:
        solve_a, solve_b = _solvers(day)
        parts = [
            (name, solver)
            for name, solver, enabled in (
                ("A", solve_a, arguments.part_a),
                ("B", solve_b, arguments.part_b),
            )
            if enabled
        ]
        for part, solver in parts:
            print(
                f"{STAR}Running solution {CYAN}{day}{RESET}, "
                f"part {MAGENTA}{part}{RESET}\n"
            )
            for path in _input_paths(arguments, root, day):
                print(f"\t\tUsing input file: {CYAN}{path}{RESET}\n")
                start = time.perf_counter_ns()
                answer = solver(path)
                elapsed = time.perf_counter_ns() - start
                print(f"\t\t{GREEN}\t\t{answer}{RESET}")
                print(f"\t\tSolution executed in: {YELLOW}{elapsed} ns{RESET}\n")
                results.append((day, part, path, answer))
    return results


def _print_title() -> None:
    letters = "".join(
        f"{GREEN if index % 2 == 0 else RED}{character}{RESET}"
        for index, character in enumerate(TITLE)
    )
    print(f"{STAR}{letters}{STAR}{YELLOW}{YEAR}{RESET}\n")


def _print_arguments(arguments: Arguments) -> None:
    flags = "".join(f"  {flag}" for flag in arguments.flags)
    print(f"{STAR}Command line arguments: \n\n{GREEN}{flags}{RESET}\n")


def _print_usage() -> None:
    print(
        f"{RED}\nNo Solutions specified for execution. Pass desired Solutions "
        f"as command-line arguments. Sample usage:\n{RESET}"
    )
    for example in (
        "--solution04",
        "--solution01 --solution02",
        "--partb --input --solution02",
        "--parta --sample --solution03",
    ):
        print(f"  adventcode {GREEN}{example}{RESET}")
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: print the banner, then run what the arguments select."""
    if argv is None:
        argv = sys.argv[1:]
    _print_title()
    try:
        arguments = parse_args(argv)
    except UsageError:
        _print_usage()
        return 1
    _print_arguments(arguments)
    try:
        run_solutions(arguments, Path.cwd())
    except (OSError, ValueError) as error:
        print(f"{RED}{error}{RESET}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())