# adventcode

Solutions to the 2023 Advent of Code puzzles for days 1 to 11. Each day has
its own module. The `adventcode` command runs chosen days against sample and
puzzle input files.

## Installing

    pip install .

## Running

Pass the days to run as `--solutionNN` flags:

    adventcode --solution01
    adventcode --solution01 --solution02
    adventcode --partb --input --solution02
    adventcode --parta --sample --solution03

Options:

- `--solution01` … `--solution25` choose the days to run. Days run in
  ascending order.
- `--parta` and `--partb` choose which parts run. If you give neither, both
  run.
- `--sample` and `--input` choose which input files are used. If you give
  neither, both are used.

Unknown arguments are ignored. With no arguments at all, the command prints a
usage message and exits with status 1. If a run fails, for example because an
input file is missing or cannot be parsed, the command prints the error and
exits with status 1.

The command looks up input files under the current directory:

- `source/samples/SampleNN.input`
- `source/inputs/InputNN.input`

For every day, part and input file, the command prints the answer and the
time the solution took in nanoseconds.

Day 6 does not read its input files. It always solves the puzzle races that
are built into `adventcode.day06`.

## Using the modules

Each solved day is in `adventcode.day01` … `adventcode.day11`. Each module has
`part_a` and `part_b`, which take the puzzle lines and return the answer:

```python
from adventcode import day01

lines = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
print(day01.part_a(lines))  # 142
```

Malformed input raises `ValueError`.

Some days take other arguments or offer more functions:

- **Day 6:** `part_a` takes an iterable of `day06.Race` and `part_b` takes a
  single `Race`. `Race.wins()` counts the winning hold times.
  `day06.PUZZLE_RACES` and `day06.PUZZLE_RACE` hold the puzzle's values.
- **Day 11:** `part_b(lines, factor)` takes the expansion factor. It defaults
  to 1,000,000. `expand_grid` returns the image with empty rows and columns
  doubled.
- **Helpers on other days:**
  - `day01.spelled_digits`
  - `day02.parse_game`, with `CubeSet` and `Game`
  - `day04.parse_card` and `Card`
  - `day07.hand_type`, `day07.joker_hand_type` and `HandType`
  - `day08.parse_network`
  - `day09.extrapolate_next` and `day09.extrapolate_previous`
  - `day10.start_type`

The runner is in `adventcode.cli`:

- `parse_args(argv)` builds an `Arguments` selection.
- `run_solutions(arguments, root)` runs the selection against the input files
  under `root`. It returns `(day, part, path, answer)` tuples.
- `main(argv=None)` is the command's entry point.

`adventcode.scaffold` creates empty placeholder files for all 25 days under a
directory you choose:

- `generate_markdown_files(root)` writes `source/problems/ProblemNNA.md` and
  `ProblemNNB.md`.
- `generate_input_files(root)` writes `source/inputs/InputNN.input` and
  `source/samples/SampleNN.input`.

## What it does not do

- Days 12 to 25 have no solutions. They are handled by
  `adventcode.unsolved.solve`, which reads the input and always answers 0.
- Puzzle inputs are not downloaded. You place them in the directories listed
  above yourself.