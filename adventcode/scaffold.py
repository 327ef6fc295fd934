"""Create the empty problem, input and sample files for every puzzle day."""

from __future__ import annotations

from pathlib import Path

TOTAL_DAYS = 25
PARTS = ("A", "B")

PROBLEMS_DIR = Path("source") / "problems"
INPUTS_DIR = Path("source") / "inputs"
SAMPLES_DIR = Path("source") / "samples"

_EMPTY = "\n"


def _write_empty(path: Path) -> Path:
    path.write_text(_EMPTY, encoding="utf-8")
    return path


def generate_markdown_files(root: str | Path = ".") -> list[Path]:
    """Write an empty ``ProblemNNX.md`` for each day and part under *root*."""
    directory = Path(root) / PROBLEMS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return [
        _write_empty(directory / f"Problem{day:02d}{part}.md")
        for day in range(1, TOTAL_DAYS + 1)
        for part in PARTS
    ]


def generate_input_files(root: str | Path = ".") -> list[Path]:
    """Write an empty input and sample file for each day under *root*."""
    inputs = Path(root) / INPUTS_DIR
    samples = Path(root) / SAMPLES_DIR
    inputs.mkdir(parents=True, exist_ok=True)
    samples.mkdir(parents=True, exist_ok=True)
    created = []
    for day in range(1, TOTAL_DAYS + 1):
        created.append(_write_empty(inputs / f"Input{day:02d}.input"))
        created.append(_write_empty(samples / f"Sample{day:02d}.input"))
    return created