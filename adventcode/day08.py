"""Haunted wasteland: follow left/right instructions through a node network."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from itertools import cycle
from math import lcm

_NODE = re.compile(r"^\s*(\w+)\s*=\s*\(\s*(\w+)\s*,\s*(\w+)\s*\)\s*$")

START = "AAA"
END = "ZZZ"

Network = dict[str, tuple[str, str]]


def parse_network(lines: Iterable[str]) -> tuple[str, Network]:
    """Split the input into the instruction string and a map of node to (left, right)."""
    lines = list(lines)
    if not lines:
        raise ValueError("empty network description")
    instructions = lines[0].strip()
    if not instructions:
        raise ValueError("no instructions given")
    if any(step not in "LR" for step in instructions):
        raise ValueError(f"instructions may only hold L and R: {instructions!r}")

    nodes: Network = {}
    for line in lines[1:]:
        if not line.strip():
            continue
        match = _NODE.match(line)
        if match is None:
            raise ValueError(f"malformed node line: {line!r}")
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return instructions, nodes


def _steps(
    instructions: str,
    nodes: Network,
    start: str,
    done: Callable[[str], bool],
) -> int:
    node = start
    seen: set[tuple[str, int]] = set()
    steps = 0
    for position, step in cycle(enumerate(instructions)):
        if done(node):
            return steps
        state = (node, position)
        if state in seen:
            raise ValueError(f"walk from {start!r} loops without reaching its goal")
        seen.add(state)
        try:
            left, right = nodes[node]
        except KeyError:
            raise ValueError(f"unknown node {node!r}") from None
        node = left if step == "L" else right
        steps += 1
    raise ValueError("no instructions given")


def part_a(lines: Iterable[str]) -> int:
    """Steps needed to walk from ``AAA`` to ``ZZZ``."""
    instructions, nodes = parse_network(lines)
    if START not in nodes:
        raise ValueError(f"network has no {START} node")
    return _steps(instructions, nodes, START, lambda node: node == END)


def part_b(lines: Iterable[str]) -> int:
    """Steps until every walk from a node ending in ``A`` sits on one ending in ``Z``.

    Each walk is timed on its own and the results are combined by their
    least common multiple.
    """
    instructions, nodes = parse_network(lines)
    starts = [name for name in nodes if name.endswith("A")]
    if not starts:
        raise ValueError("network has no starting nodes")
    return lcm(
        *(
            _steps(instructions, nodes, start, lambda node: node.endswith("Z"))
            for start in starts
        )
    )