"""Linen layout: which designs can be built from the available towel patterns."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def parse(text: str) -> tuple[list[str], list[str]]:
    """Towel patterns from the first line, then one design per non-empty line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("input has no towel line")
    towels = lines[0].split(", ")
    designs = [line for line in lines[1:] if line]
    return towels, designs


def can_make(towels: Sequence[str], pattern: str) -> bool:
    """True if the design is a concatenation of towel patterns."""
    reachable = [True] + [False] * len(pattern)
    for i in range(1, len(pattern) + 1):
        reachable[i] = any(
            pattern.endswith(t, 0, i) and reachable[i - len(t)] for t in towels
        )
    return reachable[-1]


def count_arrangements(towels: Sequence[str], pattern: str) -> int:
    """Number of distinct ways to build the design from towel patterns."""
    ways = [1] + [0] * len(pattern)
    for i in range(1, len(pattern) + 1):
        for towel in towels:
            if pattern.endswith(towel, 0, i):
                ways[i] += ways[i - len(towel)]
    return ways[-1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Arrange towels into designs.")
    parser.add_argument("input", nargs="?", default="19.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    towels, designs = parse(Path(args.input).read_text())
    if args.part == 1:
        print(sum(1 for d in designs if can_make(towels, d)))
    else:
        print(sum(count_arrangements(towels, d) for d in designs))
    return 0