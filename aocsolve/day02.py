"""Reactor reports: which level sequences are safe."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path


def parse(text: str) -> list[list[int]]:
    """One report of whitespace-separated levels per line."""
    return [[int(x) for x in line.split()] for line in text.splitlines()]


def is_safe(report: Sequence[int]) -> bool:
    """Monotone, with every step between 1 and 3."""
    steps = list(pairwise(report))
    small = all(1 <= abs(a - b) <= 3 for a, b in steps)
    increasing = all(a <= b for a, b in steps)
    decreasing = all(a >= b for a, b in steps)
    return small and (increasing or decreasing)


def is_maybe_safe(report: Sequence[int]) -> bool:
    """Safe once some single level is removed."""
    levels = list(report)
    return any(is_safe(levels[:i] + levels[i + 1:]) for i in range(len(levels)))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="2.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    reports = parse(Path(args.input).read_text())
    check = is_safe if args.part == 1 else is_maybe_safe
    print(sum(1 for report in reports if check(report)))
    return 0