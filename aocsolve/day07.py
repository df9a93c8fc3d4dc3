"""Bridge repair: can operators between numbers reach each target."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path


def parse(text: str) -> list[tuple[int, list[int]]]:
    """Lines of the form "target: a b c"."""
    equations = []
    for line in text.splitlines():
        target, args = line.split(": ", 1)
        equations.append((int(target), [int(x) for x in args.split(" ")]))
    return equations


def _concat(x: int, y: int) -> int:
    power = 1
    while power <= y:
        power *= 10
    return x * power + y


def solvable(target: int, args: Sequence[int], concat: bool = False) -> bool:
    """True if +, * (and digit concatenation when enabled) can reach target."""
    values = tuple(args)

    def search(acc: int, k: int) -> bool:
        if k == len(values):
            return acc == target
        value = values[k]
        return (
            search(acc + value, k + 1)
            or search(acc * value, k + 1)
            or (concat and search(_concat(acc, value), k + 1))
        )

    return search(0, 0)


def total_calibration(
    equations: Iterable[tuple[int, Sequence[int]]], concat: bool = False
) -> int:
    """Sum of targets of solvable equations."""
    return sum(target for target, args in equations if solvable(target, args, concat))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum calibration results.")
    parser.add_argument("input", nargs="?", default="7.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    equations = parse(Path(args.input).read_text())
    print(total_calibration(equations, concat=args.part == 2))
    return 0