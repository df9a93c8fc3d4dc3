"""Claw machines: fewest tokens to reach each prize."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

Vec = tuple[int, int]

FAR_OFFSET = 10000000000000
_NO_WIN = 1000


@dataclass(frozen=True)
class Machine:
    """Button A and B movements and the prize location."""

    a: Vec
    b: Vec
    prize: Vec


def _tdiv(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def _parse_line(line: str) -> Vec:
    _, rest = line.split(": ", 1)
    x, y = rest.split(", ", 1)
    return int(x[2:]), int(y[2:])


def parse(text: str, offset: int = 0) -> list[Machine]:
    """Machines in groups of three lines; offset is added to each prize coordinate."""
    vecs = [_parse_line(line) for line in text.splitlines() if len(line) > 1]
    groups = zip(*[iter(vecs)] * 3)
    return [
        Machine(a, b, (prize[0] + offset, prize[1] + offset)) for a, b, prize in groups
    ]


def min_tokens(machine: Machine) -> int | None:
    """Cheapest win with at most 100 presses of each button, or None."""
    (ax, ay), (bx, by), (tx, ty) = machine.a, machine.b, machine.prize
    best = _NO_WIN
    for i in range(101):
        rx, ry = tx - ax * i, ty - ay * i
        j = _tdiv(rx, bx)
        if rx == bx * j and ry == by * j and j <= 100:
            best = min(best, i * 3 + j)
    return best if best != _NO_WIN else None


def _cheapest_near(a: Vec, b: Vec, prize: Vec) -> int | None:
    (ax, ay), (bx, by), (tx, ty) = a, b, prize
    best = None
    for i in range(_tdiv(tx, ax)):
        rx = tx - ax * i
        if rx < 0:
            break
        ry = ty - ay * i
        j = _tdiv(rx, bx)
        if rx == bx * j and ry == by * j:
            cost = i * 3 + j
            best = cost if best is None else min(best, cost)
    return best


def min_tokens_far(machine: Machine) -> int | None:
    """Cheapest win for a distant prize, or None.

    Presses are split into a bulk part, where both buttons are pressed in the
    ratio that keeps X and Y in step, and a small remainder found by search.
    """
    a, b, prize = machine.a, machine.b, machine.prize
    da = a[0] - a[1]
    db = b[0] - b[1]
    if da * db > 0:
        return None
    if db == 0:
        raise ValueError("button B moves equally along both axes")

    best = None
    for k in range(1, max(abs(da), abs(db)) + 1):
        if abs(da * k) % abs(db):
            continue
        l = abs(da * k) // abs(db)
        u = min(
            prize[0] // (a[0] * k + b[0] * l),
            prize[1] // (a[1] * k + b[1] * l),
        ) - 1000
        i, j = k * u, l * u
        rest = (
            prize[0] - a[0] * i - b[0] * j,
            prize[1] - a[1] * i - b[1] * j,
        )
        small = _cheapest_near(a, b, rest)
        if small is not None:
            cost = small + i * 3 + j
            best = cost if best is None else min(best, cost)
    return best


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Win prizes from claw machines.")
    parser.add_argument("input", nargs="?", default="13.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part == 1:
        costs = (min_tokens(m) for m in parse(text))
    else:
        costs = (min_tokens_far(m) for m in parse(text, FAR_OFFSET))
    print(sum(c for c in costs if c is not None))
    return 0