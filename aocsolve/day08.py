"""Antenna map: antinodes of same-frequency antenna pairs."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Mapping, Sequence
from pathlib import Path

Vec = tuple[int, int]
Antennas = Mapping[str, Sequence[Vec]]


def parse(text: str) -> tuple[dict[str, list[Vec]], int, int]:
    """Antenna positions by frequency, plus the map's rows and columns."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    antennas: dict[str, list[Vec]] = defaultdict(list)
    for i, line in enumerate(lines):
        for j, cell in enumerate(line):
            if cell.isalnum():
                antennas[cell].append((i, j))
    return dict(antennas), len(lines), len(lines[0])


def _pairs(antennas: Antennas):
    return [
        (x, y) for locs in antennas.values() for x in locs for y in locs if x != y
    ]


def count_antinodes(antennas: Antennas, rows: int, cols: int) -> int:
    """Distinct in-map points one step beyond each antenna of a pair."""
    points = set()
    for x, y in _pairs(antennas):
        di, dj = y[0] - x[0], y[1] - x[1]
        for p in ((x[0] - di, x[1] - dj), (y[0] + di, y[1] + dj)):
            if 0 <= p[0] < rows and 0 <= p[1] < cols:
                points.add(p)
    return len(points)


def _on_lattice(a: Vec, x: Vec, y: Vec) -> bool:
    """True if a equals x plus a whole multiple of y - x."""
    d0, d1 = y[0] - x[0], y[1] - x[1]
    e0, e1 = x[0] - a[0], x[1] - a[1]
    if d0:
        return e0 % d0 == 0 and e1 == d1 * (e0 // d0)
    return e0 == 0 and e1 % d1 == 0


def count_harmonic_antinodes(antennas: Antennas, rows: int, cols: int) -> int:
    """In-map points at any whole multiple of a pair's spacing."""
    pairs = _pairs(antennas)
    return sum(
        1
        for i in range(rows)
        for j in range(cols)
        if any(_on_lattice((i, j), x, y) for x, y in pairs)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count antinode locations.")
    parser.add_argument("input", nargs="?", default="8.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    antennas, rows, cols = parse(Path(args.input).read_text())
    if args.part == 1:
        print(count_antinodes(antennas, rows, cols))
    else:
        print(count_harmonic_antinodes(antennas, rows, cols))
    return 0