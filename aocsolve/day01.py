"""Two location lists: total pairwise distance and similarity score."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence
from pathlib import Path


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two whitespace-separated numbers into two columns."""
    xs: list[int] = []
    ys: list[int] = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers on line {line!r}")
        xs.append(int(fields[0]))
        ys.append(int(fields[1]))
    return xs, ys


def total_distance(xs: Iterable[int], ys: Iterable[int]) -> int:
    """Sum of distances between the lists once both are sorted."""
    return sum(abs(x - y) for x, y in zip(sorted(xs), sorted(ys)))


def similarity_score(xs: Iterable[int], ys: Iterable[int]) -> int:
    """Sum of each left number times how often it appears on the right."""
    counts = Counter(ys)
    return sum(x * counts[x] for x in xs)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("input", nargs="?", default="1.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    xs, ys = parse(Path(args.input).read_text())
    result = total_distance(xs, ys) if args.part == 1 else similarity_score(xs, ys)
    print(result)
    return 0