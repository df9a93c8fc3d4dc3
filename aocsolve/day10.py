"""Hiking trails on a topographic map: trailhead scores and ratings."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path

Vec = tuple[int, int]
Heights = Mapping[Vec, int]

_PEAK = 9


def parse(text: str) -> dict[Vec, int]:
    """Heights by (row, column); cells that are not digits are left out."""
    return {
        (i, j): int(c)
        for i, line in enumerate(text.splitlines())
        for j, c in enumerate(line)
        if c in string.digits
    }


def _uphill(heights: Heights, pos: Vec) -> Iterator[Vec]:
    i, j = pos
    step = heights[pos] + 1
    for nxt in ((i - 1, j), (i, j - 1), (i, j + 1), (i + 1, j)):
        if heights.get(nxt) == step:
            yield nxt


def _top_down(heights: Heights) -> list[Vec]:
    return sorted(heights, key=heights.__getitem__, reverse=True)


def trail_score(heights: Heights) -> int:
    """Sum over trailheads of the number of distinct peaks they reach."""
    peaks: dict[Vec, set[Vec]] = {}
    for pos in _top_down(heights):
        if heights[pos] == _PEAK:
            peaks[pos] = {pos}
        else:
            peaks[pos] = set().union(*(peaks[n] for n in _uphill(heights, pos)))
    return sum(len(peaks[p]) for p, h in heights.items() if h == 0)


def trail_rating(heights: Heights) -> int:
    """Sum over trailheads of the number of distinct trails to any peak."""
    paths: dict[Vec, int] = {}
    for pos in _top_down(heights):
        if heights[pos] == _PEAK:
            paths[pos] = 1
        else:
            paths[pos] = sum(paths[n] for n in _uphill(heights, pos))
    return sum(paths[p] for p, h in heights.items() if h == 0)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score hiking trails.")
    parser.add_argument("input", nargs="?", default="10.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    heights = parse(Path(args.input).read_text())
    print(trail_score(heights) if args.part == 1 else trail_rating(heights))
    return 0