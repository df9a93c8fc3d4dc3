"""Garden plots: fence prices by perimeter and by number of sides."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

Vec = tuple[int, int]
Grid = Sequence[str]

_DIRECTIONS = ((-1, 0), (0, -1), (0, 1), (1, 0))


def parse(text: str) -> list[str]:
    """The plot map, one row per line."""
    return text.splitlines()


def _plant(grid: Grid, i: int, j: int) -> str | None:
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return None


def _regions(grid: Grid) -> Iterator[set[Vec]]:
    seen: set[Vec] = set()
    for i, row in enumerate(grid):
        for j, plant in enumerate(row):
            if (i, j) in seen:
                continue
            region = {(i, j)}
            stack = [(i, j)]
            while stack:
                ci, cj = stack.pop()
                for di, dj in _DIRECTIONS:
                    nxt = (ci + di, cj + dj)
                    if nxt not in region and _plant(grid, *nxt) == plant:
                        region.add(nxt)
                        stack.append(nxt)
            seen |= region
            yield region


def _perimeter(region: set[Vec]) -> int:
    return sum(
        (i + di, j + dj) not in region for i, j in region for di, dj in _DIRECTIONS
    )


def _corners(region: set[Vec]) -> int:
    corners = 0
    for i, j in region:
        for di, dj in _DIRECTIONS:
            ahead = (i + di, j + dj) in region
            side = (i + dj, j - di) in region
            diagonal = (i + di + dj, j - di + dj) in region
            if not ahead and not side:
                corners += 1
            elif ahead and side and not diagonal:
                corners += 1
    return corners


def fence_price(grid: Grid) -> int:
    """Sum over regions of area times perimeter."""
    return sum(len(r) * _perimeter(r) for r in _regions(grid))


def discount_price(grid: Grid) -> int:
    """Sum over regions of area times number of straight sides."""
    return sum(len(r) * _corners(r) for r in _regions(grid))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price the garden fences.")
    parser.add_argument("input", nargs="?", default="12.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    grid = parse(Path(args.input).read_text())
    print(fence_price(grid) if args.part == 1 else discount_price(grid))
    return 0