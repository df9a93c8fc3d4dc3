"""Guard patrol: visited cells and obstructions that trap the guard in a loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

Vec = tuple[int, int]
Grid = Sequence[Sequence[str]]

_ARROWS = {"<": (0, -1), ">": (0, 1), "^": (-1, 0), "v": (1, 0)}


def parse(text: str) -> tuple[list[list[str]], Vec, Vec]:
    """The map with the guard replaced by floor, her position and heading."""
    grid = [list(line) for line in text.splitlines()]
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell in _ARROWS:
                row[j] = "."
                return grid, (i, j), _ARROWS[cell]
    raise ValueError("no guard on the map")


def _turn(direction: Vec) -> Vec:
    return direction[1], -direction[0]


def _advance(grid: Grid, loc: Vec, direction: Vec) -> tuple[Vec, Vec] | None:
    """Next position and heading, or None once the guard leaves the map."""
    rows, cols = len(grid), len(grid[0])
    while True:
        nxt = (loc[0] + direction[0], loc[1] + direction[1])
        if not (0 <= nxt[0] < rows and 0 <= nxt[1] < cols):
            return None
        if grid[nxt[0]][nxt[1]] == ".":
            return nxt, direction
        direction = _turn(direction)


def walk(grid: Grid, loc: Vec, direction: Vec) -> int:
    """Number of distinct cells visited before leaving the map."""
    visited = {loc}
    while (step := _advance(grid, loc, direction)) is not None:
        loc, direction = step
        visited.add(loc)
    return len(visited)


def has_loop(grid: Grid, loc: Vec, direction: Vec) -> bool:
    """True if the guard repeats a position and heading."""
    seen: set[tuple[Vec, Vec]] = set()
    while True:
        state = (loc, direction)
        if state in seen:
            return True
        seen.add(state)
        step = _advance(grid, loc, direction)
        if step is None:
            return False
        loc, direction = step


def count_loop_obstructions(grid: Grid, loc: Vec, direction: Vec) -> int:
    """Floor cells where a new obstacle would trap the guard in a loop."""
    field = [list(row) for row in grid]
    count = 0
    for i, row in enumerate(field):
        for j, cell in enumerate(row):
            if (i, j) == loc or cell != ".":
                continue
            row[j] = "#"
            count += has_loop(field, loc, direction)
            row[j] = "."
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Follow the guard's patrol.")
    parser.add_argument("input", nargs="?", default="6.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    grid, loc, direction = parse(Path(args.input).read_text())
    if args.part == 1:
        print(walk(grid, loc, direction))
    else:
        print(count_loop_obstructions(grid, loc, direction))
    return 0