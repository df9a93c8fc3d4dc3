"""Word search: XMAS in any direction, and crossed MAS shapes."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

_WORD = "XMAS"
_DIRECTIONS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


def parse(text: str) -> list[str]:
    """The letter grid, one row per line."""
    return text.splitlines()


def _matches(grid: Sequence[str], i: int, j: int, di: int, dj: int) -> bool:
    for k, letter in enumerate(_WORD):
        r, c = i + k * di, j + k * dj
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])) or grid[r][c] != letter:
            return False
    return True


def count_xmas(grid: Sequence[str]) -> int:
    """Occurrences of XMAS horizontally, vertically, diagonally or backwards."""
    if not grid:
        return 0
    return sum(
        _matches(grid, i, j, di, dj)
        for i in range(len(grid))
        for j in range(len(grid[0]))
        for di, dj in _DIRECTIONS
    )


def _is_x_mas(grid: Sequence[str], i: int, j: int) -> bool:
    if grid[i + 1][j + 1] != "A":
        return False
    top_left, top_right = grid[i][j], grid[i][j + 2]
    bottom_left, bottom_right = grid[i + 2][j], grid[i + 2][j + 2]
    if any(c not in ("M", "S") for c in (top_left, top_right, bottom_left, bottom_right)):
        return False
    return top_left != bottom_right and top_right != bottom_left


def count_x_mas(grid: Sequence[str]) -> int:
    """Number of 3x3 blocks holding two crossed MAS words."""
    cols = len(grid[0]) if grid else 0
    return sum(
        _is_x_mas(grid, i, j) for i in range(len(grid) - 2) for j in range(cols - 2)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search the word grid.")
    parser.add_argument("input", nargs="?", default="4.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    grid = parse(Path(args.input).read_text())
    print(count_xmas(grid) if args.part == 1 else count_x_mas(grid))
    return 0