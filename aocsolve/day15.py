"""Warehouse robot: pushing boxes around, in normal and double-width layouts."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import takewhile
from pathlib import Path

Vec = tuple[int, int]

_MOVES = {"<": (0, -1), ">": (0, 1), "^": (-1, 0), "v": (1, 0)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def _add(x: Vec, y: Vec) -> Vec:
    return x[0] + y[0], x[1] + y[1]


def _box_score(grid: list[list[str]], box: str) -> int:
    return sum(
        100 * i + j
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == box
    )


def _render(grid: list[list[str]], robot: Vec) -> str:
    rows = []
    for i, row in enumerate(grid):
        cells = list(row)
        if i == robot[0]:
            cells[robot[1]] = "@"
        rows.append("".join(cells))
    return "\n".join(rows)


class Warehouse:
    """A map of walls and single-cell boxes with the robot's position."""

    BOX = "O"

    def __init__(self, grid: Iterable[Iterable[str]], robot: Vec) -> None:
        self.grid = [list(row) for row in grid]
        self.robot = robot

    def _get(self, pos: Vec) -> str:
        return self.grid[pos[0]][pos[1]]

    def _set(self, pos: Vec, cell: str) -> None:
        self.grid[pos[0]][pos[1]] = cell

    def apply(self, move: Vec) -> None:
        """Step the robot, pushing any line of boxes ahead unless a wall stops it."""
        target = _add(self.robot, move)
        end = target
        while (cell := self._get(end)) == "O":
            end = _add(end, move)
        if cell == "#":
            return
        if cell != ".":
            raise ValueError(f"unexpected cell {cell!r} at {end}")
        self.robot = target
        if end != target:
            self._set(target, ".")
            self._set(end, "O")

    def score(self) -> int:
        """Sum of 100 * row + column over all boxes."""
        return _box_score(self.grid, "O")

    def render(self) -> str:
        """The map as text, with '@' at the robot."""
        return _render(self.grid, self.robot)


class WideWarehouse(Warehouse):
    """A map whose boxes are two cells wide, written '[]'."""

    BOX = "["

    def apply(self, move: Vec) -> None:
        """Step the robot, pushing every box it touches, or nothing at all."""
        target = _add(self.robot, move)
        snapshot = [row[:] for row in self.grid]
        if self._push(target, move):
            self.robot = target
        else:
            self.grid = snapshot

    def _push(self, pos: Vec, move: Vec) -> bool:
        cell = self._get(pos)
        if cell == ".":
            return True
        if cell == "#":
            return False
        if cell == "[":
            cells = [pos, (pos[0], pos[1] + 1)]
        elif cell == "]":
            cells = [pos, (pos[0], pos[1] - 1)]
        else:
            raise ValueError(f"unexpected cell {cell!r} at {pos}")

        for part in cells:
            nxt = _add(part, move)
            if nxt in cells:
                continue
            if not self._push(nxt, move):
                return False

        chars = [self._get(part) for part in cells]
        for part in cells:
            self._set(part, ".")
        for part, char in zip(cells, chars):
            self._set(_add(part, move), char)
        return True

    def score(self) -> int:
        """Sum of 100 * row + column over the left edges of all boxes."""
        return _box_score(self.grid, "[")

    def render(self) -> str:
        """The map as text, with '@' at the robot."""
        return _render(self.grid, self.robot)


def _split(text: str) -> tuple[list[str], list[Vec]]:
    lines = text.splitlines()
    map_lines = list(takewhile(lambda line: len(line) > 1, lines))
    moves = []
    for line in lines[len(map_lines) + 1:]:
        for char in line:
            if char not in _MOVES:
                raise ValueError(f"unknown move {char!r}")
            moves.append(_MOVES[char])
    return map_lines, moves


def _take_robot(grid: list[list[str]]) -> Vec:
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "@":
                row[j] = "."
                return i, j
    raise ValueError("no robot on the map")


def parse(text: str) -> tuple[Warehouse, list[Vec]]:
    """The warehouse and the robot's moves."""
    map_lines, moves = _split(text)
    grid = [list(line) for line in map_lines]
    robot = _take_robot(grid)
    return Warehouse(grid, robot), moves


def parse_wide(text: str) -> tuple[WideWarehouse, list[Vec]]:
    """The warehouse with every cell doubled in width, and the robot's moves."""
    map_lines, moves = _split(text)
    grid = []
    for line in map_lines:
        row: list[str] = []
        for char in line:
            if char not in _WIDE:
                raise ValueError(f"unknown map cell {char!r}")
            row.extend(_WIDE[char])
        grid.append(row)
    robot = _take_robot(grid)
    return WideWarehouse(grid, robot), moves


def solve(warehouse: Warehouse, moves: Iterable[Vec]) -> int:
    """Apply all moves and return the final box score."""
    for move in moves:
        warehouse.apply(move)
    return warehouse.score()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Push boxes around the warehouse.")
    parser.add_argument("input", nargs="?", default="15.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part == 1:
        warehouse, moves = parse(text)
        print(solve(warehouse, moves))
    else:
        wide, moves = parse_wide(text)
        result = solve(wide, moves)
        print("====")
        print(wide.render())
        print(result)
    return 0