"""Race condition: shortcuts through walls that save time on a single-track race."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from pathlib import Path

Vec = tuple[int, int]
Grid = Sequence[Sequence[str]]

UNREACHABLE = 1_000_000
CHEAT_LEN = 20
MIN_SAVING = 100


def parse(text: str) -> tuple[list[list[str]], Vec, Vec]:
    """The track with S and E replaced by floor, plus their positions."""
    grid = [list(line) for line in text.splitlines()]
    start = end = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "S":
                start = (i, j)
            elif cell == "E":
                end = (i, j)
            else:
                continue
            row[j] = "."
    if start is None or end is None:
        raise ValueError("track needs both a start and an end")
    return grid, start, end


def _open(grid: Grid, pos: Vec) -> bool:
    i, j = pos
    return 0 <= i < len(grid) and 0 <= j < len(grid[0]) and grid[i][j] == "."


def _neighbours(grid: Grid, pos: Vec) -> Iterator[Vec]:
    i, j = pos
    for nxt in ((i - 1, j), (i, j - 1), (i, j + 1), (i + 1, j)):
        if _open(grid, nxt):
            yield nxt


def _distances(grid: Grid, source: Vec) -> dict[Vec, int]:
    dist = {source: 0}
    queue = deque([source])
    while queue:
        pos = queue.popleft()
        for nxt in _neighbours(grid, pos):
            if nxt not in dist:
                dist[nxt] = dist[pos] + 1
                queue.append(nxt)
    return dist


def _path_nodes(grid: Grid, start: Vec, end: Vec, cheat: tuple[Vec, Vec] | None) -> int:
    """Nodes on the shortest path, where stepping onto cheat[0] forces a move to cheat[1]."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            return dist[pos] + 1
        if cheat is not None and pos == cheat[0]:
            successors: Iterator[Vec] = iter((cheat[1],))
        else:
            successors = _neighbours(grid, pos)
        for nxt in successors:
            if nxt not in dist:
                dist[nxt] = dist[pos] + 1
                queue.append(nxt)
    return UNREACHABLE


def count_short_cheats(
    grid: Grid, start: Vec, end: Vec, min_saving: int = MIN_SAVING
) -> int:
    """Single-wall cheats between neighbouring cells that save at least min_saving."""
    default = _path_nodes(grid, start, end, None)
    count = 0
    for i in range(len(grid)):
        for j in range(len(grid[0])):
            here = (i, j)
            down, right = (i + 1, j), (i, j + 1)
            for cheat in ((here, down), (here, right), (down, here), (right, here)):
                if _open(grid, cheat[0]):
                    length = _path_nodes(grid, start, end, cheat)
                else:
                    length = default
                count += length + min_saving <= default
    return count


def count_long_cheats(
    grid: Grid,
    start: Vec,
    end: Vec,
    max_cheat: int = CHEAT_LEN,
    min_saving: int = MIN_SAVING,
) -> int:
    """Cheats of up to max_cheat steps that save at least min_saving."""
    from_start = _distances(grid, start)
    to_end = _distances(grid, end)
    if end not in from_start:
        raise ValueError("end is not reachable")
    default = from_start[end]

    count = 0
    for (xi, xj), x_cost in from_start.items():
        for di in range(-max_cheat, max_cheat + 1):
            reach = max_cheat - abs(di)
            for dj in range(-reach, reach + 1):
                if di == 0 and dj == 0:
                    continue
                y_cost = to_end.get((xi + di, xj + dj))
                if y_cost is None:
                    continue
                path = x_cost + abs(di) + abs(dj) + y_cost
                count += path + min_saving <= default
    return count


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count time-saving race cheats.")
    parser.add_argument("input", nargs="?", default="20.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    grid, start, end = parse(Path(args.input).read_text())
    if args.part == 1:
        print(count_short_cheats(grid, start, end))
    else:
        print(count_long_cheats(grid, start, end))
    return 0