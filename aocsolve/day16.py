"""Reindeer maze: cheapest route score and the tiles on any cheapest route."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Iterator, Sequence
from pathlib import Path

Vec = tuple[int, int]
State = tuple[Vec, int]
Grid = Sequence[Sequence[str]]

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EAST = 1
_STEP = 1
_TURN = 1000


def parse(text: str) -> tuple[list[list[str]], Vec, Vec]:
    """The maze with S and E replaced by floor, plus their positions."""
    grid = [list(line) for line in text.splitlines()]
    start = end = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == "S":
                start = (i, j)
                row[j] = "."
            elif cell == "E":
                end = (i, j)
                row[j] = "."
    if start is None or end is None:
        raise ValueError("maze needs both a start and an end")
    return grid, start, end


def _open(grid: Grid, pos: Vec) -> bool:
    i, j = pos
    return 0 <= i < len(grid) and 0 <= j < len(grid[i]) and grid[i][j] == "."


def _neighbours(grid: Grid, state: State, sign: int) -> Iterator[tuple[State, int]]:
    (i, j), d = state
    di, dj = _DIRECTIONS[d]
    ahead = (i + sign * di, j + sign * dj)
    if _open(grid, ahead):
        yield (ahead, d), _STEP
    yield ((i, j), (d + 1) % 4), _TURN
    yield ((i, j), (d + 3) % 4), _TURN


def _dijkstra(grid: Grid, start: State, sign: int) -> Iterator[tuple[State, int]]:
    """Reachable states with their least cost, cheapest first."""
    best = {start: 0}
    heap = [(0, start)]
    done: set[State] = set()
    while heap:
        cost, state = heapq.heappop(heap)
        if state in done:
            continue
        done.add(state)
        yield state, cost
        for nxt, weight in _neighbours(grid, state, sign):
            new_cost = cost + weight
            if nxt not in best or new_cost < best[nxt]:
                best[nxt] = new_cost
                heapq.heappush(heap, (new_cost, nxt))


def lowest_score(grid: Grid, start: Vec, end: Vec) -> int:
    """Least score from start, facing east, to end."""
    for (pos, _), cost in _dijkstra(grid, (start, _EAST), 1):
        if pos == end:
            return cost
    raise ValueError("end is not reachable")


def best_seat_count(grid: Grid, start: Vec, end: Vec) -> int:
    """Number of tiles that lie on at least one cheapest route."""
    from_start = dict(_dijkstra(grid, (start, _EAST), 1))
    arrivals = [from_start[(end, d)] for d in range(4) if (end, d) in from_start]
    if not arrivals:
        raise ValueError("end is not reachable")
    min_cost = min(arrivals)

    seats: set[Vec] = set()
    for d in range(4):
        for state, cost in _dijkstra(grid, (end, d), -1):
            forward = from_start.get(state)
            if forward is not None and forward + cost == min_cost:
                seats.add(state[0])
    return len(seats)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the best path through the maze.")
    parser.add_argument("input", nargs="?", default="16.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    grid, start, end = parse(Path(args.input).read_text())
    if args.part == 1:
        print(lowest_score(grid, start, end))
    else:
        print(best_seat_count(grid, start, end))
    return 0