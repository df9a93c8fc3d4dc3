"""RAM run: shortest escape through falling bytes and the byte that cuts it off."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Sequence
from pathlib import Path

Vec = tuple[int, int]

SIZE = 71
TAKE_FIRST = 1024


def parse(text: str) -> list[Vec]:
    """Byte positions, one "x,y" per line, in falling order."""
    points = []
    for line in text.splitlines():
        x, y = line.split(",", 1)
        points.append((int(x), int(y)))
    return points


def _distance(blocked: set[Vec], size: int) -> int | None:
    start, target = (0, 0), (size - 1, size - 1)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == target:
            return dist[pos]
        x, y = pos
        for nxt in ((x - 1, y), (x, y - 1), (x, y + 1), (x + 1, y)):
            if (
                0 <= nxt[0] < size
                and 0 <= nxt[1] < size
                and nxt not in blocked
                and nxt not in dist
            ):
                dist[nxt] = dist[pos] + 1
                queue.append(nxt)
    return None


def shortest_path(blocked: Iterable[Vec], size: int = SIZE) -> int:
    """Fewest steps from the top-left to the bottom-right corner."""
    steps = _distance(set(blocked), size)
    if steps is None:
        raise ValueError("no path to the exit")
    return steps


def has_path(blocked: Iterable[Vec], size: int = SIZE) -> bool:
    """True if the exit can still be reached."""
    return _distance(set(blocked), size) is not None


def first_blocking_byte(points: Sequence[Vec], size: int = SIZE) -> Vec:
    """The first byte after which the exit can no longer be reached."""
    points = list(points)
    if not points:
        raise ValueError("no bytes given")
    good, bad = 0, len(points)
    while good + 1 < bad:
        mid = (good + bad) // 2
        if has_path(points[:mid], size):
            good = mid
        else:
            bad = mid
    return points[bad - 1]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Escape the corrupted memory space.")
    parser.add_argument("input", nargs="?", default="18.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    points = parse(Path(args.input).read_text())
    if args.part == 1:
        print(shortest_path(points[:TAKE_FIRST]))
    else:
        x, y = first_blocking_byte(points)
        print(f"{x},{y}")
    return 0