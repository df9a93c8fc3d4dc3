"""Restroom robots: quadrant safety factor and the hidden picture."""

from __future__ import annotations

import argparse
import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

Vec = tuple[int, int]

WIDTH = 101
HEIGHT = 103
_RUN = 10


@dataclass(frozen=True)
class Robot:
    """Starting position and velocity per second."""

    position: Vec
    velocity: Vec


def _parse_vec(field: str) -> Vec:
    x, y = field[2:].split(",", 1)
    return int(x), int(y)


def parse(text: str) -> list[Robot]:
    """Lines of the form "p=x,y v=dx,dy"."""
    robots = []
    for line in text.splitlines():
        if len(line) <= 1:
            continue
        p, v = line.split(" ", 1)
        robots.append(Robot(_parse_vec(p), _parse_vec(v)))
    return robots


def predict(robot: Robot, steps: int) -> Vec:
    """Position after the given seconds, wrapping around the room."""
    (px, py), (vx, vy) = robot.position, robot.velocity
    return (px + vx * steps) % WIDTH, (py + vy * steps) % HEIGHT


def safety_factor(robots: Iterable[Robot]) -> int:
    """Product of robot counts per quadrant after 100 seconds."""
    mid_x, mid_y = WIDTH // 2, HEIGHT // 2
    counts: Counter[tuple[bool, bool]] = Counter()
    for robot in robots:
        x, y = predict(robot, 100)
        if x == mid_x or y == mid_y:
            continue
        counts[(x < mid_x, y < mid_y)] += 1
    return math.prod(counts[(qx, qy)] for qx in (False, True) for qy in (False, True))


def looks_like_tree(positions: Iterable[Vec]) -> bool:
    """True if more than ten robots stand in one unbroken vertical line."""
    columns: defaultdict[int, set[int]] = defaultdict(set)
    for x, y in positions:
        columns[x].add(y)
    for ys in columns.values():
        run, prev = 0, None
        for y in sorted(ys):
            run = run + 1 if prev is not None and y == prev + 1 else 1
            prev = y
            if run > _RUN:
                return True
    return False


def render(positions: Iterable[Vec]) -> str:
    """The room as text, with '#' where a robot stands."""
    rows = [[" "] * WIDTH for _ in range(HEIGHT)]
    for x, y in positions:
        rows[y][x] = "#"
    return "\n".join("".join(row) for row in rows)


def find_tree(robots: Sequence[Robot], limit: int = 1_000_000) -> int | None:
    """First second below limit at which the robots look like a tree."""
    for second in range(limit):
        if looks_like_tree(predict(r, second) for r in robots):
            return second
    return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Track the restroom robots.")
    parser.add_argument("input", nargs="?", default="14.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    robots = parse(Path(args.input).read_text())
    if args.part == 1:
        print(safety_factor(robots))
        return 0
    second = find_tree(robots)
    if second is not None:
        print(second)
        print(render(predict(r, second) for r in robots))
    return 0