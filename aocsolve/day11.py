"""Plutonian pebbles: stones that change and split each time you blink."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from functools import lru_cache
from pathlib import Path


def parse(text: str) -> list[int]:
    """Whitespace-separated stone numbers."""
    return [int(w) for w in text.split()]


def _successors(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> list[int]:
    """The row of stones after one blink."""
    return [nxt for stone in stones for nxt in _successors(stone)]


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after the given number of blinks."""

    @lru_cache(maxsize=None)
    def expand(stone: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        return sum(expand(nxt, remaining - 1) for nxt in _successors(stone))

    return sum(expand(stone, blinks) for stone in stones)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("input", nargs="?", default=None, help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    path = args.input or ("11.txt" if args.part == 1 else "11_.txt")
    stones = parse(Path(path).read_text())
    if args.part == 1:
        for _ in range(25):
            stones = blink(stones)
        print(len(stones))
    else:
        print(count_stones(stones, 75))
    return 0