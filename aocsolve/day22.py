"""Monkey market: pseudorandom secret numbers and the best price-change sequence."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path

MODULUS = 16777216
ITERATIONS = 2000
_PRICES = 2000


def parse(text: str) -> list[int]:
    """One initial secret number per line."""
    return [int(line) for line in text.splitlines()]


def next_secret(n: int) -> int:
    """The next secret number in the sequence."""
    n = ((n * 64) ^ n) % MODULUS
    n = ((n // 32) ^ n) % MODULUS
    return ((n * 2048) ^ n) % MODULUS


def nth_secret(n: int, count: int) -> int:
    """The secret number after the given number of steps."""
    for _ in range(count):
        n = next_secret(n)
    return n


def sum_secrets(numbers: Iterable[int]) -> int:
    """Sum of each buyer's secret number after 2000 steps."""
    return sum(nth_secret(n, ITERATIONS) for n in numbers)


def best_bananas(numbers: Iterable[int]) -> int:
    """Most bananas obtainable with a single sequence of four price changes."""
    totals: defaultdict[tuple[int, ...], int] = defaultdict(int)
    for n in numbers:
        secrets = [n]
        for _ in range(_PRICES - 1):
            secrets.append(next_secret(secrets[-1]))
        prices = [s % 10 for s in secrets]
        changes = [b - a for a, b in pairwise(prices)]
        windows = zip(changes, changes[1:], changes[2:], changes[3:])
        seen: set[tuple[int, ...]] = set()
        for key, price in zip(windows, prices[4:]):
            if key not in seen:
                seen.add(key)
                totals[key] += price
    return max(totals.values(), default=0)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Predict the monkey market.")
    parser.add_argument("input", nargs="?", default="22.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    numbers = parse(Path(args.input).read_text())
    print(sum_secrets(numbers) if args.part == 1 else best_bananas(numbers))
    return 0