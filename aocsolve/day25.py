"""Code chronicle: which key schematics fit which lock schematics."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

Profile = list[int]

MAX_FIT = 5


def _blocks(text: str) -> Iterator[list[str]]:
    block: list[str] = []
    for line in text.splitlines():
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _profile(block: list[str]) -> Profile:
    heights = []
    for column in zip(*block):
        filled = column.count("#")
        if filled == 0:
            raise ValueError("schematic column has no '#'")
        heights.append(filled - 1)
    return heights


def parse(text: str) -> tuple[list[Profile], list[Profile]]:
    """Key and lock column heights from blank-line separated schematics."""
    keys: list[Profile] = []
    locks: list[Profile] = []
    for block in _blocks(text):
        (keys if block[0][0] == "." else locks).append(_profile(block))
    return keys, locks


def count_fitting(keys: Iterable[Profile], locks: Iterable[Profile]) -> int:
    """Number of key and lock pairs whose columns never overlap."""
    lock_list = list(locks)
    return sum(
        all(k + l <= MAX_FIT for k, l in zip(key, lock))
        for key in keys
        for lock in lock_list
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Match keys to locks.")
    parser.add_argument("input", nargs="?", default="25.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    keys, locks = parse(Path(args.input).read_text())
    print(count_fitting(keys, locks))
    return 0