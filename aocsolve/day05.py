"""Print queue: page-ordering rules and update validation."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence, Set
from pathlib import Path

Rules = Set[tuple[int, int]]


def parse(text: str) -> tuple[set[tuple[int, int]], list[list[int]]]:
    """Rules "x|y" up to the first blank line, then comma-separated updates."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        blank = len(lines)

    rules: set[tuple[int, int]] = set()
    for line in lines[:blank]:
        before, after = line.split("|")[:2]
        rules.add((int(before), int(after)))

    prints = [[int(x) for x in line.split(",")] for line in lines[blank + 1:]]
    return rules, prints


def is_good(rules: Rules, pages: Sequence[int]) -> bool:
    """True if no page comes after a page it must precede."""
    return not any(
        (later, earlier) in rules
        for i, later in enumerate(pages)
        for earlier in pages[:i]
    )


def sort_pages(rules: Rules, pages: Iterable[int]) -> list[int]:
    """Reorder pages so that every rule is respected."""
    remaining = list(pages)
    ordered: list[int] = []
    while remaining:
        for page in remaining:
            if not any((other, page) in rules for other in remaining):
                break
        else:
            raise ValueError("page rules contain a cycle")
        remaining.remove(page)
        ordered.append(page)
    return ordered


def sum_correct_middles(rules: Rules, prints: Iterable[Sequence[int]]) -> int:
    """Sum of middle pages of updates already in order."""
    return sum(p[len(p) // 2] for p in prints if is_good(rules, p))


def sum_fixed_middles(rules: Rules, prints: Iterable[Sequence[int]]) -> int:
    """Sum of middle pages of out-of-order updates after sorting them."""
    return sum(
        sort_pages(rules, p)[len(p) // 2] for p in prints if not is_good(rules, p)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check print queue updates.")
    parser.add_argument("input", nargs="?", default="5.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    rules, prints = parse(Path(args.input).read_text())
    if args.part == 1:
        print(sum_correct_middles(rules, prints))
    else:
        print(sum_fixed_middles(rules, prints))
    return 0