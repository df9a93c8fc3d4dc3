"""Corrupted memory: sum of the products of valid mul(x,y) instructions."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from pathlib import Path

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _scan(text: str, switches: bool) -> int:
    total = 0
    enabled = True
    pos = 0
    while pos < len(text):
        if switches and text.startswith("do()", pos):
            enabled = True
            pos += 4
            continue
        if switches and text.startswith("don't()", pos):
            enabled = False
            pos += 7
            continue
        if not text.startswith("mul(", pos):
            pos += 1
            continue
        pos += 4

        comma = text.find(",", pos)
        if comma < 0 or comma - pos > 3:
            continue
        if not _NUMBER.fullmatch(text, pos, comma):
            pos = comma + 1
            continue
        x = int(text[pos:comma])
        pos = comma + 1

        close = text.find(")", pos)
        if close < 0 or close - pos > 3:
            continue
        if not _NUMBER.fullmatch(text, pos, close):
            pos = close + 1
            continue
        y = int(text[pos:close])
        pos = close + 1

        if enabled:
            total += x * y
    return total


def sum_muls(text: str) -> int:
    """Sum every well-formed multiplication."""
    return _scan(text, switches=False)


def sum_enabled_muls(text: str) -> int:
    """Sum multiplications, honouring do() and don't() switches."""
    return _scan(text, switches=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum multiplications in corrupted memory.")
    parser.add_argument("input", nargs="?", default="3.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    print(sum_muls(text) if args.part == 1 else sum_enabled_muls(text))
    return 0