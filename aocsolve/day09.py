"""Disk fragmenter: compact a disk map block by block or file by file."""

from __future__ import annotations

import argparse
import string
from collections.abc import Sequence
from pathlib import Path

Span = tuple[int, int]


def _digit(char: str) -> int | None:
    return int(char) if char in string.digits else None


def parse_blocks(text: str) -> list[int | None]:
    """Expand the dense disk map into blocks: a file id, or None for free space."""
    digits = text.strip() + "0"
    blocks: list[int | None] = []
    for file_id, (file_len, space_len) in enumerate(zip(digits[::2], digits[1::2])):
        size = _digit(file_len)
        if size is None:
            raise ValueError(f"file length {file_len!r} is not a digit")
        blocks.extend([file_id] * size)
        blocks.extend([None] * (_digit(space_len) or 0))
    return blocks


def compact_blocks(blocks: Sequence[int | None]) -> int:
    """Move single blocks from the end into the leftmost gaps; return the checksum."""
    disk = list(blocks)
    left, right = 0, len(disk) - 1
    while left < right:
        if disk[left] is not None:
            left += 1
        elif disk[right] is None:
            right -= 1
        else:
            disk[left], disk[right] = disk[right], disk[left]
    return sum(pos * file_id for pos, file_id in enumerate(disk) if file_id is not None)


def parse_spans(text: str) -> tuple[list[Span], list[Span]]:
    """Files and free gaps as (location, length) spans, in disk order."""
    digits = [_digit(c) or 0 for c in text.strip()]
    if len(digits) % 2:
        digits.append(0)
    files: list[Span] = []
    holes: list[Span] = []
    loc = 0
    for file_len, space_len in zip(digits[::2], digits[1::2]):
        files.append((loc, file_len))
        loc += file_len
        holes.append((loc, space_len))
        loc += space_len
    return files, holes


def compact_files(files: Sequence[Span], holes: Sequence[Span]) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits; return the checksum."""
    gaps = [list(hole) for hole in holes]
    total = 0
    for file_id, (loc, size) in reversed(list(enumerate(files))):
        for gap in gaps:
            if gap[1] >= size and gap[0] < loc:
                loc = gap[0]
                gap[0] += size
                gap[1] -= size
                break
        total += file_id * sum(range(loc, loc + size))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compact the amphipod disk.")
    parser.add_argument("input", nargs="?", default="9.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part == 1:
        print(compact_blocks(parse_blocks(text)))
    else:
        print(compact_files(*parse_spans(text)))
    return 0