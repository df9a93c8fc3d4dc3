"""Keypad conundrum: button presses through chains of robot-operated keypads."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

Vec = tuple[int, int]

_STEPS = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_CHUNK = re.compile(r"[^A]*A|[^A]+$")


@dataclass(frozen=True)
class _Keypad:
    keys: dict[str, Vec]
    gap: Vec

    def position(self, key: str) -> Vec:
        try:
            return self.keys[key]
        except KeyError:
            raise ValueError(f"no key {key!r} on this keypad") from None

    def _route(self, pos: Vec, target: Vec, vertical_first: bool) -> str:
        (i, j), (ti, tj) = pos, target
        vertical = ("^" if ti < i else "v") * abs(ti - i)
        horizontal = ("<" if tj < j else ">") * abs(tj - j)
        route = vertical + horizontal if vertical_first else horizontal + vertical
        for move in route:
            di, dj = _STEPS[move]
            i, j = i + di, j + dj
            if (i, j) == self.gap:
                raise ValueError("route crosses the keypad gap")
        return route

    def sequences(self, code: str) -> list[str]:
        """All press sequences that move straight along one axis then the other."""

        def extend(pos: Vec, k: int) -> Iterator[str]:
            if k == len(code):
                yield ""
                return
            target = self.position(code[k])
            for vertical_first in (True, False):
                corner = (target[0], pos[1]) if vertical_first else (pos[0], target[1])
                if corner == self.gap:
                    continue
                head = self._route(pos, target, vertical_first) + "A"
                for tail in extend(target, k + 1):
                    yield head + tail

        return list(extend(self.keys["A"], 0))

    def greedy(self, code: str) -> str:
        """One press sequence, keeping to the last axis moved along where possible."""
        pos = self.keys["A"]
        last_vertical = False
        out = []
        for key in code:
            target = self.position(key)
            vertical_first = last_vertical or (pos[0], target[1]) == self.gap
            route = self._route(pos, target, vertical_first)
            if route:
                last_vertical = route[-1] in "^v"
            out.append(route + "A")
            pos = target
        return "".join(out)


_NUMERIC = _Keypad(
    keys={
        "7": (0, 0), "8": (0, 1), "9": (0, 2),
        "4": (1, 0), "5": (1, 1), "6": (1, 2),
        "1": (2, 0), "2": (2, 1), "3": (2, 2),
        "0": (3, 1), "A": (3, 2),
    },
    gap=(3, 0),
)

_DIRECTIONAL = _Keypad(
    keys={"^": (0, 1), "A": (0, 2), "<": (1, 0), "v": (1, 1), ">": (1, 2)},
    gap=(0, 0),
)


def numeric_sequences(code: str) -> list[str]:
    """Candidate directional presses that type code on the numeric keypad."""
    return _NUMERIC.sequences(code)


def directional_sequence(code: str) -> str:
    """One directional press sequence that types code on a directional keypad."""
    return _DIRECTIONAL.greedy(code)


def directional_sequences(code: str) -> list[str]:
    """Candidate directional presses that type code on a directional keypad."""
    return _DIRECTIONAL.sequences(code)


def shortest_two_robots(code: str) -> str:
    """Shortest top-level presses found through two directional robots."""
    return min(
        (directional_sequence(directional_sequence(num)) for num in numeric_sequences(code)),
        key=len,
    )


@lru_cache(maxsize=None)
def _expanded_length(code: str, robots: int) -> int:
    if robots == 0:
        return len(code)
    return sum(
        min(_expanded_length(d, robots - 1) for d in directional_sequences(chunk))
        for chunk in _CHUNK.findall(code)
    )


def shortest_length(code: str, robots: int) -> int:
    """Fewest top-level presses to type code through the given number of robots."""
    return min(_expanded_length(num, robots) for num in numeric_sequences(code))


def _numeric_value(code: str) -> int:
    return int("".join(c for c in code if c.isdigit()))


def total_complexity(codes: Iterable[str], robots: int) -> int:
    """Sum over codes of numeric value times shortest press count."""
    return sum(_numeric_value(code) * shortest_length(code, robots) for code in codes)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Type door codes through robot chains.")
    parser.add_argument("input", nargs="?", default="21.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    codes = Path(args.input).read_text().splitlines()
    if args.part == 1:
        print(sum(_numeric_value(c) * len(shortest_two_robots(c)) for c in codes))
    else:
        print(total_complexity(codes, 25))
    return 0