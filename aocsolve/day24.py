"""Crossed wires: simulate a gate network and inspect it as a ripple-carry adder."""

from __future__ import annotations

import argparse
import enum
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

BITS = 45

SWAPS: tuple[tuple[str, str], ...] = (
    ("drg", "z22"),
    ("jbp", "z35"),
    ("jgc", "z15"),
    ("qjb", "gvw"),
)


class Op(enum.Enum):
    """Logic gate kind."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def evaluate(self, a: bool, b: bool) -> bool:
        if self is Op.AND:
            return a and b
        if self is Op.OR:
            return a or b
        return a != b


@dataclass(frozen=True)
class Gate:
    """A gate combining two input wires into an output wire."""

    a: str
    b: str
    out: str
    op: Op


def _parse_gate(line: str, rename: dict[str, str]) -> Gate:
    parts = line.split(" ")
    if len(parts) < 5:
        raise ValueError(f"malformed gate {line!r}")
    try:
        op = Op(parts[1])
    except ValueError:
        raise ValueError(f"unknown gate {parts[1]!r}") from None
    return Gate(parts[0], parts[2], rename.get(parts[4], parts[4]), op)


def parse(text: str) -> tuple[list[tuple[str, bool]], list[Gate]]:
    """Initial wire values up to the blank line, then the gates."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("no blank line after the wire values") from None
    wires = []
    for line in lines[:blank]:
        name, value = line.split(": ", 1)
        wires.append((name, int(value) != 0))
    gates = [_parse_gate(line, {}) for line in lines[blank + 1:]]
    return wires, gates


def parse_gates(text: str, swaps: Iterable[tuple[str, str]] = ()) -> list[Gate]:
    """The gates only, with each swapped pair of outputs exchanged."""
    rename: dict[str, str] = {}
    for x, y in swaps:
        rename[x] = y
        rename[y] = x
    lines = text.splitlines()
    start = lines.index("") + 1 if "" in lines else len(lines)
    return [_parse_gate(line, rename) for line in lines[start:]]


def simulate(wires: Iterable[tuple[str, bool]], gates: Sequence[Gate]) -> int:
    """The number read from the z wires, lowest-numbered wire first."""
    queue = deque(wires)
    known: dict[str, bool] = {}
    unknown_z = {w for g in gates for w in (g.a, g.b, g.out) if w.startswith("z")}

    while unknown_z:
        if not queue:
            raise ValueError(f"wires never set: {', '.join(sorted(unknown_z))}")
        name, value = queue.popleft()
        known[name] = value
        unknown_z.discard(name)
        for gate in gates:
            if gate.out in known:
                continue
            if gate.a in known and gate.b in known:
                result = gate.op.evaluate(known[gate.a], known[gate.b])
                known[gate.out] = result
                queue.append((gate.out, result))

    z_wires = sorted((int(k[1:]), v) for k, v in known.items() if k.startswith("z"))
    return sum(int(v) << position for position, (_, v) in enumerate(z_wires))


def check_adder(gates: Sequence[Gate]) -> list[str]:
    """Report how the gates deviate from a ripple-carry adder of BITS bits."""
    xors: dict[int, str] = {}
    ands: dict[int, str] = {}
    for gate in gates:
        if not gate.a.startswith(("x", "y")):
            continue
        n = int(gate.a[1:])
        if gate.op is Op.XOR:
            xors[n] = gate.out
        elif gate.op is Op.AND:
            ands[n] = gate.out
        else:
            raise ValueError(f"unexpected {gate.op.value} gate on input {gate.a}")
    if len(ands) != BITS or len(xors) != BITS:
        raise ValueError(f"expected {BITS} input AND and XOR gates")

    messages = []
    for n, wire in sorted(xors.items()):
        expected = f"z{n:02}"
        for gate in gates:
            if gate.op is Op.XOR and wire in (gate.a, gate.b) and gate.out != expected:
                messages.append(f"XOR: {gate.out} has to be {expected}")

    for n, wire in sorted(ands.items()):
        carry = next(
            (g.out for g in gates if g.op is Op.OR and wire in (g.a, g.b)), None
        )
        if carry is None:
            messages.append(f"Where's carry for {n}?")
        else:
            messages.append(f"??? carry {n} is {carry}")
    return messages


def swap_answer(swaps: Iterable[tuple[str, str]]) -> str:
    """All swapped wire names, sorted and comma-joined."""
    return ",".join(sorted(name for pair in swaps for name in pair))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate the gate network.")
    parser.add_argument("input", nargs="?", default="24.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    text = Path(args.input).read_text()
    if args.part == 1:
        wires, gates = parse(text)
        print(simulate(wires, gates))
    else:
        for message in check_adder(parse_gates(text, SWAPS)):
            print(message)
        print(swap_answer(SWAPS))
    return 0