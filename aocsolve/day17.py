"""Three-bit computer: run a program and find a register value that reproduces it."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Computer:
    """Registers, program and instruction pointer of the three-bit machine."""

    a: int
    b: int
    c: int
    program: list[int] = field(default_factory=list)
    ip: int = 0

    @property
    def halted(self) -> bool:
        """True once the instruction pointer has run off the program."""
        return self.ip + 1 >= len(self.program)

    def _combo(self, operand: int) -> int:
        if operand < 4:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand {operand}")

    def step(self) -> int | None:
        """Execute one instruction; return its output value, if any."""
        if self.halted:
            return None
        opcode = self.program[self.ip]
        operand = self.program[self.ip + 1]
        next_ip = self.ip + 2
        out = None

        match opcode:
            case 0:
                self.a >>= self._combo(operand)
            case 1:
                self.b ^= operand
            case 2:
                self.b = self._combo(operand) % 8
            case 3:
                if self.a > 0:
                    next_ip = operand
            case 4:
                self.b ^= self.c
            case 5:
                out = self._combo(operand) % 8
            case 6:
                self.b = self.a >> self._combo(operand)
            case 7:
                self.c = self.a >> self._combo(operand)
            case _:
                raise ValueError(f"invalid opcode {opcode}")

        self.ip = next_ip
        return out


def parse(text: str) -> Computer:
    """Three register lines followed by the program line."""
    values = [line.split(": ", 1)[1] for line in text.splitlines() if len(line) > 1]
    if len(values) < 4:
        raise ValueError("expected three registers and a program")
    return Computer(
        a=int(values[0]),
        b=int(values[1]),
        c=int(values[2]),
        program=[int(x) for x in values[3].split(",")],
    )


def run(computer: Computer) -> str:
    """Run the computer until it halts; return the outputs comma-separated."""
    outputs = []
    while not computer.halted:
        out = computer.step()
        if out is not None:
            outputs.append(str(out))
    return ",".join(outputs)


def find_quine_register(program: Sequence[int]) -> int | None:
    """Smallest register A that makes the puzzle's program print the given values.

    The program is the loop that outputs (x ^ (A >> (x ^ 1)) ^ 5) % 8 for
    x = A % 8 and then divides A by 8, so A is built three bits at a time
    from the last output backwards.
    """
    targets = list(reversed(program))

    def encode(min_digit: int, a: int, k: int) -> int | None:
        if k == len(targets):
            return a
        for x in range(min_digit, 8):
            candidate = a * 8 + x
            if (x ^ (candidate >> (x ^ 1)) ^ 5) % 8 == targets[k]:
                found = encode(0, candidate, k + 1)
                if found is not None:
                    return found
        return None

    return encode(1, 0, 0)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the three-bit computer.")
    parser.add_argument("input", nargs="?", default="17.txt", help="puzzle input file")
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)

    computer = parse(Path(args.input).read_text())
    if args.part == 1:
        print(run(computer))
    else:
        print(find_quine_register(computer.program))
    return 0