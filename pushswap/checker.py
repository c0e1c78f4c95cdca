"""Checking that a list of instructions read from input sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from pushswap.parsing import ArgumentError, parse_arguments
from pushswap.stacks import Instruction, Stacks

_COMMANDS = {
    instruction.value: instruction
    for instruction in Instruction
    if instruction is not Instruction.NO
}


class CommandError(ValueError):
    """Raised when an input line is not a known instruction."""


def apply_command(stacks: Stacks, command: str) -> None:
    """Carry out the instruction named by ``command`` on ``stacks``."""
    try:
        instruction = _COMMANDS[command]
    except KeyError:
        raise CommandError(f"unknown command: {command!r}") from None
    stacks.apply(instruction)


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply the instruction ``lines`` to ``values`` and tell whether they end sorted.

    Only lines ending in a newline count; a last line left unterminated at the
    end of the input is ignored. Reading stops at the first unknown command,
    which raises :class:`CommandError`.
    """
    stacks = Stacks(values)
    for line in lines:
        if not line.endswith("\n"):
            break
        apply_command(stacks, line[:-1])
    return stacks.is_finished()


def _say(text: str) -> None:
    sys.stdout.write(f"{text}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _say("No arguments")
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        _say("Error")
        return 255
    try:
        finished = run_checker(values, sys.stdin)
    except CommandError:
        _say("Error")
        return 1
    except OSError:
        _say("Error")
        return 255
    _say("OK" if finished else "KO")
    return 1


if __name__ == "__main__":
    sys.exit(main())