"""Recording instructions as they are applied, merging pairs that can combine."""

from __future__ import annotations

from pushswap.stacks import Instruction, Stacks

_PARTNERS = {
    Instruction.RA: Instruction.RB,
    Instruction.RB: Instruction.RA,
    Instruction.RRA: Instruction.RRB,
    Instruction.RRB: Instruction.RRA,
    Instruction.SA: Instruction.SB,
    Instruction.SB: Instruction.SA,
    Instruction.PA: Instruction.PB,
    Instruction.PB: Instruction.PA,
}

_MERGED = {
    Instruction.RA: Instruction.RR,
    Instruction.RB: Instruction.RR,
    Instruction.RRA: Instruction.RRR,
    Instruction.RRB: Instruction.RRR,
    Instruction.SA: Instruction.SS,
    Instruction.SB: Instruction.SS,
    Instruction.PA: Instruction.NO,
    Instruction.PB: Instruction.NO,
}


class CommandRecorder:
    """Apply instructions to ``stacks`` and record the ones to print.

    The latest instruction is held back; when the next one is its partner on
    the other stack the two merge (``ra``+``rb`` into ``rr``, ``sa``+``sb``
    into ``ss``, ``rra``+``rrb`` into ``rrr``) or, for ``pa`` and ``pb``,
    cancel out.
    """

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.pending = Instruction.NO
        self.emitted: list[Instruction] = []

    def do(self, instruction: Instruction) -> None:
        """Apply one single-stack instruction and record it."""
        instruction = Instruction(instruction)
        if instruction not in _PARTNERS:
            raise ValueError(f"cannot record instruction {instruction.name}")
        self.stacks.apply(instruction)
        if self.pending is Instruction.NO:
            self.pending = instruction
        elif self.pending is _PARTNERS[instruction]:
            self.pending = _MERGED[instruction]
        else:
            self.emitted.append(self.pending)
            self.pending = instruction

    def flush(self) -> None:
        """Record the held-back instruction, if any."""
        if self.pending is not Instruction.NO:
            self.emitted.append(self.pending)
        self.pending = Instruction.NO

    def output(self) -> str:
        """Text of the recorded instructions, one per line."""
        return "".join(f"{instruction.value}\n" for instruction in self.emitted)