"""The two stacks of the puzzle and the instructions that move their elements.

Each stack is held as a list of :class:`Element` objects with the bottom of the
stack first and the top of the stack last.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class Instruction(Enum):
    """An instruction on the stacks; its value is the name the program prints."""

    NO = ""
    RA = "ra"
    RB = "rb"
    RR = "rr"
    PA = "pa"
    PB = "pb"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    SA = "sa"
    SB = "sb"
    SS = "ss"


@dataclass
class Element:
    """One number on a stack, with its rank among all numbers and its lot tag."""

    value: int
    order: int = -1
    lot: int = 0


def _non_increasing(values: Sequence[int]) -> bool:
    return all(lower <= upper for upper, lower in zip(values, values[1:]))


def rotation_sorted(stack: Sequence[Element], value: int) -> bool:
    """Tell whether ``stack`` (bottom first) is ordered around ``value``.

    The stack is cut just below the first element above the bottom that holds
    ``value`` (or not at all if there is none); both parts must then have
    values that do not increase from bottom to top.
    """
    values = [element.value for element in stack]
    if not values:
        raise ValueError("cannot inspect an empty stack")
    cut = next(
        (index - 1 for index in range(1, len(values)) if values[index] == value),
        len(values) - 1,
    )
    return _non_increasing(values[: cut + 1]) and _non_increasing(values[cut + 1 :])


class Stacks:
    """Stack ``a`` filled with the given numbers and an empty stack ``b``.

    ``values`` are given top first, so the first number starts on top of ``a``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[Element] = [Element(value) for value in reversed(list(values))]
        self.b: list[Element] = []

    @staticmethod
    def _swap(stack: list[Element]) -> None:
        if len(stack) >= 2:
            stack[-1], stack[-2] = stack[-2], stack[-1]

    @staticmethod
    def _rotate(stack: list[Element]) -> None:
        if len(stack) >= 2:
            stack.insert(0, stack.pop())

    @staticmethod
    def _reverse_rotate(stack: list[Element]) -> None:
        if len(stack) >= 2:
            stack.append(stack.pop(0))

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._swap(self.b)

    def ss(self) -> None:
        """Do ``sa`` and ``sb``."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b:
            self.a.append(self.b.pop())

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a:
            self.b.append(self.a.pop())

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)

    def rr(self) -> None:
        """Do ``ra`` and ``rb``."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do ``rra`` and ``rrb``."""
        self.rra()
        self.rrb()

    def apply(self, instruction: Instruction) -> None:
        """Carry out one instruction; ``Instruction.NO`` does nothing."""
        actions = {
            Instruction.NO: lambda: None,
            Instruction.RA: self.ra,
            Instruction.RB: self.rb,
            Instruction.RR: self.rr,
            Instruction.PA: self.pa,
            Instruction.PB: self.pb,
            Instruction.RRA: self.rra,
            Instruction.RRB: self.rrb,
            Instruction.RRR: self.rrr,
            Instruction.SA: self.sa,
            Instruction.SB: self.sb,
            Instruction.SS: self.ss,
        }
        actions[Instruction(instruction)]()

    def assign_orders(self, sorted_values: Sequence[int]) -> None:
        """Give every element of ``a`` its 1-based rank in ``sorted_values``."""
        ranks: dict[int, int] = {}
        for position, value in enumerate(sorted_values, start=1):
            ranks.setdefault(value, position)
        for element in self.a:
            try:
                element.order = ranks[element.value]
            except KeyError:
                raise ValueError(f"value {element.value} is not among the sorted values") from None

    def is_finished(self) -> bool:
        """Tell whether ``a`` holds every number in ascending order from the top."""
        if not self.a:
            return False
        top = self.a[-1].value
        return (
            all(element.value >= top for element in self.a)
            and rotation_sorted(self.a, top)
            and not self.b
        )

    def _top_lot(self) -> list[Element]:
        run = [self.a[-1]]
        for element in reversed(self.a[:-1]):
            if element.lot != run[-1].lot:
                break
            run.append(element)
        return run

    def top_lot_size(self) -> int:
        """Count the elements on top of ``a`` that share the top element's lot."""
        if not self.a:
            raise IndexError("stack a is empty")
        return len(self._top_lot())

    def top_lot_min_order(self) -> int:
        """Smallest order in the top lot of ``a``, or -1 when ``a`` is empty."""
        if not self.a:
            return -1
        return min(element.order for element in self._top_lot())

    def a_values(self) -> list[int]:
        """Values of ``a``, top first."""
        return [element.value for element in reversed(self.a)]

    def b_values(self) -> list[int]:
        """Values of ``b``, top first."""
        return [element.value for element in reversed(self.b)]