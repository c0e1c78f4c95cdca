"""Finding a short list of instructions that sorts stack ``a``."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.recorder import CommandRecorder
from pushswap.stacks import Element, Instruction, Stacks, rotation_sorted


def _half(number: int) -> int:
    """Halve ``number``, rounding toward zero."""
    quotient = abs(number) // 2
    return quotient if number >= 0 else -quotient


def _max_order(stack: Sequence[Element]) -> int:
    return max((element.order for element in stack), default=-1)


def _min_order(stack: Sequence[Element]) -> int:
    return min((element.order for element in stack), default=-1)


class Sorter:
    """Sort the given numbers on stack ``a``, recording every instruction.

    ``values`` are given top first. Each element gets its rank (``order``)
    among all numbers; ``next_order`` is the rank that should go to the bottom
    of ``a`` next, and ``lots`` tags groups of elements moved back to ``a``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        numbers = list(values)
        self.stacks = Stacks(numbers)
        self.stacks.assign_orders(sorted(numbers))
        self.recorder = CommandRecorder(self.stacks)
        self.size = len(numbers)
        self.next_order = 1
        self.mid_order = self.size // 2 + 2
        self.lots = 0
        self._finished = False

    @property
    def a(self) -> list[Element]:
        return self.stacks.a

    @property
    def b(self) -> list[Element]:
        return self.stacks.b

    def _do(self, *instructions: Instruction) -> None:
        for instruction in instructions:
            self.recorder.do(instruction)

    def _is_min(self, value: int) -> bool:
        return all(element.value >= value for element in self.a)

    def _is_max(self, value: int) -> bool:
        return all(element.value <= value for element in self.a)

    def _check_finish(self) -> bool:
        if not self.a:
            return False
        if self.stacks.is_finished():
            self._finished = True
        return self._finished

    def _b_threshold(self) -> int:
        return _half(self.mid_order - self.next_order + 1) + self.next_order

    def run(self) -> list[Instruction]:
        """Sort the stacks and return the instructions to print, in order."""
        if self.size < 2:
            raise ValueError("at least two numbers are needed to sort")
        if self.size == 2:
            self._do(Instruction.SA)
        elif self.size == 3:
            self.sort_three()
        elif self.size == 4:
            self.sort_four()
        elif self.size == 5:
            self.sort_five()
        else:
            self.half_to_b()
            self.big_sort()
        self.recorder.flush()
        return list(self.recorder.emitted)

    def sort_three(self) -> None:
        """Sort ``a`` when it holds exactly three elements; otherwise do nothing."""
        if len(self.a) != 3:
            return
        top, middle, bottom = self.a[-1].value, self.a[-2].value, self.a[0].value
        if self._is_min(top) and self._is_max(bottom):
            return
        if self._is_max(top) and self._is_min(bottom):
            self._do(Instruction.SA, Instruction.RRA)
        elif self._is_max(middle) and self._is_min(top):
            self._do(Instruction.RRA, Instruction.SA)
        elif self._is_max(bottom) and self._is_min(middle):
            self._do(Instruction.SA)
        elif self._is_max(top) and self._is_min(middle):
            self._do(Instruction.RA)
        elif self._is_max(middle) and self._is_min(bottom):
            self._do(Instruction.RRA)

    def _four_single_move(self) -> bool:
        top, second, bottom = self.a[-1].value, self.a[-2].value, self.a[0].value
        if top > bottom and rotation_sorted(self.a, top):
            self._do(Instruction.RA)
            return True
        if second < top and rotation_sorted(self.a, second):
            self._do(Instruction.SA)
            return True
        if bottom < top and rotation_sorted(self.a, bottom):
            self._do(Instruction.RRA)
            return True
        return False

    def _four_push_min(self) -> bool:
        second, bottom = self.a[-2].value, self.a[0].value
        if self._is_min(self.a[-1].value):
            self._do(Instruction.PB)
        elif self._is_min(second):
            self._do(Instruction.SA, Instruction.PB)
        elif self._is_min(bottom):
            self._do(Instruction.RRA, Instruction.PB)
        else:
            return False
        return True

    def sort_four(self) -> None:
        """Sort a four-element stack ``a``."""
        if self._four_single_move():
            return
        if self._four_push_min():
            self.sort_three()
            self._do(Instruction.PA)
        else:
            self._do(Instruction.RRA, Instruction.RRA, Instruction.PB)
            self.sort_three()
            self._do(Instruction.PA)

    def sort_five(self) -> None:
        """Sort a five-element stack ``a``."""
        top, second, bottom = self.a[-1].value, self.a[-2].value, self.a[0].value
        if second < top and rotation_sorted(self.a, second):
            self._do(Instruction.SA)
        elif top > bottom and rotation_sorted(self.a, top):
            self._do(Instruction.RA)
        elif bottom < top and rotation_sorted(self.a, bottom):
            self._do(Instruction.RRA)
        else:
            self._sort_five_rest()

    def _sort_five_rest(self) -> None:
        while len(self.a) >= 4:
            if self.a[-1].order < 3:
                self._do(Instruction.PB)
            else:
                self._do(Instruction.RA)
                if (
                    rotation_sorted(self.a, self.a[0].value)
                    and self.a[0].value > self.a[1].value
                    and not self.b
                ):
                    return
        if self.b and self.b[-1].order == 1 and len(self.b) > 1:
            self._do(Instruction.SB)
        self.sort_three()
        self._do(Instruction.PA, Instruction.PA)

    def half_to_b(self) -> None:
        """Push the lower half of the orders to ``b``."""
        self.mid_order = _half(_max_order(self.a)) + 1
        counter = self.mid_order
        while self.a and self.a[0].order <= self.mid_order and self.a[0].order < 2:
            self._do(Instruction.RRA, Instruction.PB)
            counter -= 1
        while counter > 0:
            if self.a[-1].order > self.mid_order:
                self._do(Instruction.RA)
                if len(self.b) > 1 and self.b[-1].order < _half(self.mid_order) + 1:
                    self._do(Instruction.RB)
            else:
                counter -= 1
                self._do(Instruction.PB)

    def big_sort(self) -> None:
        """Sort stacks holding more than five numbers in total."""
        while not self._check_finish():
            while self.b:
                self.get_from_b()
            if self._check_finish():
                continue
            if self.stacks.top_lot_size() == 1:
                self.check_top("a")
            elif self.a[-1].lot == 0 and self.stacks.top_lot_size() > 30:
                self.work_zero_lot()
            elif self.a[-1].lot == self.a[-2].lot:
                self.check_two_in_lot()
                self.lots = self.a[-1].lot
                self.get_lot_from_a()
            while self.b:
                self.get_from_b()

    def get_lot_from_a(self) -> None:
        """Move the top lot of ``a`` to ``b``, keeping elements already in place."""
        if self.a[-1].lot == -1:
            return
        low = self.stacks.top_lot_min_order()
        high = _max_order(self.a)
        self.mid_order = _half(high - low + 1) + low
        while self.a and self.a[-1].lot == self.lots:
            top = self.a[-1]
            if top.order == self.next_order:
                self.next_order += 1
                top.lot = -1
                self._do(Instruction.RA)
                if self.b and self.b[-1].order < self._b_threshold():
                    self._do(Instruction.RB)
            else:
                self._do(Instruction.PB)

    def get_from_b(self) -> None:
        """Bring the upper half of ``b`` back to ``a``, or all of it when small."""
        low = _min_order(self.b)
        high = _max_order(self.b)
        self.lots = self.a[-1].lot + 1
        self.mid_order = _half(high - low + 1) + low
        if len(self.b) > 5:
            self.split_b(high - self.mid_order)
        while self.b and len(self.b) <= 5:
            if not self.check_top("b"):
                self.lots = self.a[-1].lot + 1
                self._do(Instruction.PA)

    def split_b(self, counter: int) -> None:
        """Push ``counter`` elements above the middle order from ``b`` to ``a``."""
        while counter > 0 and self.b:
            while self.check_top("b"):
                pass
            if self.b and self.b[-1].order > self.mid_order:
                self.b[-1].lot = self.lots
                self._do(Instruction.PA)
                counter -= 1
            elif self.b and self.b[-1].order <= self.mid_order:
                self._do(Instruction.RB)

    def work_zero_lot(self) -> None:
        """Split a large untouched lot on top of ``a`` around its middle order."""
        low = self.stacks.top_lot_min_order()
        self.mid_order = _half(_max_order(self.a) - low + 1) + low
        counter = self.mid_order - low + 1
        while self.a and self.a[-1].lot == 0 and counter >= 0:
            if self.a[-1].order > self.mid_order:
                self._do(Instruction.RA)
                if self.b and self.b[-1].order < self._b_threshold():
                    self._do(Instruction.RB)
            else:
                counter -= 1
                self._do(Instruction.PB)
        while self.a and self.a[0].lot != -1:
            self._do(Instruction.RRA)
            if self.b and self.b[-1].order < self._b_threshold():
                self._do(Instruction.RRB)

    def check_two_in_lot(self) -> None:
        """Order a two-element top lot of ``a`` and settle what is in place."""
        if self.stacks.top_lot_size() != 2:
            return
        if self.a[-1].order > self.a[-2].order:
            self._do(Instruction.SA)
            if len(self.b) >= 2 and self.b[-1].order > self.b[-2].order:
                self._do(Instruction.SB)
        while self.check_top("a"):
            pass

    def check_top(self, side: str) -> bool:
        """Settle the next wanted element if it is near the top of ``side``.

        ``side`` is ``"a"`` or ``"b"``. Returns whether an element was moved
        to the bottom of ``a``.
        """
        if side == "a":
            return bool(self.a) and self._check_top_a()
        if side == "b":
            return bool(self.b) and (self._check_top_b_pair() or self._check_top_b_single())
        raise ValueError(f"unknown side: {side!r}")

    def _rotate_b_if_low(self) -> None:
        if self.b and self.b[-1].order < _half(self.mid_order):
            self._do(Instruction.RB)

    def _check_top_a(self) -> bool:
        if (
            len(self.a) >= 2
            and self.a[-2].order == self.next_order
            and self.a[-1].order == self.next_order + 1
        ):
            self.a[-2].lot = -1
            self.next_order += 1
            self._do(Instruction.SA)
            if self.b and self.b[-1].order != self.next_order:
                self._do(Instruction.SB)
            self._do(Instruction.RA)
            self._rotate_b_if_low()
            return True
        if self.a and self.a[-1].order == self.next_order:
            self.next_order += 1
            self.a[-1].lot = -1
            self._do(Instruction.RA)
            self._rotate_b_if_low()
            return True
        return False

    def _check_top_b_single(self) -> bool:
        if self.b and self.b[-1].order == self.next_order:
            self.next_order += 1
            self.b[-1].lot = -1
            self._do(Instruction.PA, Instruction.RA)
            self._rotate_b_if_low()
            return True
        if self.b and self.b[0].order == self.next_order:
            self.next_order += 1
            self.b[0].lot = -1
            self._do(Instruction.RRB, Instruction.PA, Instruction.RA)
            self._rotate_b_if_low()
            return True
        return False

    def _check_top_b_pair(self) -> bool:
        if not (
            len(self.b) >= 2
            and self.b[-2].order == self.next_order
            and self.b[-1].order == self.next_order + 1
        ):
            return False
        self.b[-2].lot = -1
        self.next_order += 1
        self._do(Instruction.SB)
        if (
            len(self.a) >= 2
            and self.a[-1].order != self.next_order
            and self.a[-1].lot != -1
            and self.a[-1].lot == self.a[-2].lot
        ):
            self._do(Instruction.SA)
        self._do(Instruction.PA, Instruction.RA)
        self._rotate_b_if_low()
        return True


def sort_values(values: Iterable[int]) -> list[Instruction]:
    """Return the instructions that sort ``values`` (top first).

    Numbers that are already in ascending order need no instructions.
    """
    numbers = list(values)
    if all(lower < upper for lower, upper in zip(numbers, numbers[1:])):
        return []
    return Sorter(numbers).run()