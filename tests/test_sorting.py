import itertools
import random

import pytest

from pushswap.sorting import Sorter, sort_values
from pushswap.stacks import Instruction, Stacks


def replay(values, instructions):
    stacks = Stacks(values)
    for instruction in instructions:
        stacks.apply(instruction)
    return stacks


def assert_sorts(values):
    instructions = sort_values(values)
    stacks = replay(values, instructions)
    assert stacks.a_values() == sorted(values)
    assert stacks.b_values() == []
    assert Instruction.NO not in instructions


@pytest.mark.parametrize(
    "values",
    [list(p) for size in range(2, 6) for p in itertools.permutations(range(1, size + 1))],
)
def test_small_permutations_are_sorted(values):
    assert_sorts(values)


@pytest.mark.parametrize("size", [6, 7, 8, 10, 20, 50, 100])
def test_larger_inputs_are_sorted(size):
    values = random.Random(size).sample(range(-500, 500), size)
    assert_sorts(values)


def test_reversed_input_is_sorted():
    assert_sorts(list(range(12, 0, -1)))


def test_already_sorted_needs_nothing():
    assert sort_values([-3, 0, 7, 9]) == []
    assert sort_values([42]) == []


def test_pinned_small_cases():
    assert sort_values([2, 1]) == [Instruction.SA]
    assert sort_values([3, 2, 1]) == [Instruction.SA, Instruction.RRA]
    assert sort_values([2, 3, 1]) == [Instruction.RRA]


def test_input_is_not_modified():
    values = [5, 1, 4, 2, 3]
    sort_values(values)
    assert values == [5, 1, 4, 2, 3]


def test_run_output_matches_recorder_text():
    sorter = Sorter([4, 9, 1, 7, 3, 8, 2])
    instructions = sorter.run()
    assert sorter.recorder.output() == "".join(f"{i.value}\n" for i in instructions)
    assert sorter.stacks.a_values() == [1, 2, 3, 4, 7, 8, 9]


def test_run_rejects_too_few_numbers():
    with pytest.raises(ValueError):
        Sorter([1]).run()


def test_sort_three_directly():
    sorter = Sorter([30, 10, 20])
    sorter.sort_three()
    assert sorter.stacks.a_values() == [10, 20, 30]


def test_sort_three_ignores_other_sizes():
    sorter = Sorter([4, 3, 2, 1])
    sorter.sort_three()
    sorter.recorder.flush()
    assert sorter.recorder.emitted == []
    assert sorter.stacks.a_values() == [4, 3, 2, 1]


def test_sort_four_and_five_directly():
    four = Sorter([3, 1, 4, 2])
    four.sort_four()
    assert four.stacks.a_values() == [1, 2, 3, 4]
    five = Sorter([5, 3, 1, 4, 2])
    five.sort_five()
    assert five.stacks.a_values() == [1, 2, 3, 4, 5]
    assert five.stacks.b_values() == []


def test_half_to_b_splits_on_middle_order():
    sorter = Sorter(random.Random(7).sample(range(100), 20))
    sorter.half_to_b()
    mid = sorter.mid_order
    assert all(element.order <= mid for element in sorter.stacks.b)
    assert all(element.order > mid for element in sorter.stacks.a)
    assert len(sorter.stacks.a) + len(sorter.stacks.b) == 20


def test_check_top_moves_next_element_to_bottom():
    sorter = Sorter([1, 3, 2])
    assert sorter.check_top("a") is True
    assert sorter.stacks.a[0].value == 1
    assert sorter.stacks.a[0].lot == -1
    assert sorter.next_order == 2
    sorter.recorder.flush()
    assert sorter.recorder.emitted == [Instruction.RA]


def test_check_top_on_empty_b_is_false():
    sorter = Sorter([3, 1, 2])
    assert sorter.check_top("b") is False
    assert sorter.stacks.a_values() == [3, 1, 2]


def test_check_top_rejects_unknown_side():
    with pytest.raises(ValueError):
        Sorter([2, 1, 3]).check_top("c")


def test_check_two_in_lot_needs_lot_of_two():
    sorter = Sorter([3, 1, 2])
    sorter.check_two_in_lot()
    sorter.recorder.flush()
    assert sorter.recorder.emitted == []
    assert sorter.stacks.a_values() == [3, 1, 2]


def test_get_lot_from_a_skips_settled_top():
    sorter = Sorter([2, 3, 1, 4, 6, 5])
    sorter.stacks.a[-1].lot = -1
    sorter.get_lot_from_a()
    sorter.recorder.flush()
    assert sorter.recorder.emitted == []
    assert sorter.stacks.a_values() == [2, 3, 1, 4, 6, 5]