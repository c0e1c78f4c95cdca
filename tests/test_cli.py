import random

import pytest

from pushswap.checker import run_checker
from pushswap.cli import main

NAMES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _run(args, capsys):
    code = main(args)
    return code, capsys.readouterr().out


def test_no_arguments(capsys):
    assert _run([], capsys) == (0, "No arguments\n")


@pytest.mark.parametrize(
    "args", [["1", "1"], ["1a"], [""], ["  "], ["2147483648"], ["-2147483649"], ["3 2 3"]]
)
def test_bad_arguments(args, capsys):
    assert _run(args, capsys) == (255, "Error\n")


def test_sorted_input_prints_nothing(capsys):
    assert _run(["1", "2", "3"], capsys) == (0, "")


def test_single_number_prints_nothing(capsys):
    assert _run(["42"], capsys) == (0, "")


def test_two_numbers(capsys):
    assert _run(["2", "1"], capsys) == (0, "sa\n")


def test_three_numbers_reversed(capsys):
    assert _run(["3", "2", "1"], capsys) == (0, "sa\nrra\n")


def test_extreme_values_accepted(capsys):
    code, out = _run(["2147483647", "-2147483648"], capsys)
    assert code == 0
    assert run_checker([2147483647, -2147483648], out.splitlines(keepends=True)) is True


@pytest.mark.parametrize(
    "args",
    [["3 1", "2"], ["5 4 3 2 1"], ["1", "3", "2", "4"], ["+7", "-3", "0", "12", "5"]],
)
def test_mixed_arguments_sort(args, capsys):
    code, out = _run(args, capsys)
    values = [int(word) for arg in args for word in arg.split()]
    assert code == 0
    assert set(out.split()) <= NAMES
    assert run_checker(values, out.splitlines(keepends=True)) is True


@pytest.mark.parametrize("size,seed", [(6, 1), (7, 2), (10, 3), (20, 4), (50, 5)])
def test_random_inputs_sort(size, seed, capsys):
    values = list(range(-size, size * 3, 4))[:size]
    random.Random(seed).shuffle(values)
    code, out = _run([str(value) for value in values], capsys)
    assert code == 0
    assert set(out.split()) <= NAMES
    assert run_checker(values, out.splitlines(keepends=True)) is True