# pushswap

A two-stack sorting puzzle. Stack A starts with a list of distinct integers and
stack B starts empty. The goal is to leave A sorted, smallest on top, with B
empty, using only these instructions:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of A, of B, or of both |
| `pa`, `pb` | move the top element of B onto A, or of A onto B |
| `ra`, `rb`, `rr` | rotate A, B, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse-rotate A, B, or both: the bottom element goes to the top |

An instruction that cannot act (swapping or rotating a stack with fewer than
two elements, pushing from an empty stack) does nothing.

## Installation

```
pip install .
```

## Producing instructions

```
push-swap 3 2 5 1 4
```

The first number is the top of stack A. The command prints one instruction
per line. When an `sa`/`sb`, `ra`/`rb` or `rra`/`rrb` pair follows one
another directly, the pair is printed as `ss`, `rr` or `rrr`; a `pa`
directly followed by `pb`, or the reverse, is dropped. If the numbers are
already in ascending order, nothing is printed.

Numbers are separated by spaces and may be given as separate arguments or
together in one quoted argument: `push-swap "3 2 5 1 4"`. Each number may have
one leading `+` or `-`.

- With no arguments the command prints `No arguments` and exits with status 0.
- If an argument is empty, holds something other than a number, is outside the
  32-bit signed range, or repeats another number, it prints `Error` and exits
  with status 255.

## Checking instructions

```
push-swap 3 2 5 1 4 | pushswap-checker 3 2 5 1 4
```

`pushswap-checker` reads instructions from standard input, one per line, and
applies them to the given numbers. It prints `OK` if stack A ends up sorted
with B empty, and `KO` otherwise; in both cases it exits with status 1. A last
line with no newline after it is ignored.

- An unknown instruction prints `Error` (exit status 1).
- Invalid arguments print `Error` (exit status 255), using the same rules as
  `push-swap`.
- With no arguments it prints `No arguments` (exit status 0).

## Using it from Python

```python
from pushswap.sorting import sort_values
from pushswap.checker import run_checker

instructions = sort_values([3, 2, 5, 1, 4])    # list of Instruction members
names = [instruction.value for instruction in instructions]
print(names)                                   # e.g. ['pb', 'pb', ...]
print(run_checker([3, 2, 5, 1, 4], [f"{name}\n" for name in names]))  # True
```

- `pushswap.stacks.Instruction` is an enum whose values are the instruction
  names (`"sa"`, `"rra"`, ...), plus `Instruction.NO` for no instruction.
- `pushswap.stacks.Stacks(values)` holds the two stacks, with one method per
  instruction (`sa`, `pb`, `rra`, ...), `apply(instruction)`, `is_finished()`,
  and `a_values()` / `b_values()` returning each stack top first.
- `pushswap.sorting.Sorter(values).run()` sorts the numbers and returns the
  instructions; `sort_values` does the same but returns an empty list for
  numbers already in order. `Sorter` needs at least two numbers.
- `pushswap.recorder.CommandRecorder` applies instructions to a `Stacks` and
  records them, merging pairs as described above.
- `pushswap.checker.apply_command(stacks, name)` applies one instruction by
  name and raises `pushswap.checker.CommandError` for an unknown name.
- `pushswap.parsing.parse_arguments` turns command-line arguments into
  integers and raises `pushswap.parsing.ArgumentError` when they are invalid.

## Running the tests

```
pip install ".[test]"
pytest
```