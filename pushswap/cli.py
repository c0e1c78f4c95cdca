"""Command that prints instructions sorting the numbers given as arguments."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import ArgumentError, parse_arguments
from pushswap.sorting import sort_values


def main(argv: Sequence[str] | None = None) -> int:
    """Print, one per line, the instructions that sort the given numbers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stdout.write("No arguments\n")
        return 0
    try:
        values = parse_arguments(args)
    except ArgumentError:
        sys.stdout.write("Error\n")
        return 255
    sys.stdout.write("".join(f"{instruction.value}\n" for instruction in sort_values(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())