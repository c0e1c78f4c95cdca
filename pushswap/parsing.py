"""Reading the numbers of the puzzle from command-line arguments."""

from __future__ import annotations

from typing import Iterable

INT_MAX = 2147483647
_LEADING_SPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


class ArgumentError(ValueError):
    """Raised when the arguments do not form a valid list of distinct integers."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def parse_int(token: str) -> int:
    """Read a signed 32-bit integer from ``token``.

    Leading whitespace and one sign are allowed; anything after them must be
    decimal digits. A bare sign reads as zero.
    """
    rest = token.lstrip(_LEADING_SPACE)
    sign = -1 if rest.startswith("-") else 1
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    if any(char not in _DIGITS for char in rest):
        raise ArgumentError(f"not a number: {token!r}")
    number = int(rest) if rest else 0
    limit = INT_MAX if sign == 1 else INT_MAX + 1
    if number > limit:
        raise ArgumentError(f"out of range: {token!r}")
    return sign * number


def count_numbers(argument: str) -> int:
    """Count the numbers in one argument, checking that each one is valid."""
    if not argument:
        raise ArgumentError("empty argument")
    words = split_words(argument)
    if not words:
        raise ArgumentError("argument holds no numbers")
    for word in words:
        parse_int(word)
    return len(words)


def parse_arguments(arguments: Iterable[str]) -> list[int]:
    """Read every number from ``arguments`` in order, rejecting duplicates."""
    arguments = list(arguments)
    for argument in arguments:
        count_numbers(argument)
    values: list[int] = []
    seen: set[int] = set()
    for argument in arguments:
        for word in split_words(argument):
            value = parse_int(word)
            if value in seen:
                raise ArgumentError(f"duplicate number: {value}")
            seen.add(value)
            values.append(value)
    return values


def sorted_copy(values: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order, leaving the input untouched."""
    return sorted(values)