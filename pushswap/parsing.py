"""Validation and parsing of the command-line numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack."""


def split_words(text: str) -> list[str]:
    """Split on single spaces, dropping the empty pieces."""
    return [word for word in text.split(" ") if word]


def validate_argument(arg: str) -> None:
    """Check one argument holds only space-separated signed integers."""
    if not arg or all(ch in " \t" for ch in arg):
        raise InputError(f"empty argument: {arg!r}")
    for word in split_words(arg):
        if not _NUMBER.fullmatch(word):
            raise InputError(f"not a number: {word!r}")


def validate_arguments(args: Iterable[str]) -> None:
    """Check every argument in turn."""
    for arg in args:
        validate_argument(arg)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Return the numbers of all arguments, in order.

    Every argument is validated first; numbers outside the 32-bit signed
    range, repeated numbers, or no numbers at all are rejected.
    """
    args = list(args)
    validate_arguments(args)
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for word in split_words(arg):
            value = int(word)
            if not INT_MIN <= value <= INT_MAX:
                raise InputError(f"out of range: {word}")
            if value in seen:
                raise InputError(f"duplicate number: {value}")
            seen.add(value)
            numbers.append(value)
    if not numbers:
        raise InputError("no numbers given")
    return numbers