"""Command that checks whether a list of operations sorts its arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from .parsing import InputError, parse_numbers
from .stacks import Operation, Stacks


class CommandError(ValueError):
    """Raised for a line that is not exactly one operation and a newline."""


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a stream, newlines kept; the last may lack one."""
    yield from iter(stream.readline, "")


def parse_command(line: str) -> Operation:
    """Return the operation named by a newline-terminated line."""
    name, newline, rest = line.partition("\n")
    if not newline or rest:
        raise CommandError(f"invalid command: {line!r}")
    try:
        return Operation(name)
    except ValueError:
        raise CommandError(f"invalid command: {line!r}") from None


def check(numbers: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply each line's operation; return True when the stacks end solved."""
    stacks = Stacks(numbers)
    for line in lines:
        stacks.apply(parse_command(line))
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print ok or ko."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_numbers(args)
        solved = check(numbers, read_lines(sys.stdin))
    except (InputError, CommandError):
        print("Error", file=sys.stderr)
        return 1
    print("ok" if solved else "ko")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())