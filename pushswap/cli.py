"""Command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_numbers
from .sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; report invalid input on standard error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    for op in solve(numbers):
        print(op)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())