"""Two-stack model of the push-swap puzzle and its eleven operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """An instruction acting on stack A, stack B or both."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def is_sorted(values: Iterable[int]) -> bool:
    """Return True when the values never decrease from first to last."""
    return all(left <= right for left, right in pairwise(values))


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque[int], destination: deque[int]) -> bool:
    if not source:
        return False
    destination.appendleft(source.popleft())
    return True


class Stacks:
    """Stack A holding the numbers, an empty stack B, and a log of operations.

    The top of each stack is its first element.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"

    def apply(self, op: Operation | str, record: bool = False) -> None:
        """Carry out one operation; when recording, log it if it took effect.

        Single-stack operations that find too few elements do nothing and are
        not logged; the combined ss, rr and rrr are always logged.
        """
        op = Operation(op)
        a, b = self.a, self.b
        match op:
            case Operation.SA:
                done = _swap(a)
            case Operation.SB:
                done = _swap(b)
            case Operation.SS:
                _swap(a)
                _swap(b)
                done = True
            case Operation.PA:
                done = _push(b, a)
            case Operation.PB:
                done = _push(a, b)
            case Operation.RA:
                done = _rotate(a)
            case Operation.RB:
                done = _rotate(b)
            case Operation.RR:
                _rotate(a)
                _rotate(b)
                done = True
            case Operation.RRA:
                done = _reverse_rotate(a)
            case Operation.RRB:
                done = _reverse_rotate(b)
            case Operation.RRR:
                _reverse_rotate(a)
                _reverse_rotate(b)
                done = True
        if record and done:
            self.operations.append(op)

    def run(self, ops: Iterable[Operation | str]) -> None:
        """Carry out a sequence of operations without logging them."""
        for op in ops:
            self.apply(op)

    def is_sorted(self) -> bool:
        """Return True when stack A is in ascending order from the top."""
        return is_sorted(self.a)

    def is_solved(self) -> bool:
        """Return True when stack B is empty and stack A is sorted."""
        return not self.b and self.is_sorted()