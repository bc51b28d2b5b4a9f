"""Sorting stack A with the fewest practical operations.

Small stacks are handled directly; larger ones move all but three numbers
to stack B, always choosing the number that is cheapest to place next to
its closest smaller neighbour in B. The numbers then return to A, each
above its closest larger neighbour.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .stacks import Operation, Stacks


def _above_median(index: int, length: int) -> bool:
    return index <= length // 2


def _moves_to_top(index: int, length: int) -> int:
    return index if _above_median(index, length) else length - index


def _bring_to_top(
    stacks: Stacks,
    stack: deque[int],
    value: int,
    up: Operation,
    down: Operation,
) -> None:
    """Rotate one stack in the shorter direction until value is on top."""
    op = up if _above_median(stack.index(value), len(stack)) else down
    while stack[0] != value:
        stacks.apply(op, record=True)


def _target_in_b(value: int, b: deque[int]) -> int:
    """The closest smaller number in B, or the largest one when none is smaller."""
    smaller = [other for other in b if other < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: deque[int]) -> int:
    """The closest larger number in A, or the smallest one when none is larger."""
    larger = [other for other in a if other > value]
    return min(larger) if larger else min(a)


def _push_cheapest_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    len_a, len_b = len(a), len(b)

    def cost(candidate: tuple[int, int, int]) -> int:
        index, _, target = candidate
        return _moves_to_top(index, len_a) + _moves_to_top(b.index(target), len_b)

    candidates = [(index, value, _target_in_b(value, b)) for index, value in enumerate(a)]
    _, value, target = min(candidates, key=cost)

    a_up = _above_median(a.index(value), len_a)
    b_up = _above_median(b.index(target), len_b)
    if a_up == b_up:
        both = Operation.RR if a_up else Operation.RRR
        while b[0] != target and a[0] != value:
            stacks.apply(both, record=True)

    _bring_to_top(stacks, a, value, Operation.RA, Operation.RRA)
    _bring_to_top(stacks, b, target, Operation.RB, Operation.RRB)
    stacks.apply(Operation.PB, record=True)


def _push_top_to_a(stacks: Stacks) -> None:
    target = _target_in_a(stacks.b[0], stacks.a)
    _bring_to_top(stacks, stacks.a, target, Operation.RA, Operation.RRA)
    stacks.apply(Operation.PA, record=True)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack A of three numbers in at most two operations."""
    a = stacks.a
    if len(a) < 2:
        return
    highest = max(a)
    if a[0] == highest:
        stacks.apply(Operation.RA, record=True)
    elif a[1] == highest:
        stacks.apply(Operation.RRA, record=True)
    if a[0] > a[1]:
        stacks.apply(Operation.SA, record=True)


def sort_stack(stacks: Stacks) -> None:
    """Sort a stack A of more than three numbers, using B as scratch space."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not stacks.is_sorted():
            stacks.apply(Operation.PB, record=True)
        remaining -= 1
    while remaining > 3 and not stacks.is_sorted():
        remaining -= 1
        _push_cheapest_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _push_top_to_a(stacks)
    _bring_to_top(stacks, stacks.a, min(stacks.a), Operation.RA, Operation.RRA)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given numbers."""
    stacks = Stacks(numbers)
    if not stacks.is_sorted():
        if len(stacks.a) == 2:
            stacks.apply(Operation.SA, record=True)
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stack(stacks)
    return stacks.operations