# pushswap

Two stacks, `a` and `b`, and eleven operations. Stack `a` starts out holding a
list of distinct integers and stack `b` starts out empty. The goal is to end
with every number in `a`, smallest on top, using as few operations as possible.

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

An operation that finds too few elements on its stack does nothing.

## Install

```
pip install .
```

## Solving

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

The numbers can be separate arguments, or several numbers can share one
argument separated by spaces. The operations go to standard output, one per
line. A list that is already sorted produces no output, and so does running
the command with no arguments at all.

Two numbers are sorted with a single swap and three with at most two
operations. Longer lists move all but three numbers to `b`, each time picking
the number that costs fewest rotations to place, then move them back to `a`
and rotate the smallest number to the top.

Input is rejected, with `Error` on standard error and exit status 1, when:

* an argument is empty or holds only spaces or tabs,
* a space-separated word is not an optional `+` or `-` followed by digits,
* a value falls outside the 32-bit signed range,
* a value appears more than once.

## Checking

```
push-swap 3 2 5 1 4 | pushswap-checker 3 2 5 1 4
```

`pushswap-checker` reads operations from standard input, one per line, and
applies them to the numbers given as arguments. It prints `ok` if `a` ends up
sorted and `b` ends up empty, and `ko` otherwise.

It prints `Error` on standard error and exits with status 1 when the numbers
are rejected for any of the reasons above, when no numbers are given, or when
a line is not exactly one of the eleven operation names followed by a newline
(a last line without its newline counts as invalid too).

## From Python

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([3, 2, 5, 1, 4])
lines = [f"{op}\n" for op in ops]
print(check([3, 2, 5, 1, 4], lines))  # True
```

* `pushswap.stacks.Operation` is a string enum of the eleven operations.
  `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, top first) and
  applies operations through `apply(op, record=False)` and `run(ops)`; with
  `record=True` each operation that took effect is appended to `operations`.
  `is_sorted()` and `is_solved()` report on the stacks.
* `pushswap.parsing.parse_numbers` turns command-line style arguments into a
  list of integers and raises `pushswap.parsing.InputError` on bad input.
  `split_words`, `validate_argument` and `validate_arguments` are its parts.
* `pushswap.sorting.solve` returns the list of operations; `sort_three` and
  `sort_stack` work on a `Stacks` directly.
* `pushswap.checker.check` applies newline-terminated lines to the numbers and
  returns whether the stacks end solved; `parse_command` raises
  `pushswap.checker.CommandError` for an invalid line, and `read_lines`
  yields the lines of a text stream.

## Tests

```
pip install ".[test]"
pytest
```