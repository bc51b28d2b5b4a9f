import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.checker import CommandError, check, main, parse_command, read_lines
from pushswap.sorting import solve
from pushswap.stacks import Operation


def test_read_lines_keeps_newlines():
    assert list(read_lines(io.StringIO("sa\nrra"))) == ["sa\n", "rra"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


@pytest.mark.parametrize("op", list(Operation))
def test_parse_every_command(op):
    assert parse_command(f"{op.value}\n") is op


@pytest.mark.parametrize("line", ["sa", "xx\n", "\n", "sa \n", " ra\n", "pa\npb\n", "SA\n"])
def test_parse_rejects_malformed_lines(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_check_swap_sorts():
    assert check([2, 1], ["sa\n"]) is True


def test_check_without_moves_on_unsorted_input():
    assert check([2, 1], []) is False


def test_check_fails_when_b_not_empty():
    assert check([1, 2, 3], ["pb\n"]) is False


def test_check_stops_on_bad_command():
    with pytest.raises(CommandError):
        check([2, 1], ["sa\n", "nope\n"])


@settings(max_examples=50, deadline=None)
@given(st.lists(st.integers(-1000, 1000), unique=True, max_size=25))
def test_solution_passes_check(numbers):
    lines = [f"{op}\n" for op in solve(numbers)]
    assert check(numbers, lines) is True


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\nsa\n"))
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "ok\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["3", "2", "1"]) == 0
    assert capsys.readouterr().out == "ko\n"


def test_main_bad_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nfoo\n"))
    assert main(["2 1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_missing_final_newline(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa"))
    assert main(["2 1"]) == 1
    assert capsys.readouterr().err == "Error\n"


@pytest.mark.parametrize("args", [[], ["1 1"], ["x"], [""]])
def test_main_bad_arguments(args, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(args) == 1
    assert capsys.readouterr().err == "Error\n"