import io

import pytest

from abcsolver.cli import main, solve


def test_solve_arithmetic_yes():
    assert solve("abc201", "a", "1 3 2\n") == "Yes"


def test_solve_accepts_number_and_upper_case():
    assert solve("201", "A", "1 2 4") == "No"


def test_solve_awake_problem():
    assert solve("abc408", "a", "2 5\n5 10\n") == "Yes"


def test_solve_distinct_sorted_output():
    assert solve("abc408", "b", "5\n3 1 3 2 1\n") == "3\n1 2 3"


def test_solve_float_without_trailing_zero():
    assert solve("abc205", "a", "100 7") == "7"


def test_solve_compare_symbol():
    assert solve("abc205", "c", "-3 2 2") == ">"


def test_solve_multiple_lines():
    assert solve("abc205", "d", "0 3\n\n4 1 2").splitlines() == ["4", "1", "2"]


def test_solve_unknown_problem():
    with pytest.raises(ValueError):
        solve("abc999", "a", "1")


def test_solve_truncated_input():
    with pytest.raises(ValueError):
        solve("abc201", "a", "1 2")


def test_main_prints_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("191\n"))
    assert main(["abc206", "a"]) == 0
    assert capsys.readouterr().out == "so-so\n"


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["abc206", "a"]) == 1
    assert "error" in capsys.readouterr().err