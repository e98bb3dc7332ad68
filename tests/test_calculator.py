import io
import operator

import pytest

from dsapractice.calculator import calculate, main


@pytest.mark.parametrize(
    "op, func",
    [("+", operator.add), ("-", operator.sub), ("*", operator.mul), ("|", operator.or_)],
)
@pytest.mark.parametrize("a, b", [(7, 3), (-5, 12), (0, 9)])
def test_arithmetic_and_or(op, func, a, b):
    assert calculate(a, b, op) == func(a, b)


def test_remainder_positive():
    assert calculate(17, 5, "%") == 17 % 5


def test_remainder_takes_sign_of_dividend():
    assert calculate(-7, 3, "%") == -1
    assert calculate(7, -3, "%") == 1


@pytest.mark.parametrize("a, b", [(-7, 3), (7, -3), (-20, -6), (13, 4)])
def test_remainder_invariant(a, b):
    r = calculate(a, b, "%")
    assert (a - r) % b == 0
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


def test_remainder_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate(5, 0, "%")


def test_shift_operators_use_fixed_values():
    assert calculate(1, 2, ">>") == 64 >> 2
    assert calculate(1, 2, "<<") == 10 << 2


@pytest.mark.parametrize("op", ["&", "?", "/"])
def test_other_operators_fall_back_to_and(op):
    assert calculate(12, 10, op) == 12 & 10


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 3\n*"))
    assert main([]) == 0
    assert capsys.readouterr().out == str(7 * 3)


def test_main_missing_operator(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 3"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_modulo_by_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 0 %"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err