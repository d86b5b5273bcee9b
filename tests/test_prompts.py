import io

import pytest

from prodcost.prompts import read_float, read_int, read_string


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_read_int_prints_prompt(monkeypatch, capsys):
    _feed(monkeypatch, "42\n")
    assert read_int("Escolha: ") == 42
    assert capsys.readouterr().out == "Escolha: "


def test_read_int_ignores_rest_of_line(monkeypatch):
    _feed(monkeypatch, "12abc\n7\n")
    assert read_int("") == 12
    assert read_int("") == 7


def test_read_int_skips_blank_lines(monkeypatch):
    _feed(monkeypatch, "   \n\n-3\n")
    assert read_int("") == -3


def test_read_int_rejects_text(monkeypatch):
    _feed(monkeypatch, "abc\n")
    with pytest.raises(ValueError):
        read_int("")


def test_read_int_eof(monkeypatch):
    _feed(monkeypatch, "")
    with pytest.raises(EOFError):
        read_int("")


def test_read_float(monkeypatch):
    _feed(monkeypatch, "2.5\n3\n")
    assert read_float("Preco: ") == 2.5
    assert read_float("") == 3.0


def test_read_float_rejects_text(monkeypatch):
    _feed(monkeypatch, "x1\n")
    with pytest.raises(ValueError):
        read_float("")


def test_read_string_after_int(monkeypatch):
    _feed(monkeypatch, "5\nFarinha de trigo\n")
    assert read_int("") == 5
    assert read_string("Nome: ") == "Farinha de trigo"


def test_read_string_truncates(monkeypatch):
    _feed(monkeypatch, "x" * 150 + "\n")
    assert read_string("") == "x" * 99