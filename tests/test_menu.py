import io
import sys

import pytest

from palletpack.menu import clear_terminal, get_menu_choice

OPTIONS = ["Run Algorithms", "Select Dataset", "Show Dataset", "Change Timeout"]


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_clear_terminal_output(capsys):
    clear_terminal()
    out = capsys.readouterr().out
    assert out == "\033[2J\033[H----- PACKING OPTIMIZATION -----\n\n"


@pytest.mark.parametrize("line, expected", [("1", 1), ("4", 4), ("2abc", 2), (" 3", 3)])
def test_valid_choice(monkeypatch, capsys, line, expected):
    _feed(monkeypatch, line + "\n")
    assert get_menu_choice(OPTIONS, "Pick: ") == expected


def test_options_are_listed(monkeypatch, capsys):
    _feed(monkeypatch, "1\n")
    get_menu_choice(OPTIONS, "Pick: ")
    out = capsys.readouterr().out
    assert "1: Run Algorithms\n" in out
    assert "4: Change Timeout\n" in out
    assert out.endswith("Pick: ")


def test_empty_line_exits(monkeypatch):
    _feed(monkeypatch, "\n")
    assert get_menu_choice(OPTIONS, "Pick: ") == 0


def test_end_of_input_exits(monkeypatch):
    _feed(monkeypatch, "")
    assert get_menu_choice(OPTIONS, "Pick: ") == 0


@pytest.mark.parametrize("bad", ["0", "5", "abc", "-1"])
def test_invalid_choice_reprompts(monkeypatch, capsys, bad):
    _feed(monkeypatch, bad + "\n2\n")
    assert get_menu_choice(OPTIONS, "Pick: ") == 2
    err = capsys.readouterr().err
    assert "ERROR: Invalid choice. Please enter a number between 1 and 4." in err


def test_error_range_follows_option_count(monkeypatch, capsys):
    _feed(monkeypatch, "3\n2\n")
    assert get_menu_choice(["A", "B"], "Pick: ") == 2
    err = capsys.readouterr().err
    assert "ERROR: Invalid choice. Please enter a number between 1 and 2." in err