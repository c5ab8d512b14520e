"""
Tests for connect4.interfaces.cli

Input parsing and scripted terminal sessions.
"""

from typing import List

import pytest

from connect4.interfaces.cli import QUIT, RESTART, SimpleCLI, main, parse_move


def feed(monkeypatch, lines: List[str]):
    """Answer input() prompts from a list, then behave like a closed stdin."""
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


class TestParseMove:

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("6", 6),
        (" 3 \n", 3),
        ("q", QUIT),
        ("Q", QUIT),
        ("r", RESTART),
        ("7", None),
        ("-1", None),
        ("", None),
        ("three", None),
        ("2.5", None),
    ])
    def test_parse(self, text, expected):
        assert parse_move(text, 7) == expected

    def test_respects_width(self):
        assert parse_move("8", 9) == 8
        assert parse_move("8", 7) is None


class TestPlay:

    def test_vertical_win(self, monkeypatch, capsys):
        feed(monkeypatch, ["2", "5", "2", "5", "2", "5", "2"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Starting a new Connect Four game!" in out
        assert "X = red, O = blue" in out
        assert out.rstrip().endswith("Player red won!")

    def test_custom_colors(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "0", "1", "1", "2", "2", "3"])
        assert main(["play", "--p1-color", "green", "--p2-color", "gold",
                     "--height", "4", "--width", "4"]) == 0
        assert "Player green won!" in capsys.readouterr().out

    def test_duplicate_color_reprompts(self, monkeypatch, capsys):
        feed(monkeypatch, ["Red", "green", "q"])
        assert main(["play", "--p1-color", "red", "--p2-color", "red"]) == 0
        out = capsys.readouterr().out
        assert out.count("cannot be the same") == 2
        assert "X = red, O = green" in out
        assert "Quitting game." in out

    def test_duplicate_color_then_eof(self, monkeypatch, capsys):
        feed(monkeypatch, [])
        assert main(["play", "--p2-color", "red"]) == 1
        assert "No players" in capsys.readouterr().out

    def test_full_column_message(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "0", "0", "0", "0", "q"])
        assert main(["play", "--height", "4", "--width", "4"]) == 0
        assert "Column full." in capsys.readouterr().out

    def test_invalid_input(self, monkeypatch, capsys):
        feed(monkeypatch, ["x", "9", "q"])
        assert main(["play"]) == 0
        assert capsys.readouterr().out.count("Invalid input.") == 2

    def test_restart_builds_new_game(self, monkeypatch, capsys):
        feed(monkeypatch, ["0", "r", "q"])
        cli = SimpleCLI()
        cli.parse_args(["play"])
        assert cli.run() == 0
        assert "Game restarted." in capsys.readouterr().out

    def test_tie(self, monkeypatch, capsys):
        # 3x3 board cannot hold four in a row
        feed(monkeypatch, ["0", "1", "2"] * 3)
        assert main(["play", "--height", "3", "--width", "3"]) == 0
        assert capsys.readouterr().out.rstrip().endswith("Tie!")

    def test_end_of_input_quits(self, monkeypatch, capsys):
        feed(monkeypatch, ["3"])
        assert main(["play"]) == 0
        assert "Quitting game." in capsys.readouterr().out

    def test_bad_dimensions(self, monkeypatch, capsys):
        feed(monkeypatch, [])
        assert main(["play", "--height", "0"]) == 1
        assert "Cannot start game: height must be a positive integer" in capsys.readouterr().out


class TestBenchmark:

    def test_runs(self, capsys):
        assert main(["benchmark", "--iterations", "3", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "Played 3 games" in out
        assert "Wins:" in out

    def test_rejects_zero_iterations(self, capsys):
        assert main(["benchmark", "--iterations", "0"]) == 1


class TestNoCommand:

    def test_requires_command(self, capsys):
        assert main([]) == 1
        assert "Please specify a command" in capsys.readouterr().out
