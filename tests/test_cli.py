"""
CLI Tests - Subcommand dispatch and the headless demo.
"""

import json
import sys

import cli


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["cli.py", *argv])
    return cli.main()


class TestCli:

    def test_no_command_prints_help(self, monkeypatch, capsys):
        assert _run(monkeypatch) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_demo_json(self, monkeypatch, capsys):
        assert _run(monkeypatch, "demo", "--json") == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["status"] == "GAMEOVER"
        assert stats["rooms_cleared"] == 1
        assert stats["player_hp"] == 94

    def test_demo_rooms(self, monkeypatch, capsys):
        assert _run(monkeypatch, "demo", "--rooms", "2", "--json", "--name", "Ayla") == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["rooms_cleared"] == 2
        assert stats["rooms_visited"] == 2

    def test_demo_text_output(self, monkeypatch, capsys):
        assert _run(monkeypatch, "demo") == 0
        out = capsys.readouterr().out
        assert "Goblin blocks the way!" in out
        assert "Game over - GAMEOVER" in out

    def test_play_exits_on_eof(self, monkeypatch, capsys):
        def no_input(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", no_input)
        assert _run(monkeypatch, "play") == 0
        assert "Exiting..." in capsys.readouterr().out
