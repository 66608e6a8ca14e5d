"""Smoke tests for the play CLI."""

import tyro

from osero.cli.play import play


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_play_until_quit(monkeypatch, capsys):
    _feed(monkeypatch, ["2,4", "2,3", "quit"])

    assert play() == 0

    out = capsys.readouterr().out
    assert "Welcome to Osero" in out
    assert "2 moves played." in out


def test_play_until_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, ["nonsense"])

    assert play(hints=True) == 0

    out = capsys.readouterr().out
    assert "Legal moves: 2,4 3,5 4,2 5,3" in out
    assert "0 moves played." in out


def test_play_with_config_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "osero.yaml"
    path.write_text("ui:\n  black: X\n  white: O\n  empty: '.'\n")
    _feed(monkeypatch, [])

    assert tyro.cli(play, args=["--config", str(path)]) == 0

    out = capsys.readouterr().out
    assert "3 . . . X O . . ." in out
    assert "Phase X" in out


def test_play_missing_config(capsys, tmp_path):
    assert play(config=str(tmp_path / "missing.yaml")) == 1
    assert "could not load config" in capsys.readouterr().err


def test_play_rejects_bad_quit_words(capsys, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("ui:\n  quit_words:\n    nested: true\n")

    assert play(config=str(path)) == 1
    assert "could not load config" in capsys.readouterr().err


def test_play_null_quit_words_uses_defaults(monkeypatch, capsys, tmp_path):
    path = tmp_path / "null.yaml"
    path.write_text("ui:\n  quit_words:\n")
    _feed(monkeypatch, ["q"])

    assert play(config=str(path)) == 0
    assert "Bye." in capsys.readouterr().out


def test_play_accepts_critical_log_level(monkeypatch, tmp_path):
    _feed(monkeypatch, [])

    assert tyro.cli(play, args=["--log-level", "CRITICAL"]) == 0
