"""Tests for configuration schemas."""

from __future__ import annotations

import logging

import pytest

from osero.config import AppConfig, UIConfig, load_config


def test_app_config_defaults():
    cfg = AppConfig.from_dict({})

    assert cfg.ui == UIConfig()
    assert cfg.log_level == "WARNING"
    assert cfg.log_level_value == logging.WARNING
    assert cfg.ui.style().glyph(1) == "*"


def test_app_config_parsing():
    data = {
        "ui": {
            "black": "B",
            "white": "W",
            "empty": ".",
            "show_hints": True,
            "quit_words": ["Bye", "STOP"],
        },
        "log_level": "debug",
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.ui.black == "B"
    assert cfg.ui.show_hints is True
    assert cfg.ui.quit_words == ["bye", "stop"]
    assert cfg.log_level == "DEBUG"
    assert cfg.log_level_value == logging.DEBUG


def test_single_quit_word_string():
    cfg = AppConfig.from_dict({"ui": {"quit_words": "leave"}})
    assert cfg.ui.quit_words == ["leave"]


def test_null_quit_words_uses_defaults():
    cfg = AppConfig.from_dict({"ui": {"quit_words": None}})
    assert cfg.ui.quit_words == ["q", "quit", "exit"]


def test_empty_quit_words_kept():
    cfg = AppConfig.from_dict({"ui": {"quit_words": []}})
    assert cfg.ui.quit_words == []


@pytest.mark.parametrize(
    "data",
    [
        {"ui": {"black": "xx"}},
        {"ui": {"black": "o"}},
        {"ui": ["not", "a", "mapping"]},
        {"log_level": "LOUD"},
        {"ui": {"quit_words": 5}},
        {"ui": {"quit_words": {"q": 1}}},
        {"ui": {"show_hints": "false"}},
        {"ui": {"show_hints": 1}},
    ],
)
def test_app_config_rejects(data):
    with pytest.raises(ValueError):
        AppConfig.from_dict(data)


def test_load_config(tmp_path):
    path = tmp_path / "osero.yaml"
    path.write_text("ui:\n  empty: '.'\n  show_hints: true\nlog_level: INFO\n")

    cfg = load_config(path)
    assert cfg.ui.empty == "."
    assert cfg.ui.show_hints is True
    assert cfg.log_level == "INFO"


def test_load_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == AppConfig()


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("ui: [unclosed\n")

    with pytest.raises(ValueError):
        load_config(str(path))
