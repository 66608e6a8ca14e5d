"""Configuration schema for a play session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from osero.games.othello import BoardStyle

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class UIConfig:
    black: str = "*"
    white: str = "o"
    empty: str = "-"
    show_hints: bool = False
    quit_words: List[str] = field(default_factory=lambda: ["q", "quit", "exit"])

    def style(self) -> BoardStyle:
        return BoardStyle(black=self.black, white=self.white, empty=self.empty)


@dataclass
class AppConfig:
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        ui_data = data.get("ui") or {}
        if not isinstance(ui_data, dict):
            raise ValueError(f"ui must be a mapping, got {type(ui_data)}")

        defaults = UIConfig()
        quit_words = ui_data.get("quit_words")
        if quit_words is None:
            quit_words = defaults.quit_words
        elif isinstance(quit_words, str):
            quit_words = [quit_words]
        elif not isinstance(quit_words, list):
            raise ValueError(f"ui.quit_words must be a string or a list, got {type(quit_words)}")

        show_hints = ui_data.get("show_hints", defaults.show_hints)
        if not isinstance(show_hints, bool):
            raise ValueError(f"ui.show_hints must be true or false, got {show_hints!r}")

        ui = UIConfig(
            black=str(ui_data.get("black", defaults.black)),
            white=str(ui_data.get("white", defaults.white)),
            empty=str(ui_data.get("empty", defaults.empty)),
            show_hints=show_hints,
            quit_words=[str(w).strip().lower() for w in quit_words],
        )
        # Fail early on bad glyphs rather than at first render.
        ui.style()

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {log_level!r}")

        return cls(ui=ui, log_level=log_level)

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
