"""CLI for a two-player game on one terminal."""

import logging
import sys
from typing import Literal, Optional

import tyro

from osero.config import AppConfig, load_config
from osero.driver import run_game

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def play(
    config: Optional[str] = None,
    hints: bool = False,
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None,
) -> int:
    """
    Play Othello with two players sharing the keyboard.

    Enter moves as row,col (0-7). Type q to quit.

    Args:
        config: Path to a YAML config file
        hints: Show the legal moves for the player to move
        log_level: Logging level for diagnostics on stderr (overrides config)
    """
    try:
        cfg = load_config(config) if config is not None else AppConfig()
    except (OSError, ValueError) as e:
        print(f"Error: could not load config {config}: {e}", file=sys.stderr)
        return 1

    if hints:
        cfg.ui.show_hints = True
    if log_level is not None:
        cfg.log_level = log_level

    logging.basicConfig(level=cfg.log_level_value, format=LOG_FORMAT, stream=sys.stderr)

    try:
        state = run_game(config=cfg)
    except KeyboardInterrupt:
        print()
        return 130
    print(f"{state.turn} moves played.")
    return 0


def main() -> None:
    sys.exit(tyro.cli(play))


if __name__ == "__main__":
    main()
