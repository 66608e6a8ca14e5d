"""Parsing of ``row,col`` move input."""

from __future__ import annotations

from typing import Iterable, Tuple

from osero.games.othello import BOARD_SIZE

DEFAULT_QUIT_WORDS = ("q", "quit", "exit")


class MoveInputError(ValueError):
    """Input text is not a usable ``row,col`` pair."""


class QuitRequested(Exception):
    """The player typed a quit word."""


def parse_move(raw: str, quit_words: Iterable[str] = DEFAULT_QUIT_WORDS) -> Tuple[int, int]:
    s = raw.strip()
    if s.lower() in set(quit_words):
        raise QuitRequested(s)

    fields = s.split(",")
    if len(fields) != 2:
        raise MoveInputError("Enter the move as row,col (for example 2,3).")

    try:
        row, col = (int(f.strip()) for f in fields)
    except ValueError:
        raise MoveInputError("Row and column must be whole numbers.") from None

    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise MoveInputError(f"Row and column must be between 0 and {BOARD_SIZE - 1}.")
    return row, col
