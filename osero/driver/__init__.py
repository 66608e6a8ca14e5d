"""Turn driver for a two-player terminal game."""

from .prompts import MoveInputError, QuitRequested, parse_move
from .state import TurnState
from .turns import TurnOutcome, play_turn, run_game

__all__ = [
    "MoveInputError",
    "QuitRequested",
    "TurnOutcome",
    "TurnState",
    "parse_move",
    "play_turn",
    "run_game",
]
