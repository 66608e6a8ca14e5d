"""Othello board engine."""

from .board import Board, initial_grid
from .cell import PLAYERS, Cell, as_player
from .errors import (
    NoAdjacentOpponentError,
    NoCaptureError,
    OccupiedCellError,
    OutOfBoundsError,
    PlacementError,
)
from .render import DEFAULT_STYLE, BoardStyle, render_grid
from .utils import BOARD_SIZE, DIRECTIONS, capture_line, count_pieces, get_flips

__all__ = [
    "BOARD_SIZE",
    "Board",
    "BoardStyle",
    "Cell",
    "DEFAULT_STYLE",
    "DIRECTIONS",
    "NoAdjacentOpponentError",
    "NoCaptureError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "PLAYERS",
    "PlacementError",
    "as_player",
    "capture_line",
    "count_pieces",
    "get_flips",
    "initial_grid",
    "render_grid",
]
