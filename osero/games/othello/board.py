"""Mutable Othello board with placement rules."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, as_player
from .errors import (
    NoAdjacentOpponentError,
    NoCaptureError,
    OccupiedCellError,
    OutOfBoundsError,
)
from .render import DEFAULT_STYLE, BoardStyle, render_grid
from .utils import BOARD_SIZE, Coord, count_pieces, get_flips, has_adjacent_opponent, in_bounds

logger = logging.getLogger(__name__)

_GLYPH_TOKENS = {
    "*": Cell.BLACK,
    "o": Cell.WHITE,
    "-": Cell.EMPTY,
    ".": Cell.EMPTY,
}


def initial_grid(size: int = BOARD_SIZE) -> np.ndarray:
    grid = np.zeros((size, size), dtype=np.int8)

    mid = size // 2
    grid[mid - 1, mid - 1] = int(Cell.BLACK)
    grid[mid, mid] = int(Cell.BLACK)
    grid[mid - 1, mid] = int(Cell.WHITE)
    grid[mid, mid - 1] = int(Cell.WHITE)
    return grid


class Board:
    """
    8x8 Othello board, mutated in place by :meth:`place`.

    Cells are stored as int8 tokens (see :class:`Cell`). A rejected
    placement never modifies the grid.
    """

    size = BOARD_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None) -> None:
        if grid is None:
            grid = initial_grid(self.size)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (self.size, self.size):
                raise ValueError(f"Grid must be {self.size}x{self.size}, got {grid.shape}")
            if not np.isin(grid, (-1, 0, 1)).all():
                raise ValueError("Grid may only contain -1, 0 and 1")
        self.grid = grid

    @classmethod
    def new(cls) -> "Board":
        """Board in the standard starting position."""
        return cls()

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from eight strings of glyphs.

        ``*`` is black, ``o`` is white, ``-`` or ``.`` is empty. Spaces are
        ignored so rendered rows can be pasted back in.
        """
        parsed: List[List[int]] = []
        for text in rows:
            line = [ch for ch in text if not ch.isspace()]
            try:
                parsed.append([int(_GLYPH_TOKENS[ch]) for ch in line])
            except KeyError as e:
                raise ValueError(f"Unknown glyph {e.args[0]!r} in row {text!r}") from None
        if len(parsed) != cls.size or any(len(r) != cls.size for r in parsed):
            raise ValueError(f"Expected {cls.size} rows of {cls.size} cells")
        return cls(np.array(parsed, dtype=np.int8))

    def copy(self) -> "Board":
        return Board(self.grid.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __getitem__(self, pos: Coord) -> Cell:
        return self.cell(*pos)

    def __str__(self) -> str:
        return self.render()

    def cell(self, row: int, col: int) -> Cell:
        if not in_bounds(row, col, self.size):
            raise OutOfBoundsError(row, col)
        return Cell(int(self.grid[row, col]))

    def count(self) -> Tuple[int, int]:
        """Return ``(black_count, white_count)``."""
        return count_pieces(self.grid)

    def occupied(self) -> int:
        return int(np.count_nonzero(self.grid))

    def captures(self, row: int, col: int, player: Cell) -> List[Coord]:
        """Cells that placing ``player`` at ``(row, col)`` would flip."""
        player = as_player(player)
        if not in_bounds(row, col, self.size) or self.grid[row, col] != Cell.EMPTY:
            return []
        return get_flips(self.grid, row, col, int(player))

    def is_legal(self, row: int, col: int, player: Cell) -> bool:
        return len(self.captures(row, col, player)) > 0

    def legal_moves(self, player: Cell) -> List[Coord]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.is_legal(r, c, player)
        ]

    def place(self, row: int, col: int, player: Cell) -> List[Coord]:
        """
        Place ``player`` at ``(row, col)`` and flip every captured line.

        Args:
            row: Target row, 0-7.
            col: Target column, 0-7.
            player: ``Cell.BLACK`` or ``Cell.WHITE``.

        Returns:
            Coordinates flipped to ``player``, excluding the placed cell.

        Raises:
            OutOfBoundsError: coordinate outside the board.
            OccupiedCellError: target is not empty.
            NoAdjacentOpponentError: no opponent piece touches the target.
            NoCaptureError: no direction brackets an opponent run.
        """
        player = as_player(player)

        if not in_bounds(row, col, self.size):
            raise OutOfBoundsError(row, col)
        if self.grid[row, col] != Cell.EMPTY:
            logger.debug("Rejected %s at (%d, %d): occupied", player.label, row, col)
            raise OccupiedCellError(row, col)
        if not has_adjacent_opponent(self.grid, row, col, int(player)):
            logger.debug("Rejected %s at (%d, %d): no adjacent opponent", player.label, row, col)
            raise NoAdjacentOpponentError(row, col)

        flips = get_flips(self.grid, row, col, int(player))
        if not flips:
            logger.debug("Rejected %s at (%d, %d): no capture", player.label, row, col)
            raise NoCaptureError(row, col)

        token = int(player)
        self.grid[row, col] = token
        for flip_row, flip_col in flips:
            self.grid[flip_row, flip_col] = token

        logger.debug("%s placed at (%d, %d), flipped %d", player.label, row, col, len(flips))
        return flips

    def render(self, style: Optional[BoardStyle] = None) -> str:
        """Text grid with row/column labels and the running tally."""
        return render_grid(self.grid, style or DEFAULT_STYLE)
