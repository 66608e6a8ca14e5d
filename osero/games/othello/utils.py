"""Shared helpers for Othello rule evaluation."""

from __future__ import annotations

from typing import Iterator, List, Tuple

import numpy as np

BOARD_SIZE = 8

Coord = Tuple[int, int]  # (row, col)

# (drow, dcol) unit vectors, clockwise from "down".
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def in_bounds(row: int, col: int, size: int = BOARD_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def neighbours(row: int, col: int, size: int = BOARD_SIZE) -> Iterator[Coord]:
    """Yield the Moore neighbourhood of ``(row, col)``, truncated at the edges."""
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if in_bounds(r, c, size):
            yield r, c


def has_adjacent_opponent(grid: np.ndarray, row: int, col: int, player: int) -> bool:
    size = grid.shape[0]
    opponent = -player
    return any(grid[r, c] == opponent for r, c in neighbours(row, col, size))


def capture_line(
    grid: np.ndarray,
    row: int,
    col: int,
    player: int,
    direction: Coord,
) -> List[Coord]:
    """
    Walk from ``(row, col)`` in ``direction`` and return the captured run.

    Args:
        grid: Board array of tokens (1 black, -1 white, 0 empty).
        row: Row of the piece being placed.
        col: Column of the piece being placed.
        player: Token of the placing player.
        direction: (drow, dcol) step.

    Returns:
        Opponent cells bracketed by ``player``; empty when the walk leaves
        the board, hits an empty cell, or meets ``player`` immediately.
    """
    size = grid.shape[0]
    dr, dc = direction
    run: List[Coord] = []
    r, c = row + dr, col + dc

    while in_bounds(r, c, size):
        token = grid[r, c]
        if token == 0:
            return []
        if token == player:
            return run
        run.append((r, c))
        r += dr
        c += dc

    return []


def get_flips(grid: np.ndarray, row: int, col: int, player: int) -> List[Coord]:
    """
    Collect every cell flipped by placing ``player`` at ``(row, col)``.

    The target cell itself is not included and the grid is not modified.
    """
    flips: List[Coord] = []
    for direction in DIRECTIONS:
        flips.extend(capture_line(grid, row, col, player, direction))
    return flips


def count_pieces(grid: np.ndarray) -> Tuple[int, int]:
    """Return ``(black_count, white_count)``."""
    return int(np.sum(grid == 1)), int(np.sum(grid == -1))
