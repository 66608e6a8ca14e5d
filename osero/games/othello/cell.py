"""Cell values for the Othello grid."""

from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """
    Contents of a single board position.

    Values double as the tokens stored in the numpy grid, so the opponent
    of a colour is its negation.
    """

    WHITE = -1
    EMPTY = 0
    BLACK = 1

    @property
    def is_empty(self) -> bool:
        return self is Cell.EMPTY

    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell(-int(self))

    @property
    def label(self) -> str:
        return self.name.capitalize()


PLAYERS = (Cell.BLACK, Cell.WHITE)


def as_player(value: Cell | int) -> Cell:
    """Coerce ``value`` to a player colour, rejecting EMPTY."""
    cell = Cell(value)
    if cell is Cell.EMPTY:
        raise ValueError("player must be BLACK or WHITE, got EMPTY")
    return cell
