"""Placement errors raised by :class:`Board.place`."""

from __future__ import annotations


class PlacementError(ValueError):
    """Base class for rejected placements. The board is left unchanged."""

    def __init__(self, row: int, col: int, message: str) -> None:
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBoundsError(PlacementError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, f"({row}, {col}) is outside the board")


class OccupiedCellError(PlacementError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, f"({row}, {col}) is already occupied")


class NoAdjacentOpponentError(PlacementError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, f"({row}, {col}) has no adjacent opponent piece")


class NoCaptureError(PlacementError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col, f"({row}, {col}) does not capture anything")
