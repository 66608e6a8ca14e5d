"""Turn driver state."""

from __future__ import annotations

from dataclasses import dataclass

from osero.games.othello import Cell


@dataclass
class TurnState:
    """
    Who moves next and what happened last.

    ``turn`` counts successful placements only; rejected input leaves both
    ``current`` and ``turn`` untouched.
    """

    current: Cell = Cell.BLACK
    turn: int = 0
    last_status: str = "Black moves first."

    def advance(self) -> None:
        self.current = self.current.opponent()
        self.turn += 1
