"""Text rendering of the board."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .cell import Cell
from .utils import count_pieces


@dataclass(frozen=True)
class BoardStyle:
    """Glyphs used when drawing the grid."""

    black: str = "*"
    white: str = "o"
    empty: str = "-"

    def __post_init__(self) -> None:
        glyphs = (self.black, self.white, self.empty)
        for glyph in glyphs:
            if len(glyph) != 1 or glyph.isspace():
                raise ValueError(f"Glyph must be a single visible character, got {glyph!r}")
        if len(set(glyphs)) != len(glyphs):
            raise ValueError(f"Glyphs must be distinct, got {glyphs}")

    def glyph(self, cell: Cell | int) -> str:
        cell = Cell(cell)
        if cell is Cell.BLACK:
            return self.black
        if cell is Cell.WHITE:
            return self.white
        return self.empty


DEFAULT_STYLE = BoardStyle()


def render_grid(grid: np.ndarray, style: BoardStyle = DEFAULT_STYLE) -> str:
    size = grid.shape[0]
    lines = ["  " + " ".join(str(i) for i in range(size))]
    for row in range(size):
        cells = " ".join(style.glyph(int(grid[row, col])) for col in range(size))
        lines.append(f"{row} {cells}")

    n_black, n_white = count_pieces(grid)
    lines.append(f"Black: {n_black}, White: {n_white}")
    return "\n".join(lines)
