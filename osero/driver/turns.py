"""Turn loop: read a move, apply it, alternate players."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from osero.config import AppConfig
from osero.games.othello import Board, PlacementError
from osero.games.othello.utils import Coord

from .prompts import DEFAULT_QUIT_WORDS, MoveInputError, QuitRequested, parse_move
from .state import TurnState

logger = logging.getLogger(__name__)

BANNER = "Welcome to Osero"


@dataclass(slots=True)
class TurnOutcome:
    """Result of feeding one line of input to :func:`play_turn`."""

    accepted: bool
    message: str
    move: Optional[Coord] = None
    flipped: List[Coord] = field(default_factory=list)


def play_turn(
    board: Board,
    state: TurnState,
    raw: str,
    quit_words: Optional[List[str]] = None,
) -> TurnOutcome:
    """
    Apply one line of player input.

    The active player only changes when the engine accepts the move.
    Malformed input never reaches the board.

    Raises:
        QuitRequested: ``raw`` is one of the quit words.
    """
    player = state.current
    try:
        row, col = parse_move(raw, DEFAULT_QUIT_WORDS if quit_words is None else quit_words)
    except MoveInputError as e:
        logger.info("Rejected input %r: %s", raw, e)
        state.last_status = str(e)
        return TurnOutcome(accepted=False, message=state.last_status)

    try:
        flipped = board.place(row, col, player)
    except PlacementError as e:
        logger.info("%s cannot play (%d, %d): %s", player.label, row, col, e)
        state.last_status = f"Illegal move: {e}. {player.label} to play again."
        return TurnOutcome(accepted=False, message=state.last_status, move=(row, col))

    state.advance()
    logger.debug("Turn %d: %s -> %s", state.turn, player.label, state.current.label)
    state.last_status = (
        f"{player.label} played {row},{col} and flipped {len(flipped)}. "
        f"{state.current.label} to move."
    )
    return TurnOutcome(
        accepted=True,
        message=state.last_status,
        move=(row, col),
        flipped=flipped,
    )


def run_game(
    board: Optional[Board] = None,
    state: Optional[TurnState] = None,
    read_line: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
    config: Optional[AppConfig] = None,
) -> TurnState:
    """
    Drive a game until a quit word or end of input.

    There is no end-of-game detection; players stop by quitting.

    Args:
        board: Board to play on (fresh starting position if None)
        state: Turn state (Black to move if None)
        read_line: Returns the next input line, raising EOFError when exhausted
            (reads stdin if None)
        write: Receives each block of output text
        config: UI settings (defaults if None)

    Returns:
        The final turn state.
    """
    if board is None:
        board = Board()
    if state is None:
        state = TurnState()
    if config is None:
        config = AppConfig()
    if read_line is None:
        read_line = input

    style = config.ui.style()

    write(BANNER)
    write("")
    write(board.render(style))

    while True:
        write(f"Phase {style.glyph(state.current)}")
        if config.ui.show_hints:
            hints = " ".join(f"{r},{c}" for r, c in board.legal_moves(state.current))
            write(f"Legal moves: {hints or 'none'}")

        try:
            raw = read_line()
        except EOFError:
            logger.debug("Input closed after %d turns", state.turn)
            break

        try:
            outcome = play_turn(board, state, raw, config.ui.quit_words)
        except QuitRequested:
            write("Bye.")
            break

        write(outcome.message)
        write(board.render(style))

    return state
