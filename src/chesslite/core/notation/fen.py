"""Restricted FEN parsing and serialization.

Only the piece placement and the side to move carry information. The
castling, en-passant and clock fields are always written as the fixed
placeholder ``KQkq - 0 1`` and ignored on input.
"""

from __future__ import annotations

import logging

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.piece import Piece
from chesslite.core.state import GameState
from chesslite.core.types import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
PLACEHOLDER_FIELDS = "KQkq - 0 1"


class FenError(ValueError):
    """The placement or side-to-move field cannot be read."""


def decode_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`.

    Captured pieces and move history of the result are always empty. Fields
    after the side to move are ignored. Raises :class:`FenError` when the
    placement field is not 8 readable ranks or the side-to-move field is
    missing or not ``w``/``b``.
    """
    parts = fen.split()
    if len(parts) < 2:
        raise FenError(f"Invalid FEN (need placement and side fields): {fen!r}")

    placement, side_part = parts[0], parts[1]

    # 1. Piece placement, row 0 (rank 8) first
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[Square(row, col)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"{exc} in FEN {fen!r}") from None
                col += 1
            if col > BOARD_SIZE:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if col != BOARD_SIZE:
            raise FenError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    _LOGGER.debug("Decoded FEN %r, %s to move", placement, side)
    return GameState(board=board, current_player=side)


def encode_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to restricted FEN."""
    rows: list[str] = []
    for board_row in state.board.rows():
        empty = 0
        row = ""
        for piece in board_row:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if state.current_player == Color.WHITE else "b"

    return f"{board_str} {side_str} {PLACEHOLDER_FIELDS}"
