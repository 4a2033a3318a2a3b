"""Chess rules: check detection, legality filtering, checkmate, move application."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import Move, MoveRecord
from chesslite.core.move_generator import piece_moves
from chesslite.core.notation.coordinate import decode_move
from chesslite.core.piece import Piece
from chesslite.core.state import GameState
from chesslite.core.types import Square, is_valid_position

_LOGGER = logging.getLogger(__name__)


def piece_at(board: Board, square: Square) -> Piece | None:
    """Piece on *square*, or None when empty or off the board."""
    if not is_valid_position(square.row, square.col, board.size):
        return None
    return board[square]


def find_king(board: Board, color: Color) -> Square | None:
    return board.find_king(color)


# -- Check detection --------------------------------------------------------


def is_in_check(state: GameState, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king of *color* is reported as not in check.
    """
    return _board_in_check(state.board, color)


def _board_in_check(board: Board, color: Color) -> bool:
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    # Pseudo-legal attacks only: the legality filter calls back in here.
    for sq, piece in board.occupied():
        if piece.color != color and king_sq in piece_moves(board, sq):
            return True
    return False


# -- Legality filter --------------------------------------------------------


def legal_moves(state: GameState, square: Square) -> list[Square]:
    """Destinations that do not leave the mover's king in check.

    Only the side to move has legal moves; an empty square or an opponent
    piece yields ``[]``.
    """
    piece = piece_at(state.board, square)
    if piece is None or piece.color != state.current_player:
        return []
    return _legal_targets(state.board, square, piece)


def _legal_targets(board: Board, square: Square, piece: Piece) -> list[Square]:
    legal: list[Square] = []
    for to_sq in piece_moves(board, square):
        scratch = board.copy()
        scratch[to_sq] = piece
        scratch[square] = None
        if not _board_in_check(scratch, piece.color):
            legal.append(to_sq)
    return legal


def is_legal_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return to_sq in legal_moves(state, from_sq)


def all_legal_moves(state: GameState) -> list[Move]:
    """Every legal move of the side to move, in row-major board order."""
    return [
        Move(sq, to_sq)
        for sq, piece in state.board.pieces(state.current_player)
        for to_sq in _legal_targets(state.board, sq, piece)
    ]


def has_legal_moves(state: GameState, color: Color) -> bool:
    """Whether any piece of *color* has a legal move, whoever is to move."""
    board = state.board
    return any(_legal_targets(board, sq, piece) for sq, piece in board.pieces(color))


def is_checkmate(state: GameState, color: Color) -> bool:
    """In check with no legal move for any piece of *color*.

    Stalemate is not distinguished: no legal moves while not in check
    returns False like any other position.
    """
    if not is_in_check(state, color):
        return False
    return not has_legal_moves(state, color)


# -- State transition -------------------------------------------------------


def make_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState | None:
    """Apply a move and return the resulting state, or None if it is illegal.

    The input state is left untouched.
    """
    piece = piece_at(state.board, from_sq)
    if piece is None:
        _LOGGER.debug("Rejected %s%s: no piece on source square", from_sq, to_sq)
        return None
    if piece.color != state.current_player:
        _LOGGER.debug(
            "Rejected %s%s: %s to move, piece is %s",
            from_sq,
            to_sq,
            state.current_player,
            piece.color,
        )
        return None
    if to_sq not in _legal_targets(state.board, from_sq, piece):
        _LOGGER.debug("Rejected %s%s: destination not legal", from_sq, to_sq)
        return None

    board = state.board.copy()
    captured = board[to_sq]
    board[to_sq] = piece.moved()
    board[from_sq] = None

    captured_pieces = state.captured_pieces
    if captured is not None:
        captured_pieces = captured_pieces.with_capture(captured)

    return GameState(
        board=board,
        current_player=state.current_player.opposite,
        captured_pieces=captured_pieces,
        move_history=state.move_history
        + (MoveRecord(from_sq, to_sq, piece, captured),),
    )


def apply_moves(state: GameState, notations: Iterable[str]) -> GameState | None:
    """Replay coordinate-notation moves from *state*.

    Returns None as soon as one move fails to parse or is illegal.
    """
    for index, text in enumerate(notations):
        move = decode_move(text)
        if move is None:
            _LOGGER.debug("Move %d (%r) is not coordinate notation", index, text)
            return None
        next_state = make_move(state, move.from_sq, move.to_sq)
        if next_state is None:
            _LOGGER.debug("Move %d (%s) is illegal", index, text)
            return None
        state = next_state
    return state
