"""Pseudo-legal move generation.

Moves produced here obey each piece's movement pattern and board occupancy
but may leave the mover's own king in check. Check detection in
:mod:`chesslite.core.rules` scans these moves for the opponent, so nothing in
this module may call back into the legality filter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslite.core.enums import Color, PieceType
from chesslite.core.types import Square, is_valid_position

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece
    from chesslite.core.state import GameState


# (d_row, d_col) offsets; row 0 is the black side.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# White pawns walk toward row 0, black pawns toward the last row.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}


def pawn_start_row(color: Color, board_size: int) -> int:
    """Row from which a pawn of *color* may double-step."""
    return board_size - 2 if color == Color.WHITE else 1


# -- Public API -------------------------------------------------------------


def possible_moves(state: GameState, square: Square) -> list[Square]:
    """Pseudo-legal destinations of the piece on *square* (empty if none)."""
    return piece_moves(state.board, square)


def piece_moves(board: Board, square: Square) -> list[Square]:
    """Board-only variant of :func:`possible_moves`."""
    if not is_valid_position(square.row, square.col, board.size):
        return []
    piece = board[square]
    if piece is None:
        return []

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return _gen_pawn(board, square, piece)
    if ptype == PieceType.ROOK:
        return _gen_sliding(board, square, piece, ROOK_DIRS)
    if ptype == PieceType.BISHOP:
        return _gen_sliding(board, square, piece, BISHOP_DIRS)
    if ptype == PieceType.QUEEN:
        return _gen_sliding(board, square, piece, ROOK_DIRS) + _gen_sliding(
            board, square, piece, BISHOP_DIRS
        )
    if ptype == PieceType.KNIGHT:
        return _gen_stepping(board, square, piece, KNIGHT_OFFSETS)
    if ptype == PieceType.KING:
        return _gen_stepping(board, square, piece, KING_OFFSETS)
    return []


# -- Piece-specific generators (private) -----------------------------------


def _gen_pawn(board: Board, sq: Square, piece: Piece) -> list[Square]:
    moves: list[Square] = []
    size = board.size
    direction = _PAWN_DIRECTION[piece.color]
    one_step = sq.offset(direction, 0)

    if is_valid_position(one_step.row, one_step.col, size) and board.is_empty(one_step):
        moves.append(one_step)
        if sq.row == pawn_start_row(piece.color, size):
            two_step = sq.offset(2 * direction, 0)
            if is_valid_position(two_step.row, two_step.col, size) and board.is_empty(
                two_step
            ):
                moves.append(two_step)

    for d_col in (-1, 1):
        cap_sq = sq.offset(direction, d_col)
        if not is_valid_position(cap_sq.row, cap_sq.col, size):
            continue
        target = board[cap_sq]
        if target is not None and target.color != piece.color:
            moves.append(cap_sq)
    return moves


def _gen_sliding(
    board: Board,
    sq: Square,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    size = board.size
    for d_row, d_col in directions:
        row, col = sq.row + d_row, sq.col + d_col
        while is_valid_position(row, col, size):
            to_sq = Square(row, col)
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                row += d_row
                col += d_col
                continue
            if target.color != piece.color:
                moves.append(to_sq)
            break
    return moves


def _gen_stepping(
    board: Board,
    sq: Square,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    size = board.size
    for d_row, d_col in offsets:
        to_sq = sq.offset(d_row, d_col)
        if not is_valid_position(to_sq.row, to_sq.col, size):
            continue
        target = board[to_sq]
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves
