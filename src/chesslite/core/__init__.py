"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chesslite.core import STARTING_FEN, decode_fen, legal_moves, make_move, parse_square

    state = decode_fen(STARTING_FEN)
    e2 = parse_square("e2")
    print(legal_moves(state, e2))
    state = make_move(state, e2, parse_square("e4"))
"""

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move import Move, MoveRecord
from chesslite.core.move_generator import possible_moves
from chesslite.core.notation import (
    STARTING_FEN,
    FenError,
    decode_fen,
    decode_move,
    encode_fen,
    encode_move,
)
from chesslite.core.piece import Piece
from chesslite.core.rules import (
    all_legal_moves,
    apply_moves,
    find_king,
    has_legal_moves,
    is_checkmate,
    is_in_check,
    is_legal_move,
    legal_moves,
    make_move,
    piece_at,
)
from chesslite.core.state import CapturedPieces, GameState, initial_state
from chesslite.core.types import (
    BOARD_SIZE,
    Square,
    is_valid_position,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "is_valid_position",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CapturedPieces",
    "GameState",
    "Move",
    "MoveRecord",
    "Piece",
    "initial_state",
    # Rules
    "all_legal_moves",
    "apply_moves",
    "find_king",
    "has_legal_moves",
    "is_checkmate",
    "is_in_check",
    "is_legal_move",
    "legal_moves",
    "make_move",
    "piece_at",
    "possible_moves",
    # Notation
    "STARTING_FEN",
    "FenError",
    "decode_fen",
    "decode_move",
    "encode_fen",
    "encode_move",
]
