"""chesslite: rules engine for the puzzle trainer's simplified chess."""

from chesslite.core import (
    STARTING_FEN,
    Board,
    CapturedPieces,
    Color,
    FenError,
    GameState,
    Move,
    MoveRecord,
    Piece,
    PieceType,
    Square,
    decode_fen,
    decode_move,
    encode_fen,
    encode_move,
    initial_state,
    is_checkmate,
    is_in_check,
    legal_moves,
    make_move,
    parse_square,
)
from chesslite.engine import choose_move

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Board",
    "CapturedPieces",
    "Color",
    "FenError",
    "GameState",
    "Move",
    "MoveRecord",
    "Piece",
    "PieceType",
    "Square",
    "choose_move",
    "decode_fen",
    "decode_move",
    "encode_fen",
    "encode_move",
    "initial_state",
    "is_checkmate",
    "is_in_check",
    "legal_moves",
    "make_move",
    "parse_square",
]
