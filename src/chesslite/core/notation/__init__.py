"""Notation package: restricted FEN and coordinate move notation."""

from chesslite.core.notation.coordinate import decode_move, encode_move
from chesslite.core.notation.fen import (
    PLACEHOLDER_FIELDS,
    STARTING_FEN,
    FenError,
    decode_fen,
    encode_fen,
)

__all__ = [
    "STARTING_FEN",
    "PLACEHOLDER_FIELDS",
    "FenError",
    "decode_fen",
    "encode_fen",
    "decode_move",
    "encode_move",
]
