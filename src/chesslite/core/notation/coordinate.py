"""Coordinate move notation ("e2e4")."""

from __future__ import annotations

from chesslite.core.move import Move
from chesslite.core.types import BOARD_SIZE, FILES, Square, square_name

_RANKS = "12345678"


def encode_move(from_sq: Square, to_sq: Square) -> str:
    """Four characters: file and rank of *from_sq*, then of *to_sq*."""
    return f"{square_name(from_sq)}{square_name(to_sq)}"


def decode_move(text: str) -> Move | None:
    """Inverse of :func:`encode_move`.

    Returns None for strings shorter than four characters or with a file
    outside a-h or a rank outside 1-8. Anything after the fourth character
    is ignored.
    """
    if len(text) < 4:
        return None
    from_sq = _parse(text[0], text[1])
    to_sq = _parse(text[2], text[3])
    if from_sq is None or to_sq is None:
        return None
    return Move(from_sq, to_sq)


def _parse(file_char: str, rank_char: str) -> Square | None:
    if file_char not in FILES or rank_char not in _RANKS:
        return None
    return Square(BOARD_SIZE - int(rank_char), ord(file_char) - ord("a"))
