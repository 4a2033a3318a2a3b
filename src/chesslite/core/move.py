"""Move and move-history value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.piece import Piece
from chesslite.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A (from, to) pair; ``str(move)`` is coordinate notation, e.g. 'e2e4'."""

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    ``piece`` is the mover as it was before the move (so ``has_moved`` may
    still be False); ``captured`` is whatever stood on ``to_sq``.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None

    @property
    def move(self) -> Move:
        return Move(self.from_sq, self.to_sq)
