"""Immutable game state: board + side to move + captures + move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.move import MoveRecord
from chesslite.core.piece import Piece


@dataclass(frozen=True, slots=True)
class CapturedPieces:
    """Trophies per capturing side.

    ``white`` holds the pieces white has taken (so only black pieces) and
    ``black`` the pieces black has taken.
    """

    white: tuple[Piece, ...] = ()
    black: tuple[Piece, ...] = ()

    def __getitem__(self, color: Color) -> tuple[Piece, ...]:
        return self.white if color == Color.WHITE else self.black

    def with_capture(self, piece: Piece) -> CapturedPieces:
        """New record with *piece* credited to its opponent."""
        if piece.color == Color.WHITE:
            return CapturedPieces(self.white, self.black + (piece,))
        return CapturedPieces(self.white + (piece,), self.black)


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of a game. Never mutated; transitions build a new one.

    The board is shared between states only as long as nobody writes to it,
    which the rules module guarantees by always copying before a move.
    """

    board: Board
    current_player: Color = Color.WHITE
    captured_pieces: CapturedPieces = field(default_factory=CapturedPieces)
    move_history: tuple[MoveRecord, ...] = ()

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None


def initial_state() -> GameState:
    """Standard starting position, white to move."""
    return GameState(board=Board.initial())
