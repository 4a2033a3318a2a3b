"""Board - piece placement on a square grid (8x8 unless told otherwise)."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import BOARD_SIZE, Square, is_valid_position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Grid of optional pieces indexed by :class:`Square`.

    Boards held by a :class:`~chesslite.core.state.GameState` are never
    written to. Code that needs a different placement calls :meth:`copy`
    first and mutates the copy; the copy shares no row list with the
    original.
    """

    __slots__ = ("_rows",)

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._rows: list[list[Piece | None]] = [[None] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return len(self._rows)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_valid_position(sq.row, sq.col, self.size):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._rows[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_valid_position(sq.row, sq.col, self.size):
            raise IndexError(f"Square off the board: {sq!r}")
        self._rows[sq.row][sq.col] = piece

    def at(self, row: int, col: int) -> Piece | None:
        return self[Square(row, col)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) for every occupied square, row-major."""
        for row_idx, row in enumerate(self._rows):
            for col_idx, piece in enumerate(row):
                if piece is not None:
                    yield Square(row_idx, col_idx), piece

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All of *color*'s pieces with their squares."""
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    def find_king(self, color: Color) -> Square | None:
        """First king of *color* in row-major order, or None if missing."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(row) for row in self._rows)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._rows = [row.copy() for row in self._rows]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls, size: int = BOARD_SIZE) -> Board:
        return cls(size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build a board from a square grid, row 0 first."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Board rows must form a square grid")
        b = cls.__new__(cls)
        b._rows = [list(row) for row in rows]
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        # Only valid while the board is not written to, as in a GameState.
        return hash(self.rows())

    def __repr__(self) -> str:
        lines: list[str] = []
        size = self.size
        for row_idx, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{size - row_idx} {' '.join(cells)}")
        lines.append("  " + " ".join("abcdefgh"[:size]))
        return "\n".join(lines)
