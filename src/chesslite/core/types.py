"""Square type and coordinate helpers.

Board layout (row-major, white at the bottom):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

So ``Square(6, 4)`` is e2 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (row, col) coordinate on the board."""

    row: int
    col: int

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Square(6, 4) → 'e2'."""
        return square_name(self)

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by (*d_row*, *d_col*); may fall off the board."""
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return self.name


def is_valid_position(row: int, col: int, board_size: int = BOARD_SIZE) -> bool:
    """Both coordinates lie in ``[0, board_size)``."""
    return 0 <= row < board_size and 0 <= col < board_size


def square_name(sq: Square) -> str:
    """File letter + rank digit; rank is ``8 - row``."""
    return f"{chr(ord('a') + sq.col)}{BOARD_SIZE - sq.row}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
