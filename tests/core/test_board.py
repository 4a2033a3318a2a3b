"""Tests for Board and Piece."""

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square, parse_square


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board.at(0, col) == Piece(Color.BLACK, pt)
            assert board.at(7, col) == Piece(Color.WHITE, pt)

    def test_pawns(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board.at(1, col) == Piece(Color.BLACK, PieceType.PAWN)
            assert board.at(6, col) == Piece(Color.WHITE, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.at(row, col) is None

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16


class TestBoardAccess:
    def test_off_board_index_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(IndexError):
            board[Square(-1, 0)]
        with pytest.raises(IndexError):
            board[Square(0, 8)]

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == parse_square("e1")
        assert board.find_king(Color.BLACK) == parse_square("e8")

    def test_find_king_missing(self) -> None:
        board = Board()
        assert board.find_king(Color.WHITE) is None

    def test_repr_top_line_is_rank_eight(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestBoardCopy:
    def test_copy_is_equal(self) -> None:
        board = Board.initial()
        assert board.copy() == board

    def test_copy_shares_no_rows(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[parse_square("e2")] = None
        assert board[parse_square("e2")] == Piece(Color.WHITE, PieceType.PAWN)
        assert clone != board

    def test_from_rows_round_trip(self) -> None:
        board = Board.initial()
        assert Board.from_rows(board.rows()) == board

    def test_from_rows_rejects_ragged_grid(self) -> None:
        with pytest.raises(ValueError):
            Board.from_rows([[None] * 8 for _ in range(7)])

    def test_equal_boards_hash_equal(self) -> None:
        board = Board.initial()
        assert hash(board.copy()) == hash(board)

    def test_smaller_board(self) -> None:
        board = Board.empty(6)
        assert board.size == 6
        with pytest.raises(IndexError):
            board[Square(6, 0)]


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"

    def test_from_char(self) -> None:
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_moved_sets_flag(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        moved = pawn.moved()
        assert moved.has_moved
        assert not pawn.has_moved

    def test_has_moved_ignored_by_equality(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        assert pawn.moved() == pawn
