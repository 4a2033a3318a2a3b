"""Tests for the command-line entry point."""

import pytest

from chesslite.app import EXIT_BAD_INPUT, EXIT_OK, main

BACK_RANK_MATE = "R6k/6pp/8/8/8/8/8/6K1 b - - 0 1"


class TestMain:
    def test_start_position_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--seed", "1"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "To move: white" in out
        assert "Status: normal" in out
        assert "Legal moves (20):" in out
        assert "Suggested: " in out

    def test_replays_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--moves", "e2e4", "e7e5", "--seed", "2"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "4p3/4P3" in out
        assert "To move: white" in out

    def test_checkmate_has_no_suggestion(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--fen", BACK_RANK_MATE]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Status: checkmate" in out
        assert "Legal moves (0):" in out
        assert "Suggested: -" in out

    def test_check_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--fen", "4k3/8/8/8/8/8/8/r3K3 w - - 0 1"]) == EXIT_OK
        assert "Status: check" in capsys.readouterr().out

    def test_bad_fen(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--fen", "not a fen"]) == EXIT_BAD_INPUT
        assert "chesslite:" in capsys.readouterr().err

    def test_illegal_move(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--moves", "e2e5"]) == EXIT_BAD_INPUT
        assert capsys.readouterr().err.startswith("chesslite: cannot play")

    def test_single_token_fen(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--fen", "garbage"]) == EXIT_BAD_INPUT
        captured = capsys.readouterr()
        assert captured.err.startswith("chesslite: ")
        assert captured.out == ""

    def test_undecodable_move(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--moves", "e2e4", "zz"]) == EXIT_BAD_INPUT
        assert capsys.readouterr().err.startswith("chesslite: cannot play")
