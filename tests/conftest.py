"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Iterator

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color
from chesslite.core.piece import Piece
from chesslite.core.state import GameState
from chesslite.core.types import parse_square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def build_state(
    pieces: dict[str, str],
    to_move: Color = Color.WHITE,
) -> GameState:
    """State from ``{"e1": "K", "e8": "k", ...}`` using FEN piece letters."""
    board = Board()
    for name, char in pieces.items():
        board[parse_square(name)] = Piece.from_char(char)
    return GameState(board=board, current_player=to_move)


@pytest.fixture
def make_state():
    """Factory fixture around :func:`build_state`."""
    return build_state
