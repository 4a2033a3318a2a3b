"""Qt bridge to run the move selector in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslite.core.state import GameState
from chesslite.engine.naive import ChoiceSource, NaiveEngine

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that picks the computer's reply on demand.

    Move it to a ``QThread`` and connect ``request_move`` to a queued
    signal; results come back through the signals below tagged with the
    caller's request id so stale replies can be dropped.
    """

    move_ready = pyqtSignal(int, object)
    no_move = pyqtSignal(int)
    move_error = pyqtSignal(int, str)

    def __init__(self, *, rng: ChoiceSource | None = None) -> None:
        super().__init__()
        self._engine = NaiveEngine(rng)

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Choose a move in *state_obj* and emit the result."""
        if not isinstance(state_obj, GameState):
            self.move_error.emit(request_id, "Engine received invalid game state")
            return

        try:
            move = self._engine.choose(state_obj)
        except Exception as exc:
            _LOGGER.exception("Move selection failed for request %d", request_id)
            self.move_error.emit(request_id, str(exc))
            return

        if move is None:
            self.no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, move)
