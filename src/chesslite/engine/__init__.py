"""Move selection: the naive selector and its Qt worker bridge.

``EngineWorker`` lives in :mod:`chesslite.engine.qt_bridge` and is not
imported here, so the selector works without loading Qt.
"""

from chesslite.engine.naive import (
    ChoiceSource,
    MoveGroups,
    NaiveEngine,
    choose_move,
    classify_moves,
)

__all__ = [
    "ChoiceSource",
    "MoveGroups",
    "NaiveEngine",
    "choose_move",
    "classify_moves",
]
