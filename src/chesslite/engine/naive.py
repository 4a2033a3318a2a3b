"""Naive move selector: checks first, then captures, then anything."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol, TypeVar

from chesslite.core.move import Move
from chesslite.core.rules import all_legal_moves, is_in_check, make_move
from chesslite.core.state import GameState

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T")


class ChoiceSource(Protocol):
    """Anything with ``random.Random.choice`` semantics."""

    def choice(self, seq: list[_T]) -> _T: ...


@dataclass(slots=True, frozen=True)
class MoveGroups:
    """Legal moves of the side to move, bucketed by preference."""

    checks: tuple[Move, ...]
    captures: tuple[Move, ...]
    all_moves: tuple[Move, ...]

    def preferred(self) -> tuple[str, tuple[Move, ...]]:
        """Name and members of the first non-empty group."""
        if self.checks:
            return "check", self.checks
        if self.captures:
            return "capture", self.captures
        return "any", self.all_moves


def classify_moves(state: GameState) -> MoveGroups:
    """Split the legal moves of ``state.current_player`` into groups.

    A move belongs to ``checks`` when the opponent is in check after it, and
    to ``captures`` when its destination was occupied before it. A move can
    be in both.
    """
    board = state.board
    moves = all_legal_moves(state)
    checks: list[Move] = []
    captures: list[Move] = []
    for move in moves:
        if board[move.to_sq] is not None:
            captures.append(move)
        after = make_move(state, move.from_sq, move.to_sq)
        if after is not None and is_in_check(after, after.current_player):
            checks.append(move)
    return MoveGroups(tuple(checks), tuple(captures), tuple(moves))


def choose_move(state: GameState, rng: ChoiceSource | None = None) -> Move | None:
    """Pick a move for the side to move, or None when it has no legal move.

    The pick is uniform within the preferred group. Pass a seeded
    ``random.Random`` as *rng* for reproducible choices; without one a fresh
    generator seeded from the system is used for this call.
    """
    groups = classify_moves(state)
    if not groups.all_moves:
        _LOGGER.debug("No legal move for %s", state.current_player)
        return None

    group_name, candidates = groups.preferred()
    if rng is None:
        rng = random.Random()
    move = rng.choice(list(candidates))
    _LOGGER.debug(
        "Chose %s from %d %s move(s) for %s",
        move,
        len(candidates),
        group_name,
        state.current_player,
    )
    return move


class NaiveEngine:
    """Stateful wrapper holding the random source for :func:`choose_move`."""

    __slots__ = ("_rng",)

    def __init__(self, rng: ChoiceSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def choose(self, state: GameState) -> Move | None:
        return choose_move(state, self._rng)
