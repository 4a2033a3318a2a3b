"""Command-line entry point: inspect a position and get a suggested move."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence
from typing import TextIO

from chesslite.core.notation import STARTING_FEN, FenError, decode_fen, encode_fen
from chesslite.core.rules import all_legal_moves, apply_moves, is_checkmate, is_in_check
from chesslite.core.state import GameState
from chesslite.engine.naive import choose_move

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslite",
        description="Show legal moves and a suggested reply for a position.",
    )
    parser.add_argument(
        "--fen",
        default=STARTING_FEN,
        help="position to start from (default: standard start)",
    )
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        metavar="MOVE",
        help="coordinate-notation moves to play first, e.g. e2e4 e7e5",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the move selector",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging threshold (default: WARNING)",
    )
    return parser


def describe(state: GameState, rng: random.Random, out: TextIO) -> None:
    """Write a human-readable report of *state* to *out*."""
    side = state.current_player
    out.write(f"{state.board!r}\n")
    out.write(f"FEN: {encode_fen(state)}\n")
    out.write(f"To move: {side}\n")
    if is_checkmate(state, side):
        out.write("Status: checkmate\n")
    elif is_in_check(state, side):
        out.write("Status: check\n")
    else:
        out.write("Status: normal\n")

    moves = all_legal_moves(state)
    out.write(f"Legal moves ({len(moves)}): {' '.join(str(m) for m in moves)}\n")
    suggestion = choose_move(state, rng)
    out.write(f"Suggested: {suggestion if suggestion is not None else '-'}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, replay the requested moves and print the report."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        state = decode_fen(args.fen)
    except FenError as exc:
        print(f"chesslite: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    replayed = apply_moves(state, args.moves)
    if replayed is None:
        print(
            f"chesslite: cannot play moves {' '.join(args.moves)}",
            file=sys.stderr,
        )
        return EXIT_BAD_INPUT
    _LOGGER.info("Replayed %d move(s)", len(args.moves))

    describe(replayed, random.Random(args.seed), sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
