"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from pgnreplay.core.enums import ErrorPolicy
from pgnreplay.errors import ReplayError
from pgnreplay.notation.pgn import STANDARD_TAGS, read_game, tag_values
from pgnreplay.replay.game import ReplayOptions, replay_game

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnreplay",
        description="Print PGN tags and the FEN placement of the final position",
    )
    parser.add_argument("path", help="PGN file holding a single game")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on moves more than one piece could make",
    )
    parser.add_argument(
        "--on-error",
        choices=[policy.value for policy in ErrorPolicy],
        default=ErrorPolicy.RAISE.value,
        help="what to do with a move that cannot be applied (default: raise)",
    )
    parser.add_argument(
        "--board", action="store_true", help="also print the final board"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every move")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        game = read_game(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return 2

    for name, value in tag_values(game, STANDARD_TAGS).items():
        print(f"{name}: {value}")

    options = ReplayOptions(strict=args.strict, on_error=ErrorPolicy(args.on_error))
    try:
        outcome = replay_game(game, options)
    except ReplayError as exc:
        print(f"Replay failed at {exc}", file=sys.stderr)
        return 1

    print("Final Position:")
    print(outcome.placement)
    if args.board:
        print()
        print(repr(outcome.board))

    if not outcome.complete:
        reason = outcome.error or f"{len(outcome.skipped)} half-move(s) skipped"
        print(f"Incomplete replay: {reason}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
