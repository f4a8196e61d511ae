"""Replay loop: movetext in, final board and placement out."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from pgnreplay.core.board import Board
from pgnreplay.core.enums import ErrorPolicy, GameResult
from pgnreplay.core.types import coord_name
from pgnreplay.errors import ReplayError
from pgnreplay.notation.fen import board_to_placement
from pgnreplay.notation.models import GameTermination, MoveToken
from pgnreplay.notation.pgn import extract_movetext
from pgnreplay.notation.san import classify
from pgnreplay.notation.tokenizer import move_tokens, tokenize
from pgnreplay.replay.simulator import AppliedMove, apply_move

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ReplayOptions:
    """Replay behaviour switches."""

    strict: bool = False
    on_error: ErrorPolicy = ErrorPolicy.RAISE


@dataclass(slots=True)
class ReplayResult:
    """Outcome of replaying one game.

    Unpacks as ``board, placement`` for callers that only want the position.
    """

    board: Board
    placement: str = ""
    applied: list[AppliedMove] = field(default_factory=list)
    result: GameResult | None = None
    error: ReplayError | None = None
    skipped: list[tuple[MoveToken, ReplayError]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """Whether every half-move up to the end or result token applied."""
        return self.error is None and not self.skipped

    @property
    def ply_count(self) -> int:
        return len(self.applied)

    def __iter__(self) -> Iterator[Board | str]:
        yield self.board
        yield self.placement


def _describe_applied(applied: AppliedMove) -> str:
    if applied.origin is None or applied.dest is None:
        return "-"
    return f"{coord_name(applied.origin)}-{coord_name(applied.dest)}"


def replay(movetext: str, options: ReplayOptions | None = None) -> ReplayResult:
    """Replay *movetext* from the initial arrangement.

    Stops at a result token or the end of input. A half-move that cannot be
    classified or resolved is handled according to ``options.on_error``:
    raised (default, with the incomplete result on ``error.partial``),
    reported on an incomplete result, or skipped with a warning.
    """
    opts = options or ReplayOptions()
    outcome = ReplayResult(board=Board.initial())

    for token in move_tokens(tokenize(movetext)):
        try:
            move = classify(token.text)
            applied = apply_move(outcome.board, move, token.color, strict=opts.strict)
        except ReplayError as exc:
            exc.attach(token)
            if opts.on_error == ErrorPolicy.SKIP:
                _LOGGER.warning("Skipping half-move: %s", exc)
                outcome.skipped.append((token, exc))
                continue
            outcome.error = exc
            outcome.placement = board_to_placement(outcome.board)
            if opts.on_error == ErrorPolicy.RAISE:
                exc.partial = outcome
                raise
            _LOGGER.debug("Replay stopped: %s", exc)
            return outcome

        if isinstance(move, GameTermination):
            _LOGGER.debug("Game terminated by %s at ply %d", move.result, token.ply)
            outcome.result = move.result
            break

        outcome.applied.append(applied)
        _LOGGER.debug(
            "Ply %d %s %s: %s",
            token.ply,
            token.color,
            token.text,
            _describe_applied(applied),
        )

    outcome.placement = board_to_placement(outcome.board)
    return outcome


def replay_game(game: str, options: ReplayOptions | None = None) -> ReplayResult:
    """Replay a full PGN game, skipping its header tag pairs."""
    return replay(extract_movetext(game), options)
