"""Replay SAN movetext into a final board position.

Quick start::

    from pgnreplay import replay

    board, placement = replay("1. e4 e5 2. Nf3 Nc6")
    print(placement)  # r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R
"""

from pgnreplay.core import Board, Color, ErrorPolicy, GameResult, Piece, PieceKind
from pgnreplay.errors import (
    AmbiguousOrigin,
    MalformedMoveToken,
    NoOriginFound,
    ReplayError,
)
from pgnreplay.notation import (
    INITIAL_PLACEMENT,
    MoveKind,
    board_from_placement,
    board_to_placement,
    classify,
    extract_movetext,
    tag_value,
    tokenize,
)
from pgnreplay.replay import (
    AppliedMove,
    ReplayOptions,
    ReplayResult,
    apply_move,
    find_candidates,
    replay,
    replay_game,
    resolve_origin,
)

__version__ = "0.1.0"

__all__ = [
    "INITIAL_PLACEMENT",
    # Domain objects
    "Board",
    "Color",
    "ErrorPolicy",
    "GameResult",
    "MoveKind",
    "Piece",
    "PieceKind",
    # Errors
    "AmbiguousOrigin",
    "MalformedMoveToken",
    "NoOriginFound",
    "ReplayError",
    # Replay
    "AppliedMove",
    "ReplayOptions",
    "ReplayResult",
    "apply_move",
    "board_from_placement",
    "board_to_placement",
    "classify",
    "extract_movetext",
    "find_candidates",
    "replay",
    "replay_game",
    "resolve_origin",
    "tag_value",
    "tokenize",
]
