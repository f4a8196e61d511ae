"""Replay layer: origin resolution, board simulation and the replay loop."""

from pgnreplay.replay.game import ReplayOptions, ReplayResult, replay, replay_game
from pgnreplay.replay.resolver import (
    can_reach,
    find_candidates,
    resolve_origin,
    resolve_pawn_capture_origin,
    resolve_pawn_push_origin,
)
from pgnreplay.replay.simulator import AppliedMove, apply_move

__all__ = [
    "AppliedMove",
    "ReplayOptions",
    "ReplayResult",
    "apply_move",
    "can_reach",
    "find_candidates",
    "replay",
    "replay_game",
    "resolve_origin",
    "resolve_pawn_capture_origin",
    "resolve_pawn_push_origin",
]
