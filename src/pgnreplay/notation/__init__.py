"""Notation package: movetext tokens, SAN classification, FEN placement, PGN."""

from pgnreplay.notation.fen import (
    INITIAL_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from pgnreplay.notation.models import (
    CastleKingside,
    CastleQueenside,
    Disambiguation,
    GameTermination,
    MoveKind,
    MoveToken,
    PawnCapture,
    PawnPush,
    PieceMove,
)
from pgnreplay.notation.pgn import (
    NOT_GIVEN,
    STANDARD_TAGS,
    extract_movetext,
    read_game,
    tag_value,
    tag_values,
)
from pgnreplay.notation.san import classify, strip_annotations
from pgnreplay.notation.tokenizer import is_move_number, move_tokens, tokenize

__all__ = [
    "INITIAL_PLACEMENT",
    "NOT_GIVEN",
    "STANDARD_TAGS",
    # Move kinds
    "CastleKingside",
    "CastleQueenside",
    "Disambiguation",
    "GameTermination",
    "MoveKind",
    "MoveToken",
    "PawnCapture",
    "PawnPush",
    "PieceMove",
    # Functions
    "board_from_placement",
    "board_to_placement",
    "classify",
    "extract_movetext",
    "is_move_number",
    "move_tokens",
    "read_game",
    "strip_annotations",
    "tag_value",
    "tag_values",
    "tokenize",
]
