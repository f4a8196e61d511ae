"""Board simulator: applies classified half-moves to a board in place."""

from __future__ import annotations

from dataclasses import dataclass

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, PieceKind
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import Coordinate
from pgnreplay.notation.models import (
    CastleKingside,
    CastleQueenside,
    GameTermination,
    MoveKind,
    PawnCapture,
    PawnPush,
    PieceMove,
)
from pgnreplay.replay.resolver import (
    resolve_origin,
    resolve_pawn_capture_origin,
    resolve_pawn_push_origin,
)

_KING_COL = 4
# side -> (king destination col, rook origin col, rook destination col)
_CASTLE_COLS: dict[type, tuple[int, int, int]] = {
    CastleKingside: (6, 7, 5),
    CastleQueenside: (2, 0, 3),
}


@dataclass(slots=True, frozen=True)
class AppliedMove:
    """What a single half-move did to the board."""

    move: MoveKind
    color: Color
    origin: Coordinate | None = None
    dest: Coordinate | None = None
    captured: Piece | None = None


def _castle(
    board: Board, move: CastleKingside | CastleQueenside, color: Color
) -> AppliedMove:
    king_col, rook_from, rook_to = _CASTLE_COLS[type(move)]
    row = color.back_row
    board[row, _KING_COL] = None
    board[row, rook_from] = None
    board[row, king_col] = Piece(color, PieceKind.KING)
    board[row, rook_to] = Piece(color, PieceKind.ROOK)
    return AppliedMove(move, color, (row, _KING_COL), (row, king_col))


def _landing_piece(color: Color, promotion: PieceKind | None) -> Piece:
    return Piece(color, promotion or PieceKind.PAWN)


def apply_move(
    board: Board, move: MoveKind, color: Color, *, strict: bool = False
) -> AppliedMove:
    """Apply *move* for *color* to *board* and report what changed.

    The origin is resolved before anything is touched, so a move that raises
    leaves *board* exactly as it was.
    """
    if isinstance(move, GameTermination):
        return AppliedMove(move, color)

    if isinstance(move, (CastleKingside, CastleQueenside)):
        return _castle(board, move, color)

    if isinstance(move, PawnPush):
        origin = resolve_pawn_push_origin(board, color, move.dest)
        board.vacate(origin)
        captured = board[move.dest]
        board[move.dest] = _landing_piece(color, move.promotion)
        return AppliedMove(move, color, origin, move.dest, captured)

    if isinstance(move, PawnCapture):
        origin = resolve_pawn_capture_origin(board, color, move.from_col, move.dest)
        captured = board[move.dest]
        board.vacate(origin)
        if captured is None and move.promotion is None:
            # En passant: the captured pawn sits beside the origin.
            captured = board.vacate((origin[0], move.dest[1]))
        board[move.dest] = _landing_piece(color, move.promotion)
        return AppliedMove(move, color, origin, move.dest, captured)

    if isinstance(move, PieceMove):
        origin = resolve_origin(
            board, move.kind, color, move.dest, move.disambiguation, strict=strict
        )
        piece = board.vacate(origin)
        captured = board[move.dest]
        board[move.dest] = piece
        return AppliedMove(move, color, origin, move.dest, captured)

    raise TypeError(f"Unsupported move kind: {move!r}")
