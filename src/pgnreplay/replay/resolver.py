"""Origin resolution: which square a SAN move starts from.

The resolver checks geometry and path clearance only. It does not look for
checks or pins, so it can accept moves a legal-move generator would reject.
"""

from __future__ import annotations

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, PieceKind
from pgnreplay.core.geometry import (
    is_diagonal,
    is_straight,
    king_origins,
    knight_origins,
    path_is_clear,
)
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import Coordinate, in_bounds
from pgnreplay.errors import AmbiguousOrigin, NoOriginFound
from pgnreplay.notation.models import Disambiguation


def _slides_to(
    board: Board, origin: Coordinate, dest: Coordinate, kind: PieceKind
) -> bool:
    straight = kind in (PieceKind.ROOK, PieceKind.QUEEN) and is_straight(origin, dest)
    diagonal = kind in (PieceKind.BISHOP, PieceKind.QUEEN) and is_diagonal(origin, dest)
    return (straight or diagonal) and path_is_clear(board, origin, dest)


def can_reach(
    board: Board, origin: Coordinate, dest: Coordinate, kind: PieceKind
) -> bool:
    """Whether a *kind* piece on *origin* can reach *dest* on *board*."""
    if kind == PieceKind.KNIGHT:
        return origin in knight_origins(dest)
    if kind == PieceKind.KING:
        return origin in king_origins(dest)
    if kind == PieceKind.PAWN:
        raise ValueError("Pawn origins are resolved by file, not by reach")
    return _slides_to(board, origin, dest, kind)


def find_candidates(
    board: Board,
    kind: PieceKind,
    color: Color,
    dest: Coordinate,
    disambiguation: Disambiguation | None = None,
) -> list[Coordinate]:
    """All squares a *color* *kind* could move to *dest* from, row-major."""
    wanted = Piece(color, kind)
    if kind == PieceKind.KNIGHT:
        squares = sorted(knight_origins(dest))
    elif kind == PieceKind.KING:
        squares = sorted(king_origins(dest))
    else:
        squares = board.pieces(color, kind)

    candidates: list[Coordinate] = []
    for origin in squares:
        if board[origin] != wanted:
            continue
        if disambiguation is not None and not disambiguation.matches(origin):
            continue
        if can_reach(board, origin, dest, kind):
            candidates.append(origin)
    return candidates


def _describe(color: Color, kind: PieceKind) -> str:
    return f"{color} {kind.name.lower()}"


def resolve_origin(
    board: Board,
    kind: PieceKind,
    color: Color,
    dest: Coordinate,
    disambiguation: Disambiguation | None = None,
    *,
    strict: bool = False,
) -> Coordinate:
    """Return the square the move of a *color* *kind* to *dest* starts from.

    Without *strict* the first candidate in row-major scan order wins, which
    is only correct when the movetext is unambiguous once its hint is
    applied. With *strict*, more than one candidate raises
    :class:`AmbiguousOrigin`.
    """
    candidates = find_candidates(board, kind, color, dest, disambiguation)
    if not candidates:
        raise NoOriginFound(_describe(color, kind), dest)
    if strict and len(candidates) > 1:
        raise AmbiguousOrigin(_describe(color, kind), dest, candidates)
    return candidates[0]


def resolve_pawn_push_origin(
    board: Board, color: Color, dest: Coordinate
) -> Coordinate:
    """Return the pawn that advances straight to *dest*.

    The first occupied square behind *dest* in its file must hold one of the
    mover's pawns: one row back, or two rows back from the pawn start row.
    """
    own_pawn = Piece(color, PieceKind.PAWN)
    row, col = dest
    back = -color.forward
    for distance in (1, 2):
        origin = (row + back * distance, col)
        if not in_bounds(*origin):
            break
        piece = board[origin]
        if piece is None:
            continue
        if piece == own_pawn and (distance == 1 or origin[0] == color.pawn_row):
            return origin
        break
    raise NoOriginFound(_describe(color, PieceKind.PAWN), dest)


def resolve_pawn_capture_origin(
    board: Board, color: Color, from_col: int, dest: Coordinate
) -> Coordinate:
    """Return the capturing pawn: one row behind *dest* on file *from_col*."""
    row, col = dest
    origin = (row - color.forward, from_col)
    if (
        abs(from_col - col) != 1
        or not in_bounds(*origin)
        or board[origin] != Piece(color, PieceKind.PAWN)
    ):
        raise NoOriginFound(_describe(color, PieceKind.PAWN), dest)
    return origin
