"""Core domain layer: pieces, coordinates, the board and move geometry."""

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, ErrorPolicy, GameResult, PieceKind
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import (
    Coordinate,
    col_of_file,
    coord_name,
    in_bounds,
    make_coord,
    parse_coord,
    row_of_rank,
)

__all__ = [
    # Enums
    "Color",
    "ErrorPolicy",
    "GameResult",
    "PieceKind",
    # Types / helpers
    "Coordinate",
    "col_of_file",
    "coord_name",
    "in_bounds",
    "make_coord",
    "parse_coord",
    "row_of_rank",
    # Domain objects
    "Board",
    "Piece",
]
