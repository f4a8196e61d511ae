"""Piece-placement (first FEN field) serialization and parsing."""

from __future__ import annotations

from pgnreplay.core.board import Board
from pgnreplay.core.piece import Piece

INITIAL_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_to_placement(board: Board) -> str:
    """Serialise *board* to the FEN piece-placement field, rank 8 first."""
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def board_from_placement(placement: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    Only the first whitespace-separated field is read, so a full FEN string
    is accepted too.
    """
    fields = placement.split()
    if not fields:
        raise ValueError(f"Invalid FEN placement: {placement!r}")
    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[row, col] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board
