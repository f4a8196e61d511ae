"""Pure move geometry over board coordinates.

Nothing here knows about notation: callers pass coordinates in and get
coordinates (or booleans) back, so the origin resolver can be exercised
without going through the tokenizer or classifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgnreplay.core.types import Coordinate, in_bounds, make_coord

if TYPE_CHECKING:
    from pgnreplay.core.board import Board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _offset_squares(
    coord: Coordinate, offsets: tuple[tuple[int, int], ...]
) -> list[Coordinate]:
    row, col = coord
    return [
        make_coord(row + dr, col + dc)
        for dr, dc in offsets
        if in_bounds(row + dr, col + dc)
    ]


def knight_origins(dest: Coordinate) -> list[Coordinate]:
    """Squares a knight could have jumped to *dest* from."""
    return _offset_squares(dest, KNIGHT_OFFSETS)


def king_origins(dest: Coordinate) -> list[Coordinate]:
    """Squares adjacent to *dest*."""
    return _offset_squares(dest, KING_OFFSETS)


def is_straight(a: Coordinate, b: Coordinate) -> bool:
    """Whether *a* and *b* are distinct squares sharing a row or column."""
    return a != b and (a[0] == b[0] or a[1] == b[1])


def is_diagonal(a: Coordinate, b: Coordinate) -> bool:
    """Whether *a* and *b* are distinct squares on one diagonal."""
    return a != b and abs(a[0] - b[0]) == abs(a[1] - b[1])


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def squares_between(a: Coordinate, b: Coordinate) -> list[Coordinate]:
    """Squares strictly between *a* and *b* on a straight or diagonal line."""
    if not (is_straight(a, b) or is_diagonal(a, b)):
        raise ValueError(f"Squares {a} and {b} are not on a common line")
    step_row = _sign(b[0] - a[0])
    step_col = _sign(b[1] - a[1])
    between: list[Coordinate] = []
    row, col = a[0] + step_row, a[1] + step_col
    while (row, col) != b:
        between.append((row, col))
        row += step_row
        col += step_col
    return between


def path_is_clear(board: Board, a: Coordinate, b: Coordinate) -> bool:
    """Whether every square strictly between *a* and *b* is empty."""
    return all(board.is_empty(sq) for sq in squares_between(a, b))
