"""Coordinate type alias and helpers.

Board layout (row-major, rank 8 first):
    a8=(0, 0), b8=(0, 1), ..., h8=(0, 7)
    ...
    a1=(7, 0), b1=(7, 1), ..., h1=(7, 7)
"""

from __future__ import annotations

from typing import TypeAlias

Coordinate: TypeAlias = tuple[int, int]  # (row, col), each 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def make_coord(row: int, col: int) -> Coordinate:
    return (row, col)


def row_of_rank(rank: int) -> int:
    """Row index for rank 1–8, e.g. rank 8 → row 0."""
    return 8 - rank


def col_of_file(file: str) -> int:
    """Column index for file letter a–h."""
    return ord(file) - ord("a")


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def coord_name(coord: Coordinate) -> str:
    """Human-readable name, e.g. (4, 4) → 'e4'."""
    row, col = coord
    return FILES[col] + str(8 - row)


def parse_coord(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return (row_of_rank(int(name[1])), col_of_file(name[0]))
