"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from pgnreplay.core.enums import Color, GameResult, PieceKind
from pgnreplay.core.types import FILES, Coordinate


@dataclass(slots=True, frozen=True)
class MoveToken:
    """One half-move of movetext with its 1-based ply index."""

    text: str
    ply: int

    @property
    def color(self) -> Color:
        return Color.for_ply(self.ply)

    @property
    def move_number(self) -> int:
        return (self.ply + 1) // 2


@dataclass(slots=True, frozen=True)
class Disambiguation:
    """Origin file and/or row named by a SAN move."""

    col: int | None = None
    row: int | None = None

    def matches(self, coord: Coordinate) -> bool:
        row, col = coord
        if self.col is not None and col != self.col:
            return False
        return self.row is None or row == self.row

    def __str__(self) -> str:
        text = ""
        if self.col is not None:
            text += FILES[self.col]
        if self.row is not None:
            text += str(8 - self.row)
        return text


@dataclass(slots=True, frozen=True)
class PawnPush:
    dest: Coordinate
    promotion: PieceKind | None = None


@dataclass(slots=True, frozen=True)
class PawnCapture:
    from_col: int
    dest: Coordinate
    promotion: PieceKind | None = None


@dataclass(slots=True, frozen=True)
class PieceMove:
    kind: PieceKind
    dest: Coordinate
    capture: bool = False
    disambiguation: Disambiguation | None = None


@dataclass(slots=True, frozen=True)
class CastleKingside:
    pass


@dataclass(slots=True, frozen=True)
class CastleQueenside:
    pass


@dataclass(slots=True, frozen=True)
class GameTermination:
    result: GameResult


MoveKind: TypeAlias = (
    PawnPush
    | PawnCapture
    | PieceMove
    | CastleKingside
    | CastleQueenside
    | GameTermination
)
