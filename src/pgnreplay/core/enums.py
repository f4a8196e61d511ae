"""Core enumerations for the replay domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row step of a pawn advance (row 0 is rank 8)."""
        return -1 if self == Color.WHITE else 1

    @property
    def back_row(self) -> int:
        """Row holding this side's pieces in the initial arrangement."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_row(self) -> int:
        """Row holding this side's pawns in the initial arrangement."""
        return 6 if self == Color.WHITE else 1

    @classmethod
    def for_ply(cls, ply: int) -> Color:
        """Side that plays the 1-based half-move *ply*."""
        return cls.WHITE if ply % 2 == 1 else cls.BLACK

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Uppercase letter used in SAN and FEN."""
        return _KIND_LETTER[self]

    @classmethod
    def from_letter(cls, letter: str) -> PieceKind:
        try:
            return _LETTER_KIND[letter.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_KIND_LETTER: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_LETTER_KIND: dict[str, PieceKind] = {v: k for k, v in _KIND_LETTER.items()}


class GameResult(StrEnum):
    """Result tokens that terminate movetext."""

    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"
    UNFINISHED = "*"


class ErrorPolicy(StrEnum):
    """What the replay loop does with a half-move it cannot apply."""

    RAISE = "raise"
    STOP = "stop"
    SKIP = "skip"
