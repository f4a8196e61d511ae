"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from pgnreplay.core.enums import Color, PieceKind


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        letter = self.kind.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN letter, e.g. 'N' → white knight."""
        try:
            kind = PieceKind.from_letter(char)
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)
