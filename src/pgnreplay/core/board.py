"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from pgnreplay.core.enums import Color, PieceKind
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import FILES, Coordinate

_BACK_RANK = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 8x8 grid indexed by ``(row, col)``, row 0 being rank 8."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        row, col = coord
        return self._grid[row][col]

    def __setitem__(self, coord: Coordinate, piece: Piece | None) -> None:
        row, col = coord
        self._grid[row][col] = piece

    def is_empty(self, coord: Coordinate) -> bool:
        return self[coord] is None

    def vacate(self, coord: Coordinate) -> Piece | None:
        """Empty *coord* and return whatever stood there."""
        piece = self[coord]
        self[coord] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Coordinate, Piece]]:
        """Occupied squares in row-major scan order."""
        for row, cells in enumerate(self._grid):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield (row, col), piece

    def pieces(self, color: Color, kind: PieceKind) -> list[Coordinate]:
        """Squares holding *color*'s *kind*, in row-major scan order."""
        wanted = Piece(color, kind)
        return [coord for coord, piece in self.occupied() if piece == wanted]

    def rows(self) -> list[list[Piece | None]]:
        """Copy of the grid, rank 8 first."""
        return [cells.copy() for cells in self._grid]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = self.rows()
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting arrangement."""
        b = cls()
        for color in Color:
            for col, kind in enumerate(_BACK_RANK):
                b[color.back_row, col] = Piece(color, kind)
                b[color.pawn_row, col] = Piece(color, PieceKind.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        lines: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            lines.append(f"{8 - row} {text}")
        lines.append("  " + " ".join(FILES))
        return "\n".join(lines)
