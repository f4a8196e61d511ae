"""Exceptions raised while replaying movetext."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgnreplay.core.types import Coordinate, coord_name

if TYPE_CHECKING:
    from pgnreplay.notation.models import MoveToken
    from pgnreplay.replay.game import ReplayResult


class ReplayError(ValueError):
    """Base class for a half-move that could not be applied."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.token: MoveToken | None = None
        self.partial: ReplayResult | None = None

    def attach(self, token: MoveToken) -> None:
        """Record the half-move that failed."""
        self.token = token

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"ply {self.token.ply} ({self.token.text!r}): {self.message}"


class MalformedMoveToken(ReplayError):
    """Token matches no move shape."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed move token: {text!r}")
        self.text = text


class NoOriginFound(ReplayError):
    """No piece of the stated kind can reach the destination."""

    def __init__(self, description: str, dest: Coordinate) -> None:
        super().__init__(f"No {description} can reach {coord_name(dest)}")
        self.dest = dest


class AmbiguousOrigin(ReplayError):
    """Several pieces of the stated kind can reach the destination."""

    def __init__(
        self, description: str, dest: Coordinate, candidates: list[Coordinate]
    ) -> None:
        names = ", ".join(coord_name(sq) for sq in candidates)
        super().__init__(
            f"Ambiguous {description} to {coord_name(dest)}: candidates {names}"
        )
        self.dest = dest
        self.candidates = candidates
