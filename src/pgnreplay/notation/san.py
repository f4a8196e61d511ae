"""SAN move-token classification."""

from __future__ import annotations

import re

from pgnreplay.core.enums import GameResult, PieceKind
from pgnreplay.core.types import col_of_file, parse_coord, row_of_rank
from pgnreplay.errors import MalformedMoveToken
from pgnreplay.notation.models import (
    CastleKingside,
    CastleQueenside,
    Disambiguation,
    GameTermination,
    MoveKind,
    PawnCapture,
    PawnPush,
    PieceMove,
)
from pgnreplay.notation.tokenizer import EN_PASSANT_SUFFIX

_ANNOTATION_CHARS = "+#!?"
_RESULT_TOKENS: dict[str, GameResult] = {r.value: r for r in GameResult}

_SAN_RE = re.compile(
    r"^(?P<piece>[NBRQK])?"
    r"(?P<from_file>[a-h])?"
    r"(?P<from_rank>[1-8])?"
    r"(?P<capture>x)?"
    r"(?P<dest>[a-h][1-8])"
    r"(?:=(?P<promotion>[NBRQ]))?$"
)


def strip_annotations(token: str) -> str:
    """Drop check/mate marks, move-quality marks and an ``e.p.`` suffix."""
    clean = token
    while True:
        stripped = clean.rstrip(_ANNOTATION_CHARS)
        stripped = stripped.removesuffix(EN_PASSANT_SUFFIX)
        if stripped == clean:
            return clean
        clean = stripped


def classify(token: str) -> MoveKind:
    """Classify one movetext token by its syntactic shape.

    Raises :class:`MalformedMoveToken` for anything that is not a standard
    SAN move, castle or result token.
    """
    result = _RESULT_TOKENS.get(token)
    if result is not None:
        return GameTermination(result)

    clean = strip_annotations(token)

    # Queenside first: "O-O" is a prefix of "O-O-O".
    if clean == "O-O-O":
        return CastleQueenside()
    if clean == "O-O":
        return CastleKingside()

    match = _SAN_RE.match(clean)
    if match is None:
        raise MalformedMoveToken(token)

    piece, from_file, from_rank, capture, dest_text, promo = match.group(
        "piece", "from_file", "from_rank", "capture", "dest", "promotion"
    )
    dest = parse_coord(dest_text)
    promotion = PieceKind.from_letter(promo) if promo else None

    if piece is None:
        # A pawn promotes exactly when it lands on the first or last rank.
        if (promotion is not None) != (dest[0] in (0, 7)):
            raise MalformedMoveToken(token)
        if from_rank is not None:
            raise MalformedMoveToken(token)
        if capture:
            if from_file is None:
                raise MalformedMoveToken(token)
            return PawnCapture(col_of_file(from_file), dest, promotion)
        if from_file is not None:
            raise MalformedMoveToken(token)
        return PawnPush(dest, promotion)

    if promotion is not None:
        raise MalformedMoveToken(token)

    disambiguation = None
    if from_file is not None or from_rank is not None:
        disambiguation = Disambiguation(
            col=col_of_file(from_file) if from_file else None,
            row=row_of_rank(int(from_rank)) if from_rank else None,
        )
    return PieceMove(
        PieceKind.from_letter(piece),
        dest,
        capture=bool(capture),
        disambiguation=disambiguation,
    )
