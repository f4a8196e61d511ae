"""Movetext tokenizer."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pgnreplay.notation.models import MoveToken

_MOVE_NUMBER_RE = re.compile(r"^\d+\.(?:\.\.)?$")

EN_PASSANT_SUFFIX = "e.p."


def is_move_number(token: str) -> bool:
    """Whether *token* is a move-number marker such as ``12.`` or ``12...``."""
    return _MOVE_NUMBER_RE.match(token) is not None


def tokenize(movetext: str) -> list[str]:
    """Split movetext on any whitespace, keeping move numbers as tokens."""
    return movetext.split()


def move_tokens(tokens: Iterable[str]) -> list[MoveToken]:
    """Drop move-number markers and number the remaining half-moves.

    A detached ``e.p.`` mark belongs to the capture before it and is dropped
    as well.
    """
    moves: list[MoveToken] = []
    for token in tokens:
        if is_move_number(token) or token == EN_PASSANT_SUFFIX:
            continue
        moves.append(MoveToken(text=token, ply=len(moves) + 1))
    return moves
