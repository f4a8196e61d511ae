"""PGN helpers around the replay core: tag lookup and movetext isolation."""

from __future__ import annotations

import re
from pathlib import Path

NOT_GIVEN = "NOT GIVEN"
STANDARD_TAGS = ("Event", "Site", "Date", "Round", "White", "Black", "Result")

_FIRST_MOVE = "1."


def tag_value(name: str, game: str) -> str:
    """Return the value of tag pair *name*, or ``NOT GIVEN`` when absent."""
    pattern = re.compile(r'\[\s*' + re.escape(name) + r'\s+"((?:[^"\\]|\\.)*)"\s*\]')
    match = pattern.search(game)
    if match is None:
        return NOT_GIVEN
    return match.group(1).replace('\\"', '"').replace("\\\\", "\\")


def tag_values(game: str, names: tuple[str, ...] = STANDARD_TAGS) -> dict[str, str]:
    """Look up several tags at once, keeping the order of *names*."""
    return {name: tag_value(name, game) for name in names}


def extract_movetext(game: str) -> str:
    """Return the movetext of *game*, starting at its first ``1.`` marker.

    Header tag pairs are skipped by searching after the last ``]``. A game
    without any ``1.`` marker has no moves and yields an empty string.
    """
    header_end = game.rfind("]")
    body = game if header_end < 0 else game[header_end + 1 :]
    start = body.find(_FIRST_MOVE)
    if start < 0:
        return ""
    return body[start:]


def read_game(path: str | Path) -> str:
    """Read a PGN file as UTF-8 text.

    Raises :class:`OSError` when the file cannot be read and
    :class:`UnicodeDecodeError` when it is not valid UTF-8.
    """
    return Path(path).read_text(encoding="utf-8")
