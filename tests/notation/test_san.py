"""Tests for movetext tokenizing and SAN classification."""

import pytest

from pgnreplay.core.enums import Color, GameResult, PieceKind
from pgnreplay.core.types import parse_coord
from pgnreplay.errors import MalformedMoveToken
from pgnreplay.notation.models import (
    CastleKingside,
    CastleQueenside,
    Disambiguation,
    GameTermination,
    MoveToken,
    PawnCapture,
    PawnPush,
    PieceMove,
)
from pgnreplay.notation.san import classify, strip_annotations
from pgnreplay.notation.tokenizer import is_move_number, move_tokens, tokenize


class TestTokenizer:
    def test_splits_on_spaces_and_newlines(self) -> None:
        assert tokenize("1. e4 e5\n2. Nf3\tNc6  ") == [
            "1.", "e4", "e5", "2.", "Nf3", "Nc6",
        ]

    def test_move_numbers_stay_separate(self) -> None:
        assert tokenize("12. Qxd5") == ["12.", "Qxd5"]

    def test_empty_movetext(self) -> None:
        assert tokenize("") == []
        assert move_tokens(tokenize("   \n")) == []

    def test_is_move_number(self) -> None:
        assert is_move_number("1.")
        assert is_move_number("12...")
        assert not is_move_number("e4")
        assert not is_move_number("1-0")
        assert not is_move_number("1.e4")

    def test_move_tokens_number_plies(self) -> None:
        tokens = move_tokens(tokenize("1. e4 e5 2. Nf3 1-0"))
        assert tokens == [
            MoveToken("e4", 1),
            MoveToken("e5", 2),
            MoveToken("Nf3", 3),
            MoveToken("1-0", 4),
        ]
        assert tokens[0].color == Color.WHITE
        assert tokens[1].color == Color.BLACK
        assert tokens[2].move_number == 2

    def test_black_move_number_marker_dropped(self) -> None:
        tokens = move_tokens(tokenize("5... Nf6 6. d4"))
        assert [t.text for t in tokens] == ["Nf6", "d4"]

    def test_detached_en_passant_mark_dropped(self) -> None:
        tokens = move_tokens(tokenize("5. exd6 e.p. Qxd6"))
        assert [t.text for t in tokens] == ["exd6", "Qxd6"]


class TestStripAnnotations:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("Qh5+", "Qh5"),
            ("Qxf7#", "Qxf7"),
            ("Nf3!?", "Nf3"),
            ("e4!!", "e4"),
            ("exd6e.p.", "exd6"),
            ("exd6e.p.+", "exd6"),
            ("O-O+", "O-O"),
        ],
    )
    def test_strip(self, token: str, expected: str) -> None:
        assert strip_annotations(token) == expected


class TestClassifyPawns:
    def test_push(self) -> None:
        assert classify("e4") == PawnPush(parse_coord("e4"))

    def test_push_promotion(self) -> None:
        assert classify("e8=Q") == PawnPush(parse_coord("e8"), PieceKind.QUEEN)
        assert classify("a1=N+") == PawnPush(parse_coord("a1"), PieceKind.KNIGHT)

    def test_capture(self) -> None:
        assert classify("exd5") == PawnCapture(4, parse_coord("d5"))

    def test_capture_en_passant_suffix(self) -> None:
        assert classify("exd6e.p.") == PawnCapture(4, parse_coord("d6"))

    def test_capture_promotion(self) -> None:
        assert classify("gxh8=R#") == PawnCapture(
            6, parse_coord("h8"), PieceKind.ROOK
        )


class TestClassifyPieces:
    def test_simple(self) -> None:
        assert classify("Nf3") == PieceMove(PieceKind.KNIGHT, parse_coord("f3"))

    def test_capture(self) -> None:
        assert classify("Bxc6") == PieceMove(
            PieceKind.BISHOP, parse_coord("c6"), capture=True
        )

    def test_file_disambiguation(self) -> None:
        move = classify("Rad1")
        assert move == PieceMove(
            PieceKind.ROOK, parse_coord("d1"), disambiguation=Disambiguation(col=0)
        )
        assert str(move.disambiguation) == "a"

    def test_rank_disambiguation(self) -> None:
        move = classify("N5f3")
        assert move == PieceMove(
            PieceKind.KNIGHT, parse_coord("f3"), disambiguation=Disambiguation(row=3)
        )
        assert str(move.disambiguation) == "5"

    def test_square_disambiguation_with_capture(self) -> None:
        move = classify("Qh4xe1")
        assert move == PieceMove(
            PieceKind.QUEEN,
            parse_coord("e1"),
            capture=True,
            disambiguation=Disambiguation(col=7, row=4),
        )

    def test_king(self) -> None:
        assert classify("Kxf7") == PieceMove(
            PieceKind.KING, parse_coord("f7"), capture=True
        )


class TestClassifySpecial:
    def test_castles(self) -> None:
        assert classify("O-O") == CastleKingside()
        assert classify("O-O-O") == CastleQueenside()
        assert classify("O-O-O#") == CastleQueenside()

    @pytest.mark.parametrize(
        ("token", "result"),
        [
            ("1-0", GameResult.WHITE_WINS),
            ("0-1", GameResult.BLACK_WINS),
            ("1/2-1/2", GameResult.DRAW),
            ("*", GameResult.UNFINISHED),
        ],
    )
    def test_results(self, token: str, result: GameResult) -> None:
        assert classify(token) == GameTermination(result)

    def test_deterministic(self) -> None:
        assert classify("Nbd7") == classify("Nbd7")


class TestClassifyMalformed:
    @pytest.mark.parametrize(
        "token",
        [
            "",
            "Zf3",
            "e9",
            "xd5",
            "ed5",
            "e4d5",
            "Nf3=Q",
            "e5=Q",
            "e8=K",
            "g8",
            "e1",
            "exd8",
            "bxa1+",
            "0-0",
            "O-O-O-O",
            "1.e4",
            "Nf",
            "e.p.",
        ],
    )
    def test_rejected(self, token: str) -> None:
        with pytest.raises(MalformedMoveToken, match="Malformed move token"):
            classify(token)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            classify("???")
