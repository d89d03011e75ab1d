"""Tests for move notation, make_move and placement text."""

import pytest

from neonchess.core.enums import Color, PieceType
from neonchess.core.move import Move
from neonchess.core.move_generator import MoveGenerator, generate_legal_moves
from neonchess.core.notation import (
    STARTING_PLACEMENT,
    make_move,
    move_to_notation,
    position_from_placement,
    position_to_placement,
)
from neonchess.core.piece import Piece
from neonchess.core.position import Position, create_initial_position
from neonchess.core.types import parse_square

sq = parse_square


def _legal(pos: Position, turn: Color, origin: str, target: str) -> Move:
    for move in MoveGenerator(pos).legal_moves_from(sq(origin), turn):
        if move.to_sq == sq(target):
            return move
    raise AssertionError(f"{origin}{target} is not legal")


class TestMoveNotation:
    def test_pawn_push_has_no_letter(self) -> None:
        pos = create_initial_position()
        result = make_move(pos, _legal(pos, Color.WHITE, "e2", "e4"))
        assert result.notation == "e2-e4"

    def test_knight_quiet_move(self) -> None:
        pos = create_initial_position()
        result = make_move(pos, _legal(pos, Color.WHITE, "g1", "f3"))
        assert result.notation == "Ng1-f3"
        assert "x" not in result.notation

    def test_knight_capture(self) -> None:
        pos = position_from_placement("4k3/3p4/8/4N3/8/8/8/4K3")
        result = make_move(pos, _legal(pos, Color.WHITE, "e5", "d7"))
        assert result.notation == "Ne5xd7"

    def test_black_piece_letter_is_uppercase(self) -> None:
        pos = create_initial_position()
        result = make_move(pos, _legal(pos, Color.BLACK, "b8", "c6"))
        assert result.notation == "Nb8-c6"

    def test_white_promotion(self) -> None:
        pos = position_from_placement("1r2k3/P7/8/8/8/8/8/4K3")
        result = make_move(pos, _legal(pos, Color.WHITE, "a7", "a8"))
        assert result.notation == "a7-a8=Q"
        assert result.position[sq("a8")] == Piece(Color.WHITE, PieceType.QUEEN)
        assert result.position[sq("a7")] is None

    def test_white_capture_promotion(self) -> None:
        pos = position_from_placement("1r2k3/P7/8/8/8/8/8/4K3")
        result = make_move(pos, _legal(pos, Color.WHITE, "a7", "b8"))
        assert result.notation == "a7xb8=Q"
        assert result.position[sq("b8")] == Piece(Color.WHITE, PieceType.QUEEN)

    def test_black_promotion(self) -> None:
        pos = position_from_placement("4k3/8/8/8/8/8/6p1/K7")
        result = make_move(pos, _legal(pos, Color.BLACK, "g2", "g1"))
        assert result.notation == "g2-g1=Q"
        assert result.position[sq("g1")] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_capture_mark_follows_move_field(self) -> None:
        # A hand-built move without ``captured`` renders as a quiet move.
        pos = position_from_placement("4k3/3p4/8/4N3/8/8/8/4K3")
        move = Move(sq("e5"), sq("d7"))
        assert move_to_notation(pos, move) == "Ne5-d7"

    def test_empty_origin_falls_back_to_squares(self) -> None:
        pos = create_initial_position()
        assert move_to_notation(pos, Move(sq("e4"), sq("e5"))) == "e4-e5"

    def test_make_move_leaves_input_untouched(self) -> None:
        pos = create_initial_position()
        make_move(pos, _legal(pos, Color.WHITE, "d2", "d4"))
        assert pos == create_initial_position()

    def test_every_opening_move_has_notation(self) -> None:
        pos = create_initial_position()
        notations = {
            make_move(pos, m).notation
            for m in generate_legal_moves(pos, Color.WHITE)
        }
        assert len(notations) == 20
        assert {"Nb1-a3", "Nb1-c3", "Ng1-f3", "Ng1-h3", "a2-a3", "h2-h4"} <= notations


class TestMoveStr:
    def test_uci_style(self) -> None:
        assert str(Move(sq("e2"), sq("e4"))) == "e2e4"
        assert str(Move(sq("a7"), sq("a8"), PieceType.QUEEN)) == "a7a8q"

    def test_equality_ignores_captured(self) -> None:
        captured = Piece(Color.BLACK, PieceType.PAWN)
        plain = Move(sq("e4"), sq("d5"))
        tagged = Move(sq("e4"), sq("d5"), captured=captured)
        assert plain == tagged
        assert hash(plain) == hash(tagged)
        assert plain != Move(sq("e4"), sq("d5"), PieceType.QUEEN)


class TestPlacement:
    def test_starting_round_trip(self) -> None:
        pos = position_from_placement(STARTING_PLACEMENT)
        assert pos == create_initial_position()
        assert position_to_placement(create_initial_position()) == STARTING_PLACEMENT

    def test_sparse_round_trip(self) -> None:
        text = "4k3/8/8/3p1N2/4P3/8/8/4K3"
        assert position_to_placement(position_from_placement(text)) == text

    def test_empty_board(self) -> None:
        assert position_to_placement(Position()) == "8/8/8/8/8/8/8/8"

    @pytest.mark.parametrize(
        "text",
        [
            "8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "ppppppppp/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "x7/8/8/8/8/8/8/8",
            "08/8/8/8/8/8/8/8",
        ],
    )
    def test_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            position_from_placement(text)


class TestPieceText:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"
