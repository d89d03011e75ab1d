"""Tests for Position construction and move application."""

from neonchess.core.enums import Color, PieceType
from neonchess.core.move import Move
from neonchess.core.piece import Piece, get_piece_color
from neonchess.core.position import Position, create_initial_position
from neonchess.core.types import Square, parse_square

WK = Piece(Color.WHITE, PieceType.KING)
WP = Piece(Color.WHITE, PieceType.PAWN)
BK = Piece(Color.BLACK, PieceType.KING)
BP = Piece(Color.BLACK, PieceType.PAWN)


class TestInitialPosition:
    def test_back_ranks(self) -> None:
        pos = create_initial_position()
        assert pos[parse_square("e1")] == WK
        assert pos[parse_square("d1")] == Piece(Color.WHITE, PieceType.QUEEN)
        assert pos[parse_square("e8")] == BK
        assert pos[parse_square("a8")] == Piece(Color.BLACK, PieceType.ROOK)
        assert pos[parse_square("g8")] == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_pawn_rows(self) -> None:
        pos = create_initial_position()
        for col in range(8):
            assert pos.piece_at(1, col) == BP
            assert pos.piece_at(6, col) == WP

    def test_middle_is_empty(self) -> None:
        pos = create_initial_position()
        for row in range(2, 6):
            for col in range(8):
                assert pos.is_empty(row, col)

    def test_fresh_instances_are_equal(self) -> None:
        assert create_initial_position() == create_initial_position()
        assert hash(create_initial_position()) == hash(Position.initial())


class TestQueries:
    def test_king_square(self) -> None:
        pos = create_initial_position()
        assert pos.king_square(Color.WHITE) == parse_square("e1")
        assert pos.king_square(Color.BLACK) == parse_square("e8")

    def test_missing_king(self) -> None:
        pos = Position.from_pieces({parse_square("a1"): WP})
        assert pos.king_square(Color.WHITE) is None

    def test_pieces_by_color(self) -> None:
        pos = create_initial_position()
        assert len(pos.pieces(Color.WHITE)) == 16
        assert len(pos.pieces(Color.BLACK)) == 16

    def test_get_piece_color(self) -> None:
        assert get_piece_color(WK) == Color.WHITE
        assert get_piece_color(BP) == Color.BLACK
        assert get_piece_color(None) is None


class TestApplyMove:
    def test_moves_piece_and_clears_origin(self) -> None:
        pos = create_initial_position()
        after = pos.apply_move(Move(parse_square("e2"), parse_square("e4")))
        assert after[parse_square("e2")] is None
        assert after[parse_square("e4")] == WP

    def test_original_is_unchanged(self) -> None:
        pos = create_initial_position()
        pos.apply_move(Move(parse_square("e2"), parse_square("e4")))
        assert pos == create_initial_position()

    def test_capture_replaces_target(self) -> None:
        pos = Position.from_pieces(
            {parse_square("e4"): WP, parse_square("d5"): BP}
        )
        after = pos.apply_move(
            Move(parse_square("e4"), parse_square("d5"), captured=BP)
        )
        assert after[parse_square("d5")] == WP
        assert len(after.pieces(Color.BLACK)) == 0

    def test_promotion_keeps_color(self) -> None:
        pos = Position.from_pieces({parse_square("c2"): BP})
        after = pos.apply_move(
            Move(parse_square("c2"), parse_square("c1"), PieceType.QUEEN)
        )
        assert after[parse_square("c1")] == Piece(Color.BLACK, PieceType.QUEEN)

    def test_promotion_marker_ignored_for_non_pawn(self) -> None:
        rook = Piece(Color.WHITE, PieceType.ROOK)
        pos = Position.from_pieces({parse_square("a7"): rook})
        after = pos.apply_move(
            Move(parse_square("a7"), parse_square("a8"), PieceType.QUEEN)
        )
        assert after[parse_square("a8")] == rook


def test_repr_shows_ranks() -> None:
    text = repr(create_initial_position())
    lines = text.splitlines()
    assert lines[0] == "8 r n b q k b n r"
    assert lines[-2] == "1 R N B Q K B N R"
    assert lines[-1] == "  a b c d e f g h"


def test_square_is_indexable_as_tuple() -> None:
    pos = Position.from_pieces({Square(3, 3): WK})
    assert pos[(3, 3)] == WK
