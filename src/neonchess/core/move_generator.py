"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable

from neonchess.core.enums import PROMOTION_TYPE, Color, PieceType
from neonchess.core.move import Move
from neonchess.core.piece import Piece
from neonchess.core.position import Position
from neonchess.core.types import Square, inside

# (row delta, col delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White pawns advance toward row 0, black pawns toward row 7.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
_PROMOTION_ROWS: tuple[int, int] = (0, 7)


class MoveGenerator:
    """Generates moves for a given :class:`Position`.

    The generator only reads the position; legality checks apply candidate
    moves to copies and never touch the original.
    """

    __slots__ = ("_pos", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._dispatch: dict[PieceType, Callable[[Square, Color], list[Move]]] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: lambda sq, color: self._gen_sliding(
                sq, color, BISHOP_DIRS
            ),
            PieceType.ROOK: lambda sq, color: self._gen_sliding(sq, color, ROOK_DIRS),
            PieceType.QUEEN: lambda sq, color: self._gen_sliding(
                sq, color, QUEEN_DIRS
            ),
            PieceType.KING: self._gen_king,
        }

    @property
    def position(self) -> Position:
        return self._pos

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, turn: Color) -> list[Move]:
        """All strictly legal moves for *turn*."""
        legal: list[Move] = []
        append_legal = legal.append
        for move in self.generate_pseudo_legal_moves(turn):
            if not self._leaves_king_in_check(move, turn):
                append_legal(move)
        return legal

    def legal_moves_from(self, sq: Square, turn: Color) -> list[Move]:
        """Legal moves for *turn* whose origin is *sq*."""
        piece = self._pos[sq]
        if piece is None or piece.color != turn:
            return []
        return [
            move
            for move in self.pseudo_legal_moves_for_square(sq)
            if not self._leaves_king_in_check(move, turn)
        ]

    def generate_pseudo_legal_moves(self, color: Color) -> list[Move]:
        """All pseudo-legal moves for *color* (may leave own king in check)."""
        moves: list[Move] = []
        for sq in self._pos.pieces(color):
            moves.extend(self.pseudo_legal_moves_for_square(sq))
        return moves

    def pseudo_legal_moves_for_square(self, sq: Square) -> list[Move]:
        """Candidate moves of the piece on *sq*; empty if the square is empty."""
        piece = self._pos[sq]
        if piece is None:
            return []
        generate = self._dispatch.get(piece.piece_type)
        if generate is None:
            return []
        return generate(sq, piece.color)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?

        A side without a king is never in check.
        """
        king_sq = self._pos.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        for from_sq, piece in self._pos.occupied():
            if piece.color != by_color:
                continue

            # Pawns capture diagonally whether or not the target is occupied.
            if piece.piece_type == PieceType.PAWN:
                if sq.row == from_sq.row + _PAWN_DIRECTION[by_color] and abs(
                    sq.col - from_sq.col
                ) == 1:
                    return True
                continue

            for move in self.pseudo_legal_moves_for_square(from_sq):
                if move.to_sq == sq:
                    return True
        return False

    # -- Internal helpers --------------------------------------------------

    def _leaves_king_in_check(self, move: Move, mover: Color) -> bool:
        after = MoveGenerator(self._pos.apply_move(move))
        return after.is_in_check(mover)

    def _target(self, row: int, col: int) -> Piece | None:
        return self._pos.piece_at(row, col)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color) -> list[Move]:
        moves: list[Move] = []
        direction = _PAWN_DIRECTION[color]
        one_row = sq.row + direction
        promotion = PROMOTION_TYPE if one_row in _PROMOTION_ROWS else None

        if inside(one_row, sq.col) and self._pos.is_empty(one_row, sq.col):
            moves.append(Move(sq, Square(one_row, sq.col), promotion))

            two_row = sq.row + 2 * direction
            if (
                sq.row == _PAWN_START_ROW[color]
                and inside(two_row, sq.col)
                and self._pos.is_empty(two_row, sq.col)
            ):
                moves.append(Move(sq, Square(two_row, sq.col)))

        for dc in (-1, 1):
            cap_col = sq.col + dc
            if not inside(one_row, cap_col):
                continue
            target = self._target(one_row, cap_col)
            if target is not None and target.color != color:
                moves.append(
                    Move(sq, Square(one_row, cap_col), promotion, captured=target)
                )
        return moves

    def _gen_knight(self, sq: Square, color: Color) -> list[Move]:
        return self._gen_steps(sq, color, KNIGHT_OFFSETS)

    def _gen_king(self, sq: Square, color: Color) -> list[Move]:
        return self._gen_steps(sq, color, KING_OFFSETS)

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Move]:
        moves: list[Move] = []
        for dr, dc in offsets:
            row, col = sq.row + dr, sq.col + dc
            if not inside(row, col):
                continue
            target = self._target(row, col)
            if target is None:
                moves.append(Move(sq, Square(row, col)))
            elif target.color != color:
                moves.append(Move(sq, Square(row, col), captured=target))
        return moves

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Move]:
        moves: list[Move] = []
        for dr, dc in directions:
            row, col = sq.row + dr, sq.col + dc
            while inside(row, col):
                target = self._target(row, col)
                if target is None:
                    moves.append(Move(sq, Square(row, col)))
                else:
                    if target.color != color:
                        moves.append(Move(sq, Square(row, col), captured=target))
                    break
                row += dr
                col += dc
        return moves


# -- Functional facade ------------------------------------------------------


def generate_legal_moves(position: Position, turn: Color) -> list[Move]:
    """All legal moves for *turn* in *position*."""
    return MoveGenerator(position).generate_legal_moves(turn)


def is_square_attacked(position: Position, sq: Square, by_color: Color) -> bool:
    """Whether *sq* is attacked by *by_color* in *position*."""
    return MoveGenerator(position).is_square_attacked(sq, by_color)


def in_check(position: Position, color: Color) -> bool:
    """Whether *color*'s king is attacked in *position*."""
    return MoveGenerator(position).is_in_check(color)


def apply_move(position: Position, move: Move) -> Position:
    """Position after *move*; see :meth:`Position.apply_move`."""
    return position.apply_move(move)
