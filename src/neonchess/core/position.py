"""Position: immutable 8x8 piece placement."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from neonchess.core.enums import Color, PieceType
from neonchess.core.piece import Piece
from neonchess.core.types import ALL_SQUARES, BOARD_SIZE, Square

if TYPE_CHECKING:
    from neonchess.core.move import Move

Grid = tuple[tuple[Piece | None, ...], ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_EMPTY_ROW: tuple[Piece | None, ...] = (None,) * BOARD_SIZE


class Position:
    """Piece placement on the board.

    A position carries no side to move, castling rights or history: callers
    pass the mover's color alongside it.  Instances never change after
    construction; :meth:`apply_move` returns a fresh position.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = (_EMPTY_ROW,) * BOARD_SIZE
        if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
            raise ValueError("Position grid must be 8x8")
        self._grid: Grid = tuple(tuple(row) for row in grid)

    # ── Factories ────────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, black on rows 0-1, white on rows 6-7."""
        rows: list[tuple[Piece | None, ...]] = [_EMPTY_ROW] * BOARD_SIZE
        rows[0] = tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK)
        rows[1] = (Piece(Color.BLACK, PieceType.PAWN),) * BOARD_SIZE
        rows[6] = (Piece(Color.WHITE, PieceType.PAWN),) * BOARD_SIZE
        rows[7] = tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK)
        return cls(tuple(rows))

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Position:
        """Build a position from a ``{square: piece}`` mapping."""
        rows = [list(_EMPTY_ROW) for _ in range(BOARD_SIZE)]
        for (row, col), piece in pieces.items():
            rows[row][col] = piece
        return cls(tuple(tuple(row) for row in rows))

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._grid[row][col]

    def piece_at(self, row: int, col: int) -> Piece | None:
        return self._grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self._grid[row][col] is None

    @property
    def grid(self) -> Grid:
        return self._grid

    # ── Query helpers ────────────────────────────────────────────────────

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, row-major."""
        for sq in ALL_SQUARES:
            piece = self._grid[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, row-major."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.occupied():
            if piece.color == color and piece.piece_type == PieceType.KING:
                return sq
        return None

    # ── Mutation (returns a new position) ────────────────────────────────

    def apply_move(self, move: Move) -> Position:
        """Return the position after *move*.

        The origin is cleared and the moving piece lands on the destination,
        replacing whatever stood there.  A pawn move carrying a promotion
        marker places the promotion piece type in the pawn's color.  No
        legality check is performed.
        """
        rows = [list(row) for row in self._grid]
        piece = rows[move.from_sq.row][move.from_sq.col]
        rows[move.from_sq.row][move.from_sq.col] = None

        placed = piece
        if (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and move.promotion is not None
        ):
            placed = Piece(piece.color, move.promotion)
        rows[move.to_sq.row][move.to_sq.col] = placed
        return Position(tuple(tuple(row) for row in rows))

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else "." for p in row)
            rows.append(f"{BOARD_SIZE - r} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def create_initial_position() -> Position:
    """Return a new standard starting position."""
    return Position.initial()
