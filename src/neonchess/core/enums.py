"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

_PIECE_LETTERS: dict[int, str] = {
    1: "",
    2: "N",
    3: "B",
    4: "R",
    5: "Q",
    6: "K",
}


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def code(self) -> str:
        """One-letter code: ``w`` or ``b``."""
        return "w" if self is Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Notation prefix; empty for pawns."""
        return _PIECE_LETTERS[self.value]


class GameStatus(IntEnum):
    """Status of the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.CHECKMATE, GameStatus.STALEMATE)


# Promotion always resolves to this piece type.
PROMOTION_TYPE = PieceType.QUEEN
