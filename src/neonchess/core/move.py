"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from neonchess.core.enums import PieceType
from neonchess.core.piece import Piece
from neonchess.core.types import Square, square_to_algebraic


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    ``captured`` is informational only: the generator fills it in from the
    target square, but it takes no part in equality and is never re-checked
    when the move is applied.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    captured: Piece | None = field(default=None, compare=False)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        base = f"{square_to_algebraic(self.from_sq)}{square_to_algebraic(self.to_sq)}"
        if self.promotion is not None:
            base += self.promotion.letter.lower()
        return base
