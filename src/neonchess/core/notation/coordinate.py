"""Long coordinate notation, e.g. ``Ng1-f3``, ``e4xd5``, ``e7-e8=Q``."""

from __future__ import annotations

from neonchess.core.move import Move
from neonchess.core.notation.models import MoveResult
from neonchess.core.position import Position
from neonchess.core.types import square_to_algebraic


def move_to_notation(position: Position, move: Move) -> str:
    """Render *move* given the *position* before the move.

    The capture mark and promotion suffix come from the move itself, not
    from the board, so a hand-built move without ``captured`` renders as a
    quiet move.
    """
    origin = square_to_algebraic(move.from_sq)
    target = square_to_algebraic(move.to_sq)
    piece = position[move.from_sq]
    if piece is None:
        return f"{origin}-{target}"

    capture_mark = "x" if move.captured is not None else "-"
    promo = f"={move.promotion.letter}" if move.promotion is not None else ""
    return f"{piece.piece_type.letter}{origin}{capture_mark}{target}{promo}"


def make_move(position: Position, move: Move) -> MoveResult:
    """Apply *move* and return the new position with the move's notation.

    Assumes the move is legal; obtain it from ``generate_legal_moves``.
    """
    return MoveResult(
        position=position.apply_move(move),
        notation=move_to_notation(position, move),
    )
