"""Notation package: move notation and piece-placement text."""

from neonchess.core.notation.coordinate import make_move, move_to_notation
from neonchess.core.notation.models import MoveResult
from neonchess.core.notation.placement import (
    STARTING_PLACEMENT,
    position_from_placement,
    position_to_placement,
)

__all__ = [
    "MoveResult",
    "STARTING_PLACEMENT",
    "make_move",
    "move_to_notation",
    "position_from_placement",
    "position_to_placement",
]
