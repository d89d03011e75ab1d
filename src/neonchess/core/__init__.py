"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from neonchess.core import Color, create_initial_position, generate_legal_moves

    pos = create_initial_position()
    for move in generate_legal_moves(pos, Color.WHITE):
        print(move)
"""

from neonchess.core.enums import PROMOTION_TYPE, Color, GameStatus, PieceType
from neonchess.core.move import Move
from neonchess.core.move_generator import (
    MoveGenerator,
    apply_move,
    generate_legal_moves,
    in_check,
    is_square_attacked,
)
from neonchess.core.notation import (
    STARTING_PLACEMENT,
    MoveResult,
    make_move,
    move_to_notation,
    position_from_placement,
    position_to_placement,
)
from neonchess.core.piece import Piece, get_piece_color
from neonchess.core.position import Position, create_initial_position
from neonchess.core.rules import Rules
from neonchess.core.types import (
    ALL_SQUARES,
    Square,
    inside,
    parse_square,
    square_to_algebraic,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    "PROMOTION_TYPE",
    # Types / helpers
    "ALL_SQUARES",
    "Square",
    "inside",
    "parse_square",
    "square_to_algebraic",
    # Domain objects
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "Rules",
    # Engine functions
    "apply_move",
    "create_initial_position",
    "generate_legal_moves",
    "get_piece_color",
    "in_check",
    "is_square_attacked",
    "make_move",
    # Notation
    "MoveResult",
    "STARTING_PLACEMENT",
    "move_to_notation",
    "position_from_placement",
    "position_to_placement",
]
