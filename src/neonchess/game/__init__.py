"""Game management layer: controller and selection state machine.

Quick start::

    from neonchess.core import parse_square
    from neonchess.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.handle_square_click(parse_square("e2"))
    ctrl.handle_square_click(parse_square("e4"))
"""

from neonchess.game.controller import GameController, GameEvents
from neonchess.game.state import GamePhase, GameState, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveRecord",
]
