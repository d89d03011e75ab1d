"""GameController: drives a click-to-move game.

Coordinates: GameState and the rules engine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from neonchess.core.enums import Color, GameStatus
from neonchess.core.move import Move
from neonchess.core.position import Position
from neonchess.core.types import Square, square_to_algebraic
from neonchess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, GameState], None]  # move, notation, state
SelectionCallback = Callable[[GameState], None]
GameOverCallback = Callable[[GameStatus], None]
NewGameCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a two-player game on one board: validates moves,
    switches turns, keeps the history and notifies listeners.

    Methods are meant to be called from a single thread (the UI thread).
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        position: Position | None = None,
        turn: Color = Color.WHITE,
    ) -> None:
        """Restart from *position* (the initial position by default)."""
        self._state.setup(position, turn)
        _LOGGER.info("New game started, %s to move", turn)
        self._emit_new_game()
        if self._state.is_game_over:
            self._emit_game_over(self._state.status)

    # ── Interaction ──────────────────────────────────────────────────────

    def handle_square_click(self, sq: Square) -> bool:
        """React to a click on *sq*.  Returns True if a move was made."""
        state = self._state
        if state.is_game_over:
            return False

        if state.selected is not None:
            move = state.move_for(sq)
            if move is not None:
                return self.submit_move(move)

            if state.can_select(sq):
                self._select(sq)
                return False

            state.clear_selection()
            self._emit_selection_changed()
            return False

        if state.can_select(sq):
            self._select(sq)
        return False

    def submit_move(self, move: Move) -> bool:
        """Apply *move* if it is legal for the side to move."""
        state = self._state
        if state.is_game_over:
            return False

        legal = next((m for m in state.legal_moves if m == move), None)
        if legal is None:
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        # The generator's copy carries the authoritative capture information.
        record = state.apply_move(legal)
        _LOGGER.debug("%s played %s", record.color, record.notation)
        self._emit_move(legal, record.notation)

        if state.is_game_over:
            _LOGGER.info("Game over: %s", state.status.name.lower())
            self._emit_game_over(state.status)
        return True

    def clear_selection(self) -> None:
        self._state.clear_selection()
        self._emit_selection_changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, sq: Square) -> None:
        self._state.select(sq)
        _LOGGER.debug(
            "Selected %s (%d legal moves)",
            square_to_algebraic(sq),
            len(self._state.selected_moves),
        )
        self._emit_selection_changed()

    def _emit_move(self, move: Move, notation: str) -> None:
        for cb in self.events.on_move:
            cb(move, notation, self._state)

    def _emit_selection_changed(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state)

    def _emit_game_over(self, status: GameStatus) -> None:
        for cb in self.events.on_game_over:
            cb(status)

    def _emit_new_game(self) -> None:
        for cb in self.events.on_new_game:
            cb(self._state)
