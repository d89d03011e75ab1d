"""Game state machine: selection, move history and status tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from neonchess.core.enums import Color, GameStatus
from neonchess.core.move import Move
from neonchess.core.move_generator import MoveGenerator
from neonchess.core.notation import make_move
from neonchess.core.position import Position
from neonchess.core.types import Square


class GamePhase(IntEnum):
    """Finite-state-machine states for an interactive game."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    color: Color
    status_after: GameStatus = GameStatus.IN_PROGRESS


@dataclass
class GameState:
    """Holds the current position, side to move, selection and history.

    This is a pure data/logic class: no threading, no UI.  The legal move
    list is recomputed after every change to the position or the side to
    move; it is never mutated in place.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    turn: Color = field(default=Color.WHITE, init=False)
    selected: Square | None = field(default=None, init=False)
    selected_moves: list[Move] = field(default_factory=list, init=False)
    history: list[MoveRecord] = field(default_factory=list, init=False)
    status: GameStatus = field(default=GameStatus.IN_PROGRESS, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_SELECTION, init=False)
    legal_moves: list[Move] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self._refresh()

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, position: Position | None = None, turn: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.position = position if position is not None else Position.initial()
        self.turn = turn
        self.history.clear()
        self.selected = None
        self.selected_moves = []
        self._refresh()

    # ── Selection ────────────────────────────────────────────────────────

    def can_select(self, sq: Square) -> bool:
        """Whether *sq* holds a piece of the side to move."""
        piece = self.position[sq]
        return piece is not None and piece.color == self.turn

    def select(self, sq: Square) -> bool:
        """Select the piece on *sq*; returns False if it is not selectable."""
        if self.is_game_over or not self.can_select(sq):
            return False
        self.selected = sq
        self.selected_moves = [m for m in self.legal_moves if m.from_sq == sq]
        self.phase = GamePhase.PIECE_SELECTED
        return True

    def clear_selection(self) -> None:
        self.selected = None
        self.selected_moves = []
        if not self.is_game_over:
            self.phase = GamePhase.AWAITING_SELECTION

    def move_for(self, sq: Square) -> Move | None:
        """The selected piece's legal move onto *sq*, if any."""
        for move in self.selected_moves:
            if move.to_sq == sq:
                return move
        return None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for the legality check.
        """
        mover = self.turn
        result = make_move(self.position, move)
        self.position = result.position
        self.turn = mover.opposite
        self.selected = None
        self.selected_moves = []
        self._refresh()

        record = MoveRecord(
            move=move,
            notation=result.notation,
            color=mover,
            status_after=self.status,
        )
        self.history.append(record)
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def in_check(self) -> bool:
        return self.status in (GameStatus.CHECK, GameStatus.CHECKMATE)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def move_history(self) -> list[str]:
        """Notation strings of all moves played so far."""
        return [record.notation for record in self.history]

    def is_legal_destination(self, sq: Square) -> bool:
        return self.move_for(sq) is not None

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        gen = MoveGenerator(self.position)
        self.legal_moves = gen.generate_legal_moves(self.turn)
        checked = gen.is_in_check(self.turn)
        if not self.legal_moves:
            self.status = GameStatus.CHECKMATE if checked else GameStatus.STALEMATE
        elif checked:
            self.status = GameStatus.CHECK
        else:
            self.status = GameStatus.IN_PROGRESS

        if self.status.is_terminal:
            self.selected = None
            self.selected_moves = []
            self.phase = GamePhase.GAME_OVER
        elif self.selected is None:
            self.phase = GamePhase.AWAITING_SELECTION
