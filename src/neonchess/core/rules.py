"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from neonchess.core.enums import Color, GameStatus
from neonchess.core.move_generator import MoveGenerator
from neonchess.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position` and a mover."""

    @staticmethod
    def is_in_check(position: Position, turn: Color) -> bool:
        return MoveGenerator(position).is_in_check(turn)

    @staticmethod
    def is_checkmate(position: Position, turn: Color) -> bool:
        gen = MoveGenerator(position)
        if not gen.is_in_check(turn):
            return False
        return len(gen.generate_legal_moves(turn)) == 0

    @staticmethod
    def is_stalemate(position: Position, turn: Color) -> bool:
        gen = MoveGenerator(position)
        if gen.is_in_check(turn):
            return False
        return len(gen.generate_legal_moves(turn)) == 0

    @staticmethod
    def game_status(position: Position, turn: Color) -> GameStatus:
        """Status of *turn* in *position*."""
        gen = MoveGenerator(position)
        checked = gen.is_in_check(turn)

        if not gen.generate_legal_moves(turn):
            return GameStatus.CHECKMATE if checked else GameStatus.STALEMATE
        if checked:
            return GameStatus.CHECK
        return GameStatus.IN_PROGRESS
