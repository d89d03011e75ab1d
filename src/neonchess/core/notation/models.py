"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from neonchess.core.position import Position


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of :func:`make_move`: the new position and the move's notation."""

    position: Position
    notation: str
