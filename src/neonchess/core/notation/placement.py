"""Piece-placement text (the board field of FEN) parsing and serialization."""

from __future__ import annotations

from neonchess.core.piece import Piece
from neonchess.core.position import Position
from neonchess.core.types import BOARD_SIZE

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def position_from_placement(placement: str) -> Position:
    """Parse a placement string (rank 8 first) into a :class:`Position`."""
    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    rows: list[tuple[Piece | None, ...]] = []
    for rank_text in ranks:
        row: list[Piece | None] = []
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                row.extend([None] * step)
            else:
                row.append(Piece.from_char(ch))
            if len(row) > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
        rows.append(tuple(row))
    return Position(tuple(rows))


def position_to_placement(position: Position) -> str:
    """Serialize *position* to a placement string."""
    ranks: list[str] = []
    for row in position.grid:
        text = ""
        empty = 0
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
