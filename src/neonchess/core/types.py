"""Square type and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (a8 ... h8)
    row 7 = rank 1 (a1 ... h1)

Columns 0-7 map to files a-h.
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"
BOARD_SIZE = 8


class Square(NamedTuple):
    """Immutable (row, col) board coordinate."""

    row: int
    col: int

    def __str__(self) -> str:
        return square_to_algebraic(self)


def inside(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_to_algebraic(square: Square) -> str:
    """Human-readable name, e.g. ``Square(6, 4)`` -> ``'e2'``."""
    row, col = square
    if not inside(row, col):
        raise ValueError(f"Square out of bounds: {tuple(square)!r}")
    return f"{FILES[col]}{BOARD_SIZE - row}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` -> ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
)
