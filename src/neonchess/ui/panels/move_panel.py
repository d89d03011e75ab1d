"""MovePanel: scrollable list of played moves."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from neonchess.core.enums import Color

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


def figurine_notation(notation: str, color: Color) -> str:
    """Replace piece letters in *notation* with figurines for *color*."""
    table = _FIGURINE[color]

    # Leading piece letter (Ng1-f3, Qd1xd7 ...)
    if notation and notation[0] in table:
        notation = table[notation[0]] + notation[1:]

    # Promotion target (e7-e8=Q -> e7-e8=♕)
    if "=" in notation:
        prefix, _, promo = notation.partition("=")
        notation = prefix + "=" + table.get(promo[:1], promo[:1]) + promo[1:]

    return notation


class MovePanel(QWidget):
    """Displays the game's move history, one row per full move."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._moves: list[str] = []
        self._use_figurines = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def set_use_figurines(self, enabled: bool) -> None:
        if self._use_figurines == enabled:
            return
        self._use_figurines = enabled
        self._rebuild_list()

    def set_history(self, moves: list[str]) -> None:
        """Rebuild the list from notation strings (white's move first)."""
        self._moves = list(moves)
        self._rebuild_list()

    def add_move(self, notation: str) -> None:
        self._moves.append(notation)
        self._rebuild_list()

    def clear(self) -> None:
        self._moves.clear()
        self._list.clear()

    def row_texts(self) -> list[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]

    def _format(self, notation: str, color: Color) -> str:
        if self._use_figurines:
            return figurine_notation(notation, color)
        return notation

    def _rebuild_list(self) -> None:
        self._list.clear()
        for idx in range(0, len(self._moves), 2):
            text = f"{idx // 2 + 1}. {self._format(self._moves[idx], Color.WHITE)}"
            if idx + 1 < len(self._moves):
                text += f"  {self._format(self._moves[idx + 1], Color.BLACK)}"
            self._list.addItem(text)
        self._list.scrollToBottom()
