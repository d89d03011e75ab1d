"""ControlPanel: turn indicator, game status and the restart button."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from neonchess.core.enums import Color, GameStatus

_STATUS_TEXT: dict[GameStatus, str] = {
    GameStatus.IN_PROGRESS: "",
    GameStatus.CHECK: "Check!",
    GameStatus.CHECKMATE: "Checkmate",
    GameStatus.STALEMATE: "Stalemate",
}


def status_message(status: GameStatus, turn: Color) -> str:
    """Human-readable status line for *turn* in *status*."""
    if status == GameStatus.CHECKMATE:
        return f"Checkmate: {turn.opposite.name.capitalize()} wins"
    if status == GameStatus.STALEMATE:
        return "Stalemate: draw"
    return _STATUS_TEXT[status]


class ControlPanel(QWidget):
    """Shows whose turn it is and the check status; offers a restart."""

    restart_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.set_status(Color.WHITE, GameStatus.IN_PROGRESS)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Helvetica Neue", 13, QFont.Weight.Bold))
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusLabel")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status_label)

        self._btn_restart = QPushButton("Restart")
        self._btn_restart.setMinimumHeight(36)
        self._btn_restart.clicked.connect(self.restart_clicked)
        layout.addWidget(self._btn_restart)

    def set_status(self, turn: Color, status: GameStatus) -> None:
        if status.is_terminal:
            self._turn_label.setText("Game over")
        else:
            self._turn_label.setText(f"{turn.name.capitalize()} to move")

        self._status_label.setText(status_message(status, turn))
        self._status_label.setProperty("alert", status != GameStatus.IN_PROGRESS)
        style = self._status_label.style()
        if style is not None:
            style.unpolish(self._status_label)
            style.polish(self._status_label)

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def status_text(self) -> str:
        return self._status_label.text()
