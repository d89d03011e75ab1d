"""Tests for the turn indicator and status line."""

from __future__ import annotations

from neonchess.core.enums import Color, GameStatus
from neonchess.ui.panels.control_panel import ControlPanel, status_message


def test_status_message() -> None:
    assert status_message(GameStatus.IN_PROGRESS, Color.WHITE) == ""
    assert status_message(GameStatus.CHECK, Color.BLACK) == "Check!"
    assert status_message(GameStatus.CHECKMATE, Color.BLACK) == "Checkmate: White wins"
    assert status_message(GameStatus.STALEMATE, Color.WHITE) == "Stalemate: draw"


def test_set_status_updates_labels() -> None:
    panel = ControlPanel()
    assert panel.turn_text == "White to move"
    assert panel.status_text == ""

    panel.set_status(Color.BLACK, GameStatus.CHECK)
    assert panel.turn_text == "Black to move"
    assert panel.status_text == "Check!"

    panel.set_status(Color.WHITE, GameStatus.CHECKMATE)
    assert panel.turn_text == "Game over"
    assert panel.status_text == "Checkmate: Black wins"


def test_restart_button_emits_signal() -> None:
    panel = ControlPanel()
    fired: list[bool] = []
    panel.restart_clicked.connect(lambda: fired.append(True))

    panel._btn_restart.click()
    assert fired == [True]
