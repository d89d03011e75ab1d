"""Visual theme constants and QSS styles for Neon Chess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    move_hint: QColor  # dot on empty legal destinations
    capture_hint: QColor  # ring on occupied legal destinations
    highlight_check: QColor  # king in check
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def neon_violet(cls) -> BoardTheme:
        return cls(
            light_square=QColor(221, 208, 255),
            dark_square=QColor(107, 70, 193),
            highlight_selected=QColor(255, 230, 0, 110),
            move_hint=QColor(20, 10, 40, 70),
            capture_hint=QColor(255, 64, 160, 200),
            highlight_check=QColor(255, 0, 80, 140),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(18, 10, 32),
            coord_light=QColor(107, 70, 193),
            coord_dark=QColor(221, 208, 255),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),
            move_hint=QColor(0, 0, 0, 40),
            capture_hint=QColor(0, 0, 0, 90),
            highlight_check=QColor(255, 0, 0, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )


THEMES: dict[str, BoardTheme] = {
    "Neon Violet": BoardTheme.neon_violet(),
    "Classic": BoardTheme.classic(),
}


def theme_by_name(name: str) -> BoardTheme:
    """Theme registered under *name*, falling back to the default."""
    return THEMES.get(name, BoardTheme.neon_violet())


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #15102a;
}

QLabel {
    color: #e8e0ff;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#statusLabel[alert="true"] {
    color: #ff4fa0;
    font-weight: bold;
}

QListWidget {
    background: #1d1638;
    color: #dcd2ff;
    border: 1px solid #3b2d6b;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3b2d6b;
    color: #e8e0ff;
    border: 1px solid #7c5cff;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #5a3fb0;
}
QPushButton:pressed {
    background: #7c5cff;
}

QMenuBar {
    background: #15102a;
    color: #e8e0ff;
}
QMenuBar::item:selected {
    background: #3b2d6b;
}
QMenu {
    background: #15102a;
    color: #e8e0ff;
    border: 1px solid #3b2d6b;
}
QMenu::item:selected {
    background: #5a3fb0;
}
"""
