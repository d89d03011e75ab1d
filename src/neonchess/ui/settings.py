"""Application settings and how they are applied to the main window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from neonchess.ui.styles.theme import theme_by_name


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Neon Violet"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Diagnostics
    log_level: str = "WARNING"


def apply_settings(host: Any) -> None:
    """Push *host*'s settings onto its board scene."""
    s: AppSettings = host.settings
    scene = host.board_view.board_scene

    scene.set_theme(theme_by_name(s.board_theme))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)
    scene.set_flipped(s.flipped)
