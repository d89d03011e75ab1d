"""Tests for applying app settings to UI components."""

from __future__ import annotations

from types import SimpleNamespace

from neonchess.ui.settings import AppSettings, apply_settings
from neonchess.ui.styles.theme import THEMES, BoardTheme, theme_by_name


class _StubScene:
    def __init__(self) -> None:
        self.calls: dict[str, object] = {}

    def set_theme(self, theme: object) -> None:
        self.calls["theme"] = theme

    def set_show_coordinates(self, visible: bool) -> None:
        self.calls["coordinates"] = visible

    def set_show_legal_moves(self, visible: bool) -> None:
        self.calls["legal_moves"] = visible

    def set_flipped(self, flipped: bool) -> None:
        self.calls["flipped"] = flipped


def test_apply_settings_pushes_every_field() -> None:
    scene = _StubScene()
    host = SimpleNamespace(
        settings=AppSettings(
            board_theme="Classic",
            show_coordinates=False,
            show_legal_moves=False,
            flipped=True,
        ),
        board_view=SimpleNamespace(board_scene=scene),
    )

    apply_settings(host)

    assert scene.calls == {
        "theme": THEMES["Classic"],
        "coordinates": False,
        "legal_moves": False,
        "flipped": True,
    }


def test_unknown_theme_falls_back_to_default() -> None:
    theme = theme_by_name("No Such Theme")
    assert theme.dark_square == BoardTheme.neon_violet().dark_square


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.board_theme == "Neon Violet"
    assert settings.show_coordinates
    assert settings.show_legal_moves
    assert not settings.flipped
