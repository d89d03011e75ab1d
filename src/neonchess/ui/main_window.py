"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QVBoxLayout, QWidget

from neonchess.core.enums import GameStatus
from neonchess.core.move import Move
from neonchess.core.types import Square
from neonchess.game.controller import GameController
from neonchess.game.state import GameState
from neonchess.ui.board.board_view import BoardView
from neonchess.ui.panels.control_panel import ControlPanel
from neonchess.ui.panels.move_panel import MovePanel
from neonchess.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Neon Chess."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Neon Violet Chess")
        self.setMinimumSize(760, 560)
        self.resize(980, 700)

        self._controller = GameController()
        self.settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        apply_settings(self)
        self._controller.new_game()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_restart = QAction("Restart", self)
        self._act_restart.setShortcut("Ctrl+N")
        self._act_restart.triggered.connect(self._on_restart)
        menu_game.addAction(self._act_restart)

        menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        menu_game.addAction(self._act_quit)

        menu_view = menu_bar.addMenu("&View")
        assert menu_view is not None

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.setCheckable(True)
        self._act_flip.setChecked(self.settings.flipped)
        self._act_flip.toggled.connect(self._on_flip_toggled)
        menu_view.addAction(self._act_flip)

        self._act_hints = QAction("Show legal moves", self)
        self._act_hints.setCheckable(True)
        self._act_hints.setChecked(self.settings.show_legal_moves)
        self._act_hints.toggled.connect(self._on_hints_toggled)
        menu_view.addAction(self._act_hints)

        self._act_coords = QAction("Show coordinates", self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(self.settings.show_coordinates)
        self._act_coords.toggled.connect(self._on_coords_toggled)
        menu_view.addAction(self._act_coords)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._control_panel.restart_clicked.connect(self._on_restart)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_new_game.append(self._on_new_game)

    # ── Slots: user actions ──────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.handle_square_click(Square(row, col))

    def _on_restart(self) -> None:
        self._controller.new_game()

    def _on_flip_toggled(self, checked: bool) -> None:
        self.settings.flipped = checked
        apply_settings(self)

    def _on_hints_toggled(self, checked: bool) -> None:
        self.settings.show_legal_moves = checked
        apply_settings(self)

    def _on_coords_toggled(self, checked: bool) -> None:
        self.settings.show_coordinates = checked
        apply_settings(self)

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_new_game(self, state: GameState) -> None:
        self._move_panel.set_history(state.move_history)
        self._refresh(state)

    def _on_game_move(self, move: Move, notation: str, state: GameState) -> None:
        self._move_panel.add_move(notation)
        self._refresh(state)

    def _on_selection_changed(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)

    def _on_game_over(self, status: GameStatus) -> None:
        _LOGGER.info("Game finished with %s", status.name.lower())
        self._refresh(self._controller.state)

    def _refresh(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)
        self._control_panel.set_status(state.turn, state.status)
