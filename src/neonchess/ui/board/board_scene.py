"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from neonchess.core.enums import Color
from neonchess.core.types import ALL_SQUARES, BOARD_SIZE, FILES, Square
from neonchess.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from neonchess.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights and piece glyphs.

    The scene holds no game logic: it draws a :class:`GameState` and reports
    clicks.

    Signals:
        square_clicked(int, int): Row and column of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    _HINT_RATIO = 0.28
    _RING_WIDTH = 5

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.neon_violet()
        self._state: GameState | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._hint_items: list[QGraphicsItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Redraw pieces and highlights from *state*."""
        self._state = state
        self.refresh()

    def refresh(self) -> None:
        self._sync_pieces()
        self._sync_highlights()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation (white at the top)."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move and capture hints."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in ALL_SQUARES:
            vc, vr = self._visual_coords(sq)
            is_dark = (sq.row + sq.col) % 2 == 1
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light

            # Rank numbers on the left edge
            if vc == 0:
                label = str(BOARD_SIZE - sq.row)
                self._add_coord(label, vc * t + 2, vr * t + 1, font, text_color)

            # File letters on the bottom edge
            if vr == BOARD_SIZE - 1:
                x, y = vc * t + t - 12, vr * t + t - 16
                self._add_coord(FILES[sq.col], x, y, font, text_color)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current position."""
        self._clear_items(list(self._piece_items.values()))
        self._piece_items.clear()
        if self._state is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._state.position.occupied():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.white_piece
                if piece.color == Color.WHITE
                else self._theme.black_piece
            )
            item.setBrush(QBrush(fill))
            outline = (
                self._theme.black_piece
                if piece.color == Color.WHITE
                else self._theme.white_piece
            )
            item.setPen(QPen(outline, 1))
            bounds = item.boundingRect()
            vc, vr = self._visual_coords(sq)
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._hint_items)
        state = self._state
        if state is None:
            return

        if state.in_check:
            king_sq = state.position.king_square(state.turn)
            if king_sq is not None:
                rect = self._make_highlight(king_sq, self._theme.highlight_check)
                rect.setZValue(0.6)
                self._highlight_items.append(rect)

        if state.selected is None:
            return
        self._highlight_items.append(
            self._make_highlight(state.selected, self._theme.highlight_selected)
        )

        if not self._show_legal_moves:
            return
        for move in state.selected_moves:
            if state.position[move.to_sq] is None:
                self._hint_items.append(self._make_move_hint(move.to_sq))
            else:
                self._hint_items.append(self._make_capture_hint(move.to_sq))

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.row, sq.col)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square -> visual (column, row)."""
        if self._flipped:
            return BOARD_SIZE - 1 - sq.col, BOARD_SIZE - 1 - sq.row
        return sq.col, sq.row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position -> board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Square(BOARD_SIZE - 1 - row, BOARD_SIZE - 1 - col)
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    def _make_move_hint(self, sq: Square) -> QGraphicsEllipseItem:
        """Small dot in the centre of an empty destination."""
        t = self.TILE
        size = t * self._HINT_RATIO
        vc, vr = self._visual_coords(sq)
        dot = QGraphicsEllipseItem(
            vc * t + (t - size) / 2, vr * t + (t - size) / 2, size, size
        )
        dot.setBrush(QBrush(self._theme.move_hint))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(0.8)
        self.addItem(dot)
        return dot

    def _make_capture_hint(self, sq: Square) -> QGraphicsEllipseItem:
        """Ring around an occupied destination."""
        t = self.TILE
        inset = self._RING_WIDTH / 2
        vc, vr = self._visual_coords(sq)
        ring = QGraphicsEllipseItem(
            vc * t + inset, vr * t + inset, t - 2 * inset, t - 2 * inset
        )
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        ring.setPen(QPen(self._theme.capture_hint, self._RING_WIDTH))
        ring.setZValue(0.8)
        self.addItem(ring)
        return ring
