"""BoardScene — QGraphicsScene that draws the lesson board and pieces."""

from __future__ import annotations

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

from chesstrainer.core.board import Board
from chesstrainer.core.types import SQUARES, Square, parse_square, square_name
from chesstrainer.lesson.session import LessonSession
from chesstrainer.ui.board.piece_item import PieceItem
from chesstrainer.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the session's board, coordinates, highlights and piece items.

    All move decisions are delegated to the :class:`LessonSession`; the scene
    only translates gestures into squares and redraws when the session says
    something changed.

    Signals:
        move_made(str, str): Emitted after a drag or click produced a move.
    """

    move_made = pyqtSignal(str, str)

    TILE = 80  # px per square
    _DOT_RATIO = 0.35

    def __init__(
        self, session: LessonSession | None = None, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._session: LessonSession | None = None
        self._show_coordinates = True
        self._show_legal_moves = True
        self._dragging_item: PieceItem | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._legal_dot_items: list[QGraphicsItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()
        if session is not None:
            self.set_session(session)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def session(self) -> LessonSession | None:
        return self._session

    def set_session(self, session: LessonSession) -> None:
        """Attach to *session*, detaching from the previous one."""
        if self._session is not None:
            self._session.events.on_board_changed.remove(self._on_board_changed)
            self._session.events.on_selection_changed.remove(
                self._on_selection_changed
            )
        self._session = session
        session.events.on_board_changed.append(self._on_board_changed)
        session.events.on_selection_changed.append(self._on_selection_changed)
        self._sync_pieces()
        self._sync_highlights()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move dot highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for sq in SQUARES:
            row, col = parse_square(sq)
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if is_light else self._theme.coord_light
            # Rank numbers (left edge)
            if col == 0:
                self._add_coord(sq[1], font, text_color, col * t + 2, row * t + 1)
            # File letters (bottom edge)
            if row == 7:
                self._add_coord(
                    sq[0], font, text_color, col * t + t - 12, row * t + t - 16
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Session synchronisation ──────────────────────────────────────────

    def _on_board_changed(self, _board: Board) -> None:
        self._sync_pieces()

    def _on_selection_changed(
        self, _square: Square | None, _targets: list[Square]
    ) -> None:
        self._sync_highlights()

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the session's board."""
        self._dragging_item = None
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._session is None:
            return

        board = self._session.board
        for sq in SQUARES:
            piece = board.get(sq)
            if piece is None:
                continue
            item = PieceItem.for_piece(
                piece, sq, self.TILE, self._theme.white_piece, self._theme.black_piece
            )
            row, col = parse_square(sq)
            item.place(col, row)
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)
        if self._session is None or self._session.selected_square is None:
            return

        self._highlight_items.append(
            self._make_highlight(
                self._session.selected_square, self._theme.highlight_from
            )
        )
        if self._show_legal_moves:
            for sq in self._session.highlighted:
                self._legal_dot_items.append(self._make_dot(sq))

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._session is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is None:
            self._session.deselect()
            return super().mousePressEvent(event)

        origin = self._session.selected_square
        if self._session.click(sq):
            if origin is not None:
                self.move_made.emit(origin, sq)
            return

        # Picked up a piece: start drag
        if self._session.selected_square == sq and sq in self._piece_items:
            item = self._piece_items[sq]
            item.enable_drag(True)
            item.start_drag()
            self._dragging_item = item

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if (
            self._dragging_item is not None
            and self._session is not None
            and event is not None
        ):
            item = self._dragging_item
            self._dragging_item = None
            drop_sq = self._pos_to_square(event.scenePos())

            if drop_sq is not None and drop_sq != item.square:
                origin = item.square
                if self._session.drop(origin, drop_sq):
                    self.move_made.emit(origin, drop_sq)
                    return

            # Invalid drop — snap back
            item.cancel_drag()

        super().mouseReleaseEvent(event)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _clear_items(self, items: list[QGraphicsItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        return square_name(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = parse_square(sq)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Create a legal-destination dot centred on a square."""
        t = self.TILE
        row, col = parse_square(sq)
        size = t * self._DOT_RATIO
        offset = (t - size) / 2
        dot = QGraphicsEllipseItem(col * t + offset, row * t + offset, size, size)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot
