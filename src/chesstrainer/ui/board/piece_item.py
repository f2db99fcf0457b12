"""PieceItem — draggable chess glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chesstrainer.core.enums import Color
from chesstrainer.core.piece import Piece
from chesstrainer.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores its logical *square* and supports drag & drop.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self,
        piece: Piece,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size
        self._drag_origin: QPointF | None = None

        font = QFont()
        font.setPixelSize(int(tile_size * self._FONT_RATIO))
        self.setFont(font)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(QBrush(outline), 1.0))

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @classmethod
    def for_piece(
        cls, piece: Piece, square: Square, tile_size: int, white: QColor, black: QColor
    ) -> PieceItem:
        if piece.color == Color.WHITE:
            return cls(piece, square, tile_size, white, black)
        return cls(piece, square, tile_size, black, white)

    def place(self, col: int, row: int) -> None:
        """Centre the glyph inside the visual tile at (*col*, *row*)."""
        t = self._tile_size
        bounds = self.boundingRect()
        self.setPos(
            col * t + (t - bounds.width()) / 2,
            row * t + (t - bounds.height()) / 2,
        )

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)
        self.enable_drag(False)
