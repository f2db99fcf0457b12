"""Visual theme constants and QSS styles for the trainer."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor
    black_piece: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(128, 128, 128, 128),  # grey dot
            coord_light=QColor(240, 217, 181),
            coord_dark=QColor(181, 136, 99),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(128, 128, 128, 128),
            coord_light=QColor(222, 227, 230),
            coord_dark=QColor(140, 162, 173),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(128, 128, 128, 128),
            coord_light=QColor(236, 238, 220),
            coord_dark=QColor(112, 149, 120),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(20, 20, 20),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #f4f6f7;
}

QLabel {
    color: #2c3e50;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#lessonTitle {
    font-size: 20px;
    font-weight: bold;
}

QLabel#objectiveHeader {
    color: #27ae60;
    font-size: 15px;
    font-weight: bold;
}

QLabel#lessonHint {
    color: #7f8c8d;
    font-size: 12px;
}

QLabel#successBanner {
    background: #2ecc71;
    color: white;
    border-radius: 4px;
    padding: 12px;
}

QFrame#lessonCard {
    background: #f8f9fa;
    border-radius: 8px;
}

QPushButton {
    background: #ffffff;
    color: #2c3e50;
    border: 1px solid #bdc3c7;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #ecf0f1;
}
QPushButton:pressed {
    background: #d5dbdb;
}
"""
