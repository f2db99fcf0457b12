"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from chesstrainer.ui.settings import TrainerSettings

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "CHESSTRAINER_LOG_LEVEL"


def configure_logging() -> None:
    """Route package log records to stderr at the level named in the env."""
    level_name = os.environ.get(_LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not known:
        _LOGGER.warning("Unknown log level %r in %s", level_name, _LOG_LEVEL_ENV)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from chesstrainer.ui.styles.theme import APP_STYLE

    app.setApplicationName("Chess Trainer")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: TrainerSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesstrainer.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
