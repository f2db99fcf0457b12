"""User-configurable settings and how they reach the widgets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chesstrainer.lesson.scenario import DEFAULT_SCENARIO
from chesstrainer.ui.styles.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from chesstrainer.ui.board.board_scene import BoardScene

_LOGGER = logging.getLogger(__name__)


@dataclass
class TrainerSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Lesson
    scenario: str = DEFAULT_SCENARIO.key


def theme_for(name: str) -> BoardTheme:
    theme = THEMES.get(name)
    if theme is None:
        _LOGGER.warning("Unknown board theme %r, using Classic", name)
        return BoardTheme.default()
    return theme


def apply_settings(scene: BoardScene, settings: TrainerSettings) -> None:
    scene.set_theme(theme_for(settings.board_theme))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
