"""MainWindow — board plus the lesson panel."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chesstrainer.core.board import Board
from chesstrainer.lesson.scenario import DEFAULT_SCENARIO, SCENARIOS, Scenario
from chesstrainer.lesson.session import LessonSession
from chesstrainer.ui.board.board_view import BoardView
from chesstrainer.ui.settings import TrainerSettings, apply_settings

_LOGGER = logging.getLogger(__name__)

_SUCCESS_TEXT = "🎉  Great job! You did it!"


class MainWindow(QMainWindow):
    """Main application window for the trainer."""

    def __init__(self, settings: TrainerSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or TrainerSettings()
        self._session = LessonSession(self._initial_scenario())

        self.setWindowTitle("Chess Trainer")
        self.resize(1000, 640)

        self._board_view = BoardView(self._session)
        self._build_panel()

        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(40)
        layout.addWidget(self._board_view, stretch=3)
        layout.addWidget(self._panel, stretch=2)
        self.setCentralWidget(central)

        self._session.events.on_board_changed.append(self._on_board_changed)
        self._session.events.on_objective_met.append(self._on_objective_met)

        apply_settings(self._board_view.board_scene, self._settings)
        self._show_scenario(self._session.scenario)
        self._on_board_changed(self._session.board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> LessonSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def settings(self) -> TrainerSettings:
        return self._settings

    # ── UI construction ──────────────────────────────────────────────────

    def _build_panel(self) -> None:
        self._panel = QWidget()
        self._panel.setMaximumWidth(400)
        col = QVBoxLayout(self._panel)
        col.setSpacing(16)

        self._title_label = QLabel()
        self._title_label.setObjectName("lessonTitle")
        col.addWidget(self._title_label)

        card = QFrame()
        card.setObjectName("lessonCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(20, 20, 20, 20)

        header = QLabel("Objective 🎯")
        header.setObjectName("objectiveHeader")
        card_layout.addWidget(header)

        self._objective_label = QLabel()
        self._objective_label.setWordWrap(True)
        card_layout.addWidget(self._objective_label)

        self._hint_label = QLabel()
        self._hint_label.setObjectName("lessonHint")
        self._hint_label.setWordWrap(True)
        card_layout.addWidget(self._hint_label)

        self._success_label = QLabel(_SUCCESS_TEXT)
        self._success_label.setObjectName("successBanner")
        self._success_label.setVisible(False)
        card_layout.addWidget(self._success_label)
        col.addWidget(card)

        self._scenario_combo = QComboBox()
        for key, scenario in SCENARIOS.items():
            self._scenario_combo.addItem(scenario.title, key)
        self._scenario_combo.setCurrentIndex(
            self._scenario_combo.findData(self._session.scenario.key)
        )
        self._scenario_combo.currentIndexChanged.connect(self._on_scenario_picked)
        col.addWidget(self._scenario_combo)

        self._reset_button = QPushButton("Start over")
        self._reset_button.clicked.connect(self._on_reset)
        col.addWidget(self._reset_button)

        self._fen_label = QLabel()
        self._fen_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        self._fen_label.setObjectName("lessonHint")
        col.addWidget(self._fen_label)
        col.addStretch(1)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_scenario_picked(self, index: int) -> None:
        key = self._scenario_combo.itemData(index)
        scenario = SCENARIOS.get(key)
        if scenario is None or scenario is self._session.scenario:
            return
        self._settings.scenario = scenario.key
        self._session.set_scenario(scenario)
        self._show_scenario(scenario)

    def _on_reset(self) -> None:
        self._session.reset()
        self._success_label.setVisible(False)

    def _on_board_changed(self, board: Board) -> None:
        self._fen_label.setText(board.fen())

    def _on_objective_met(self, _scenario: Scenario) -> None:
        self._success_label.setVisible(True)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _initial_scenario(self) -> Scenario:
        scenario = SCENARIOS.get(self._settings.scenario)
        if scenario is None:
            _LOGGER.warning(
                "Unknown scenario %r, starting %s",
                self._settings.scenario,
                DEFAULT_SCENARIO.key,
            )
            return DEFAULT_SCENARIO
        return scenario

    def _show_scenario(self, scenario: Scenario) -> None:
        self._title_label.setText(scenario.title)
        self._objective_label.setText(scenario.objective)
        self._hint_label.setText(scenario.hint)
        self._success_label.setVisible(self._session.objective_met)
