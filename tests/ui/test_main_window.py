"""Tests for MainWindow lesson panel wiring."""

from __future__ import annotations

from chesstrainer.lesson.scenario import KING_TO_QUEEN, KNIGHT_CHECK
from chesstrainer.ui.main_window import MainWindow
from chesstrainer.ui.settings import TrainerSettings


def test_shows_default_scenario() -> None:
    window = MainWindow()
    assert window.session.scenario is KNIGHT_CHECK
    assert window._title_label.text() == KNIGHT_CHECK.title
    assert window._objective_label.text() == KNIGHT_CHECK.objective
    assert window._hint_label.text() == KNIGHT_CHECK.hint
    assert not window._success_label.isVisibleTo(window)


def test_scenario_from_settings() -> None:
    window = MainWindow(TrainerSettings(scenario="king-to-queen"))
    assert window.session.scenario is KING_TO_QUEEN


def test_unknown_scenario_setting_falls_back() -> None:
    window = MainWindow(TrainerSettings(scenario="missing"))
    assert window.session.scenario is KNIGHT_CHECK


def test_objective_banner_appears() -> None:
    window = MainWindow()
    window.session.drop("a8", "b6")
    assert not window._success_label.isVisibleTo(window)

    for from_sq, to_sq in [("b6", "d7"), ("d7", "f6"), ("f6", "g4"), ("g4", "f2")]:
        assert window.session.drop(from_sq, to_sq)
    assert window._success_label.isVisibleTo(window)


def test_reset_hides_banner_and_restores_board() -> None:
    window = MainWindow(TrainerSettings(scenario="king-to-queen"))
    for rank in range(1, 8):
        window.session.drop(f"e{rank}", f"e{rank + 1}")
    assert window._success_label.isVisibleTo(window)

    window._reset_button.click()
    assert not window._success_label.isVisibleTo(window)
    assert window.session.board == KING_TO_QUEEN.setup_board()


def test_scenario_combo_switches_lesson() -> None:
    window = MainWindow()
    index = window._scenario_combo.findData(KING_TO_QUEEN.key)
    window._scenario_combo.setCurrentIndex(index)

    assert window.session.scenario is KING_TO_QUEEN
    assert window.settings.scenario == KING_TO_QUEEN.key
    assert window._title_label.text() == KING_TO_QUEEN.title
    assert set(window.board_view.board_scene._piece_items) == {"e1", "d8"}


def test_fen_label_tracks_board() -> None:
    window = MainWindow()
    window.session.drop("a8", "b6")
    assert window._fen_label.text() == window.session.board.fen()
