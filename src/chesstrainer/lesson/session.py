"""LessonSession — drives one scenario on behalf of the UI.

Holds the live board together with the interaction state the view needs
(selected square, highlighted destinations, whether the objective has been
met). Views subscribe to :class:`LessonEvents` and re-render from the
session; they never enumerate moves themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesstrainer.core.board import Board
from chesstrainer.core.types import Square
from chesstrainer.lesson.scenario import DEFAULT_SCENARIO, Scenario

_LOGGER = logging.getLogger(__name__)

BoardCallback = Callable[[Board], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]
ObjectiveCallback = Callable[[Scenario], None]


@dataclass
class LessonEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_objective_met: list[ObjectiveCallback] = field(default_factory=list)


class LessonSession:
    """Sequences the scenario gate, the board engine and the objective check."""

    __slots__ = (
        "_scenario",
        "_board",
        "_selected",
        "_highlighted",
        "_objective_met",
        "events",
    )

    def __init__(self, scenario: Scenario = DEFAULT_SCENARIO) -> None:
        self._scenario = scenario
        self._board = scenario.setup_board()
        self._selected: Square | None = None
        self._highlighted: list[Square] = []
        self._objective_met = False
        self.events = LessonEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def highlighted(self) -> list[Square]:
        return list(self._highlighted)

    @property
    def objective_met(self) -> bool:
        return self._objective_met

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Restart the current scenario from its initial position."""
        self._board = self._scenario.setup_board()
        self._objective_met = False
        self._set_selection(None, [])
        self._emit_board_changed()

    def set_scenario(self, scenario: Scenario) -> None:
        self._scenario = scenario
        self.reset()

    # ── Interaction ──────────────────────────────────────────────────────

    def can_pick(self, square: Square) -> bool:
        """Whether the learner may pick up the piece on *square*."""
        piece = self._board.get(square)
        return piece is not None and self._scenario.is_valid_move(
            piece, square, square
        )

    def select(self, square: Square) -> bool:
        """Select a pickable piece and highlight its legal destinations."""
        if not self.can_pick(square):
            return False
        self._set_selection(square, self._board.get_legal_moves(square))
        return True

    def deselect(self) -> None:
        if self._selected is not None or self._highlighted:
            self._set_selection(None, [])

    def drop(self, from_sq: Square, to_sq: Square) -> bool:
        """Attempt a move; returns ``True`` when the board changed.

        The move is played on a copy first so a rejected attempt leaves the
        session exactly as it was.
        """
        candidate = self._board.copy()
        piece = candidate.get(from_sq)
        if not self._scenario.is_valid_move(piece, from_sq, to_sq):
            _LOGGER.debug(
                "Scenario %s refuses %s-%s", self._scenario.key, from_sq, to_sq
            )
            return False
        if not candidate.move(from_sq, to_sq):
            return False

        self._board = candidate
        self._set_selection(None, [])
        self._emit_board_changed()

        if not self._objective_met and self._scenario.check_objective(candidate):
            self._objective_met = True
            _LOGGER.info("Objective met in scenario %s", self._scenario.key)
            for cb in self.events.on_objective_met:
                cb(self._scenario)
        return True

    def click(self, square: Square) -> bool:
        """Handle a click; returns ``True`` when it produced a move."""
        if self.select(square):
            return False
        if self._selected is None:
            return False
        if square in self._highlighted:
            return self.drop(self._selected, square)
        self.deselect()
        return False

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, square: Square | None, targets: list[Square]) -> None:
        self._selected = square
        self._highlighted = targets
        for cb in self.events.on_selection_changed:
            cb(square, list(targets))

    def _emit_board_changed(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._board)
