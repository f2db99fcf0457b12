"""Lesson layer — scenarios and the session that plays them.

Quick start::

    from chesstrainer.lesson import LessonSession, get_scenario

    session = LessonSession(get_scenario("knight-check"))
    session.select("a8")        # highlights ['c7', 'b6']
    session.drop("a8", "b6")    # True
"""

from chesstrainer.lesson.scenario import (
    DEFAULT_SCENARIO,
    KING_TO_QUEEN,
    KNIGHT_CHECK,
    KNIGHT_CHECK_FEN,
    SCENARIOS,
    Scenario,
    get_scenario,
)
from chesstrainer.lesson.session import LessonEvents, LessonSession

__all__ = [
    "DEFAULT_SCENARIO",
    "KING_TO_QUEEN",
    "KNIGHT_CHECK",
    "KNIGHT_CHECK_FEN",
    "LessonEvents",
    "LessonSession",
    "SCENARIOS",
    "Scenario",
    "get_scenario",
]
