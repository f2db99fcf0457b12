"""Tests for LessonSession — the scenario driver behind the board UI."""

from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.lesson.scenario import KING_TO_QUEEN, KNIGHT_CHECK
from chesstrainer.lesson.session import LessonSession

WHITE_KNIGHT = Piece(Color.WHITE, PieceType.KNIGHT)


def _knight_session() -> LessonSession:
    return LessonSession(KNIGHT_CHECK)


class TestSelection:
    def test_select_highlights_engine_moves(self) -> None:
        session = _knight_session()
        assert session.select("a8")
        assert session.selected_square == "a8"
        assert session.highlighted == session.board.get_legal_moves("a8")
        assert session.highlighted == ["c7", "b6"]

    def test_select_refused_for_gated_piece(self) -> None:
        session = _knight_session()
        assert not session.select("d5")  # white pawn, not allowed here
        assert not session.select("e4")  # empty
        assert session.selected_square is None
        assert session.highlighted == []

    def test_deselect(self) -> None:
        session = _knight_session()
        session.select("a8")
        session.deselect()
        assert session.selected_square is None
        assert session.highlighted == []

    def test_selection_event(self) -> None:
        session = _knight_session()
        seen: list[tuple[str | None, list[str]]] = []
        session.events.on_selection_changed.append(lambda sq, t: seen.append((sq, t)))
        session.select("a8")
        assert seen == [("a8", ["c7", "b6"])]


class TestDrop:
    def test_legal_drop(self) -> None:
        session = _knight_session()
        boards = []
        session.events.on_board_changed.append(boards.append)
        assert session.drop("a8", "b6")
        assert session.board.get("b6") == WHITE_KNIGHT
        assert session.board.get("a8") is None
        assert boards == [session.board]

    def test_illegal_drop_changes_nothing(self) -> None:
        session = _knight_session()
        session.select("a8")
        board_before = session.board
        fen_before = board_before.fen()
        changed = []
        session.events.on_board_changed.append(changed.append)

        assert not session.drop("a8", "a7")

        assert session.board is board_before
        assert session.board.fen() == fen_before
        assert session.selected_square == "a8"
        assert changed == []

    def test_gated_drop_refused(self) -> None:
        session = _knight_session()
        assert not session.drop("d5", "d6")
        assert session.board.get("d5") is not None

    def test_drop_clears_selection(self) -> None:
        session = _knight_session()
        session.select("a8")
        session.drop("a8", "c7")
        assert session.selected_square is None
        assert session.highlighted == []

    def test_objective_met_once(self) -> None:
        session = LessonSession(KING_TO_QUEEN)
        hits = []
        session.events.on_objective_met.append(hits.append)
        path = ["e1", "e2", "e3", "e4", "e5", "e6", "e7", "e8"]
        for from_sq, to_sq in zip(path, path[1:]):
            assert session.drop(from_sq, to_sq)
        assert session.objective_met
        assert hits == [KING_TO_QUEEN]

        # Objective stays met; moving on does not fire again.
        assert session.drop("e8", "f8")
        assert session.objective_met
        assert hits == [KING_TO_QUEEN]


class TestClick:
    def test_click_select_then_move(self) -> None:
        session = _knight_session()
        assert not session.click("a8")
        assert session.selected_square == "a8"
        assert session.click("b6")
        assert session.board.get("b6") == WHITE_KNIGHT

    def test_click_elsewhere_deselects(self) -> None:
        session = _knight_session()
        session.click("a8")
        assert not session.click("h4")
        assert session.selected_square is None

    def test_click_without_selection(self) -> None:
        session = _knight_session()
        assert not session.click("b6")
        assert session.board.get("a8") == WHITE_KNIGHT


class TestLifecycle:
    def test_reset_restores_position(self) -> None:
        session = LessonSession(KING_TO_QUEEN)
        session.drop("e1", "e2")
        session.select("e2")
        session.reset()
        assert session.board == KING_TO_QUEEN.setup_board()
        assert session.selected_square is None
        assert not session.objective_met

    def test_set_scenario(self) -> None:
        session = LessonSession(KING_TO_QUEEN)
        session.set_scenario(KNIGHT_CHECK)
        assert session.scenario is KNIGHT_CHECK
        assert session.board.get("a8") == WHITE_KNIGHT

    def test_default_scenario(self) -> None:
        assert LessonSession().scenario is KNIGHT_CHECK
