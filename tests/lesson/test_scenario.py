"""Tests for the built-in lesson scenarios."""

import pytest

from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.lesson.scenario import (
    DEFAULT_SCENARIO,
    KING_TO_QUEEN,
    KNIGHT_CHECK,
    SCENARIOS,
    get_scenario,
)


class TestKingToQueen:
    def test_setup(self) -> None:
        board = KING_TO_QUEEN.setup_board()
        assert board.get("e1") == Piece(Color.WHITE, PieceType.KING)
        assert board.get("d8") == Piece(Color.WHITE, PieceType.QUEEN)
        assert board.fen().split()[0] == "3Q4/8/8/8/8/8/8/4K3"

    def test_only_white_king_may_move(self) -> None:
        gate = KING_TO_QUEEN.is_valid_move
        assert gate(Piece(Color.WHITE, PieceType.KING), "e1", "e2")
        assert not gate(Piece(Color.WHITE, PieceType.QUEEN), "d8", "d7")
        assert not gate(Piece(Color.BLACK, PieceType.KING), "e8", "e7")
        assert not gate(None, "a1", "a2")

    def test_objective_reached_by_walking(self) -> None:
        board = KING_TO_QUEEN.setup_board()
        assert not KING_TO_QUEEN.check_objective(board)
        path = ["e1", "e2", "e3", "e4", "e5", "e6", "e7", "e8"]
        for from_sq, to_sq in zip(path, path[1:]):
            assert board.move(from_sq, to_sq)
        assert KING_TO_QUEEN.check_objective(board)

    def test_setup_is_fresh_each_time(self) -> None:
        first = KING_TO_QUEEN.setup_board()
        first.clear()
        assert KING_TO_QUEEN.setup_board().get("e1") is not None


class TestKnightCheck:
    def test_setup(self) -> None:
        board = KNIGHT_CHECK.setup_board()
        assert board.get("a8") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.get("h1") == Piece(Color.BLACK, PieceType.KING)

    def test_only_white_knight_may_move(self) -> None:
        gate = KNIGHT_CHECK.is_valid_move
        assert gate(Piece(Color.WHITE, PieceType.KNIGHT), "a8", "b6")
        assert not gate(Piece(Color.WHITE, PieceType.PAWN), "d5", "d6")
        assert not gate(Piece(Color.BLACK, PieceType.KNIGHT), "a8", "b6")

    @pytest.mark.parametrize("target", ["f2", "g3"])
    def test_objective_squares(self, target: str) -> None:
        board = KNIGHT_CHECK.setup_board()
        board.put(Piece(Color.WHITE, PieceType.KNIGHT), target)
        assert KNIGHT_CHECK.check_objective(board)

    def test_objective_via_knight_tour(self) -> None:
        board = KNIGHT_CHECK.setup_board()
        tour = ["a8", "b6", "d7", "f6", "g4", "f2"]
        for from_sq, to_sq in zip(tour, tour[1:]):
            assert board.move(from_sq, to_sq), (from_sq, to_sq)
        assert KNIGHT_CHECK.check_objective(board)

    def test_not_met_at_start(self) -> None:
        assert not KNIGHT_CHECK.check_objective(KNIGHT_CHECK.setup_board())


class TestRegistry:
    def test_keys(self) -> None:
        assert set(SCENARIOS) == {"knight-check", "king-to-queen"}
        assert DEFAULT_SCENARIO is KNIGHT_CHECK

    def test_lookup(self) -> None:
        assert get_scenario("king-to-queen") is KING_TO_QUEEN

    def test_unknown_key(self) -> None:
        with pytest.raises(KeyError, match="Unknown scenario"):
            get_scenario("rook-roll")
