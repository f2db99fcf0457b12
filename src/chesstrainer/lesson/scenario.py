"""Lesson scenarios: a starting position, a move gate and an objective."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chesstrainer.core.board import Board
from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.core.types import Square

MoveGate = Callable[[Piece | None, Square, Square], bool]
Objective = Callable[[Board], bool]


@dataclass(frozen=True)
class Scenario:
    """A single guided exercise.

    ``is_valid_move`` decides which attempted moves are forwarded to the
    board at all; ``check_objective`` is evaluated after every successful
    move.
    """

    key: str
    title: str
    objective: str
    hint: str
    setup_board: Callable[[], Board]
    is_valid_move: MoveGate
    check_objective: Objective


def _only(color: Color, piece_type: PieceType) -> MoveGate:
    def gate(piece: Piece | None, _from_sq: Square, _to_sq: Square) -> bool:
        return piece == Piece(color, piece_type)

    return gate


# ── King to queen ───────────────────────────────────────────────────────────


def _king_to_queen_board() -> Board:
    board = Board()
    board.put(Piece(Color.WHITE, PieceType.KING), "e1")
    board.put(Piece(Color.WHITE, PieceType.QUEEN), "d8")
    return board


def _king_reached_e8(board: Board) -> bool:
    return board.get("e8") == Piece(Color.WHITE, PieceType.KING)


KING_TO_QUEEN = Scenario(
    key="king-to-queen",
    title="Chess Learning Activity",
    objective="Help the white king reach e8 to meet his queen!",
    hint="(Drag the white king to move him one square at a time)",
    setup_board=_king_to_queen_board,
    is_valid_move=_only(Color.WHITE, PieceType.KING),
    check_objective=_king_reached_e8,
)


# ── Knight check ────────────────────────────────────────────────────────────

KNIGHT_CHECK_FEN = "N7/8/8/3P4/2P2P2/4P3/8/7k w - - 0 1"


def _knight_checks_king(board: Board) -> bool:
    # f2 and g3 are the knight squares that attack the king on h1.
    return any(
        (piece := board.get(sq)) is not None and piece.piece_type == PieceType.KNIGHT
        for sq in ("f2", "g3")
    )


KNIGHT_CHECK = Scenario(
    key="knight-check",
    title="Knight's Challenge",
    objective="Use the white knight to check the black king!",
    hint="(Move only the white knight to deliver check)",
    setup_board=lambda: Board(KNIGHT_CHECK_FEN),
    is_valid_move=_only(Color.WHITE, PieceType.KNIGHT),
    check_objective=_knight_checks_king,
)


# ── Registry ────────────────────────────────────────────────────────────────

SCENARIOS: dict[str, Scenario] = {s.key: s for s in (KNIGHT_CHECK, KING_TO_QUEEN)}
DEFAULT_SCENARIO = KNIGHT_CHECK


def get_scenario(key: str) -> Scenario:
    """Look up a built-in scenario by key."""
    try:
        return SCENARIOS[key]
    except KeyError:
        known = ", ".join(sorted(SCENARIOS))
        raise KeyError(f"Unknown scenario {key!r} (known: {known})") from None
