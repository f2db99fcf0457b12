"""Per-piece movement predicates.

Every predicate is a pure geometric check over ``(row, col)`` coordinates.
None of them looks at whose turn it is, at check, or at pieces standing
between origin and target; only the pawn consults the occupant of the
destination square.
"""

from __future__ import annotations

from collections.abc import Callable

from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.piece import Piece
from chesstrainer.core.types import Coords

# Row 0 is rank 8, so white pawns advance toward smaller rows.
_PAWN_DIRECTION = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW = {Color.WHITE: 6, Color.BLACK: 1}


def _deltas(origin: Coords, target: Coords) -> tuple[int, int]:
    return abs(target[0] - origin[0]), abs(target[1] - origin[1])


class MoveRules:
    """Static legality checker used by :class:`~chesstrainer.core.board.Board`."""

    @staticmethod
    def is_king_move(origin: Coords, target: Coords) -> bool:
        d_row, d_col = _deltas(origin, target)
        return max(d_row, d_col) == 1

    @staticmethod
    def is_rook_move(origin: Coords, target: Coords) -> bool:
        # Sliding pieces jump: intervening pieces are not checked.
        return origin[0] == target[0] or origin[1] == target[1]

    @staticmethod
    def is_bishop_move(origin: Coords, target: Coords) -> bool:
        d_row, d_col = _deltas(origin, target)
        return d_row == d_col

    @staticmethod
    def is_queen_move(origin: Coords, target: Coords) -> bool:
        return MoveRules.is_rook_move(origin, target) or MoveRules.is_bishop_move(
            origin, target
        )

    @staticmethod
    def is_knight_move(origin: Coords, target: Coords) -> bool:
        return _deltas(origin, target) in ((1, 2), (2, 1))

    @staticmethod
    def is_pawn_move(
        origin: Coords,
        target: Coords,
        piece: Piece,
        occupant: Piece | None = None,
    ) -> bool:
        """Pawn push, double push from the start row, or diagonal capture.

        *occupant* is whatever stands on *target*; it only matters for the
        diagonal capture. A straight push does not look at it.
        """
        direction = _PAWN_DIRECTION[piece.color]
        row_step = target[0] - origin[0]
        same_file = origin[1] == target[1]

        if same_file and row_step == direction:
            return True

        if (
            same_file
            and origin[0] == _PAWN_START_ROW[piece.color]
            and row_step == 2 * direction
        ):
            return True

        if abs(target[1] - origin[1]) == 1 and row_step == direction:
            return occupant is not None and occupant.color != piece.color

        return False

    @staticmethod
    def is_legal_move(
        piece: Piece,
        origin: Coords,
        target: Coords,
        occupant: Piece | None = None,
    ) -> bool:
        """Dispatch to the predicate matching ``piece.piece_type``."""
        if piece.piece_type == PieceType.PAWN:
            return MoveRules.is_pawn_move(origin, target, piece, occupant)
        return _GEOMETRIC[piece.piece_type](origin, target)


_GEOMETRIC: dict[PieceType, Callable[[Coords, Coords], bool]] = {
    PieceType.KNIGHT: MoveRules.is_knight_move,
    PieceType.BISHOP: MoveRules.is_bishop_move,
    PieceType.ROOK: MoveRules.is_rook_move,
    PieceType.QUEEN: MoveRules.is_queen_move,
    PieceType.KING: MoveRules.is_king_move,
}
