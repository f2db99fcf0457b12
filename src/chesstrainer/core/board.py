"""Board - the trainer's position and move engine."""

from __future__ import annotations

import logging

from chesstrainer.core.notation.fen import (
    Grid,
    empty_grid,
    fen_from_grid,
    grid_from_fen,
)
from chesstrainer.core.piece import Piece
from chesstrainer.core.rules import MoveRules
from chesstrainer.core.types import SQUARES, Coords, Square, parse_square

_LOGGER = logging.getLogger(__name__)


def _coords(square: Square) -> Coords | None:
    """Grid coordinates of *square*, or ``None`` when it is off the board."""
    try:
        return parse_square(square)
    except ValueError:
        return None


class Board:
    """Mutable 8x8 board addressed by algebraic square names.

    Moves are checked only against the moving piece's geometry (see
    :class:`~chesstrainer.core.rules.MoveRules`). There is no turn order, no
    check detection and no path blocking. Off-board squares fail closed:
    queries return ``None`` / ``[]`` and mutations return ``False``.
    """

    __slots__ = ("_grid",)

    def __init__(self, fen: str | None = None) -> None:
        # A blank string means an empty board, like no FEN at all.
        self._grid: Grid = (
            grid_from_fen(fen) if fen and not fen.isspace() else empty_grid()
        )

    # -- Element access -----------------------------------------------------

    def get(self, square: Square) -> Piece | None:
        """Piece standing on *square*, or ``None``."""
        coords = _coords(square)
        if coords is None:
            return None
        row, col = coords
        return self._grid[row][col]

    def __getitem__(self, square: Square) -> Piece | None:
        return self.get(square)

    def put(self, piece: Piece, square: Square) -> bool:
        """Place *piece* on *square*, replacing any occupant."""
        coords = _coords(square)
        if coords is None:
            _LOGGER.debug("Ignoring put of %s on off-board square %r", piece, square)
            return False
        row, col = coords
        self._grid[row][col] = piece
        return True

    def clear(self) -> None:
        self._grid = empty_grid()

    def copy(self) -> Board:
        b = Board()
        b._grid = [cells.copy() for cells in self._grid]
        return b

    # -- Serialisation ------------------------------------------------------

    def fen(self) -> str:
        """FEN of the placement; side to move, castling and clocks are fixed."""
        return fen_from_grid(self._grid)

    # -- Moves --------------------------------------------------------------

    def _legal_coords(
        self, from_sq: Square, to_sq: Square
    ) -> tuple[Coords, Coords] | None:
        """Coordinates of a legal move, or ``None`` when it is not legal."""
        origin, target = _coords(from_sq), _coords(to_sq)
        if origin is None or target is None:
            return None
        piece = self._grid[origin[0]][origin[1]]
        if piece is None:
            return None
        occupant = self._grid[target[0]][target[1]]
        if not MoveRules.is_legal_move(piece, origin, target, occupant):
            return None
        return origin, target

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may move to *to_sq*."""
        return self._legal_coords(from_sq, to_sq) is not None

    def move(self, from_sq: Square, to_sq: Square) -> bool:
        """Move the piece on *from_sq* to *to_sq* if the move is legal.

        A capture is simply an overwrite of the destination. On failure the
        board is left untouched.
        """
        coords = self._legal_coords(from_sq, to_sq)
        if coords is None:
            _LOGGER.debug("Rejected move %s-%s", from_sq, to_sq)
            return False
        (from_row, from_col), (to_row, to_col) = coords
        piece = self._grid[from_row][from_col]
        self._grid[from_row][from_col] = None
        self._grid[to_row][to_col] = piece
        return True

    def get_legal_moves(self, square: Square) -> list[Square]:
        """Destinations the piece on *square* can move to, in board-scan order.

        Each candidate is tried on a throwaway copy, so the board is never
        mutated while enumerating.
        """
        if self.get(square) is None:
            return []
        return [target for target in SQUARES if self.copy().move(square, target)]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self._grid):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {text}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
