"""FEN placement parsing and serialization."""

from __future__ import annotations

import logging

from chesstrainer.core.piece import Piece

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Only the placement is tracked; the other fields are always reported as
# white to move, all castling rights, no en-passant square, fresh clocks.
FEN_SUFFIX = "w KQkq - 0 1"

Grid = list[list[Piece | None]]
_RUN_DIGITS = "12345678"


class FenDecodeError(ValueError):
    """Raised when a FEN placement field cannot be decoded."""


def empty_grid() -> Grid:
    return [[None] * 8 for _ in range(8)]


def grid_from_fen(fen: str) -> Grid:
    """Decode the placement field of *fen* into a fresh 8x8 grid.

    Fields after the first whitespace-separated one are ignored. The grid is
    built from scratch, so a decoding failure never touches an existing board.
    """
    parts = fen.split()
    if not parts:
        raise FenDecodeError(f"Empty FEN: {fen!r}")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenDecodeError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    grid = empty_grid()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in _RUN_DIGITS:
                col += int(ch)
            elif ch.isdigit():
                raise FenDecodeError(f"Invalid FEN digit {ch!r}: {fen!r}")
            else:
                if col >= 8:
                    raise FenDecodeError(f"Invalid FEN rank width: {fen!r}")
                try:
                    grid[row][col] = Piece.from_char(ch)
                except ValueError:
                    raise FenDecodeError(
                        f"Invalid FEN piece letter {ch!r}: {fen!r}"
                    ) from None
                col += 1
            if col > 8:
                raise FenDecodeError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise FenDecodeError(f"Invalid FEN rank width: {fen!r}")

    _LOGGER.debug("Decoded FEN placement %s", placement)
    return grid


def placement_from_grid(grid: Grid) -> str:
    """Encode *grid* as a placement field, collapsing empty runs to digits."""
    rows: list[str] = []
    for cells in grid:
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def fen_from_grid(grid: Grid) -> str:
    """Full FEN string for *grid* with the fixed non-placement fields."""
    return f"{placement_from_grid(grid)} {FEN_SUFFIX}"
