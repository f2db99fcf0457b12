"""Notation package: FEN placement parsing and serialization."""

from chesstrainer.core.notation.fen import (
    FEN_SUFFIX,
    STARTING_FEN,
    FenDecodeError,
    fen_from_grid,
    grid_from_fen,
    placement_from_grid,
)

__all__ = [
    "FEN_SUFFIX",
    "STARTING_FEN",
    "FenDecodeError",
    "fen_from_grid",
    "grid_from_fen",
    "placement_from_grid",
]
