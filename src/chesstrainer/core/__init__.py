"""Core domain layer — board engine with zero external dependencies.

Quick start::

    from chesstrainer.core import Board

    board = Board("N7/8/8/3P4/2P2P2/4P3/8/7k w - - 0 1")
    board.get_legal_moves("a8")   # ['c7', 'b6']
    board.move("a8", "b6")        # True
"""

from chesstrainer.core.board import Board
from chesstrainer.core.enums import Color, PieceType
from chesstrainer.core.notation import (
    FEN_SUFFIX,
    STARTING_FEN,
    FenDecodeError,
)
from chesstrainer.core.piece import Piece
from chesstrainer.core.rules import MoveRules
from chesstrainer.core.types import (
    SQUARES,
    Coords,
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Coords",
    "SQUARES",
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveRules",
    "Piece",
    # Notation
    "FEN_SUFFIX",
    "STARTING_FEN",
    "FenDecodeError",
]
