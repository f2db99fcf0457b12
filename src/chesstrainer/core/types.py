"""Square type alias and coordinate helpers.

Squares are addressed by algebraic name ("e4") at every public boundary.
Internally the board is a grid of rows and columns:

    row 0 = rank 8 ... row 7 = rank 1
    col 0 = file a ... col 7 = file h
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1".."h8"
Coords: TypeAlias = tuple[int, int]  # (row, col), both 0–7

FILES = "abcdefgh"
RANKS = "12345678"


def parse_square(name: str) -> Coords:
    """Parse square name into (row, col), e.g. 'a8' → (0, 0), 'h1' → (7, 7)."""
    if (
        not isinstance(name, str)
        or len(name) != 2
        or name[0] not in FILES
        or name[1] not in RANKS
    ):
        raise ValueError(f"Invalid square name: {name!r}")
    return 8 - int(name[1]), ord(name[0]) - ord("a")


def square_name(row: int, col: int) -> Square:
    """Inverse of :func:`parse_square`, e.g. (4, 4) → 'e4'."""
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"Coordinates off the board: {(row, col)!r}")
    return chr(ord("a") + col) + str(8 - row)


def is_valid_square(name: object) -> bool:
    """Whether *name* is a well-formed, on-board square name."""
    return (
        isinstance(name, str)
        and len(name) == 2
        and name[0] in FILES
        and name[1] in RANKS
    )


# Board scan order: rank 8 → 1, file a → h within a rank.
SQUARES: tuple[Square, ...] = tuple(
    square_name(row, col) for row in range(8) for col in range(8)
)
