"""Square naming and grid coordinate helpers.

Grid layout follows FEN order: row 0 is rank 8, column 0 is file a.
A flipped board mirrors both axes, so row 0 becomes rank 1 and
column 0 becomes file h.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = str  # "a1" … "h8"

FILES = "abcdefgh"
RANKS = "12345678"

FIRST_ROW = 0
LAST_ROW = 7
FIRST_COL = 0
LAST_COL = 7


def is_valid_square(name: str) -> bool:
    """Check whether *name* is an algebraic square such as ``e4``."""
    return len(name) == 2 and name[0] in FILES and name[1] in RANKS


def square_at(row: int, col: int, flipped: bool = False) -> Square:
    """Grid cell → square name, e.g. (0, 0) → 'a8', or 'h1' when flipped."""
    if flipped:
        return FILES[LAST_COL - col] + RANKS[row]
    return FILES[col] + RANKS[LAST_ROW - row]

