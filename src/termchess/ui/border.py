"""Box-drawing rows around the grid and screen ↔ square geometry.

Each square is drawn as ``│ X ``, four columns wide, and squares are
separated by a border line, so a rank takes two terminal lines. The rank
label column occupies the first three columns of every line.
"""

from __future__ import annotations

from termchess.core.types import FILES, LAST_COL, LAST_ROW, Square, square_at

MARGIN_LEFT = 3
MARGIN_TOP = 1
CELL_WIDTH = 4
CELL_HEIGHT = 2

VERTICAL = "│"
HORIZONTAL = "─"


def _build(left: str, middle: str, right: str) -> str:
    segment = HORIZONTAL * (CELL_WIDTH - 1)
    return " " * MARGIN_LEFT + left + middle.join([segment] * 8) + right + "\n"


def top() -> str:
    return _build("┌", "┬", "┐")


def middle() -> str:
    return _build("├", "┼", "┤")


def bottom() -> str:
    return _build("└", "┴", "┘")


def bottom_labels(flipped: bool = False) -> str:
    """File letters under the grid, each centred below its column."""
    files = FILES[::-1] if flipped else FILES
    return " " * MARGIN_LEFT + "".join(f"  {f.upper()} " for f in files)


def cell(x: int, y: int, flipped: bool = False) -> Square | None:
    """Terminal cell (0-based column *x*, line *y*) → square under it.

    Returns ``None`` outside the grid's bounding box. A click on a
    horizontal border line counts toward the square above it, one on a
    vertical line toward the square to its right.
    """
    if x < MARGIN_LEFT or y < MARGIN_TOP:
        return None
    col = (x - MARGIN_LEFT) // CELL_WIDTH
    row = (y - MARGIN_TOP) // CELL_HEIGHT
    if col > LAST_COL or row > LAST_ROW:
        return None
    return square_at(row, col, flipped)
