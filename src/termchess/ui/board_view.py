"""Text rendering of the board, selection and legal targets."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

import chess

from termchess.core.moves import is_legal_destination
from termchess.core.piece import to_pieces
from termchess.core.types import FIRST_ROW, LAST_ROW, Square, square_at
from termchess.ui import border
from termchess.ui.styles.theme import DANGER, DESTINATION, FAINT, SELECTED, BoardTheme

DESTINATION_MARK = "."

# (text, emphasis role); an empty role is plain text.
Span: TypeAlias = tuple[str, str]


def board_spans(
    grid: Sequence[str],
    *,
    selected: Square | None = None,
    piece_moves: Sequence[chess.Move] = (),
    white_to_move: bool = True,
    in_check: bool = False,
    flipped: bool = False,
    glyphs: str = "unicode",
) -> list[list[Span]]:
    """Lay out *grid* (8 FEN rows, rank 8 first) as lines of styled spans.

    The selected square is highlighted, the king of the side to move is
    marked when in check, and every square the selected piece may move to
    is marked: a dot on an empty square, the piece itself when it can be
    captured.
    """
    lines: list[list[Span]] = [[(border.top().rstrip("\n"), "")]]

    for r in range(FIRST_ROW, LAST_ROW + 1):
        if flipped:
            row = to_pieces(grid[LAST_ROW - r])[::-1]
            rank = r + 1
        else:
            row = to_pieces(grid[r])
            rank = LAST_ROW - r + 1

        line: list[Span] = [(f" {rank} ", FAINT), (border.VERTICAL, "")]
        for c, piece in enumerate(row):
            square = square_at(r, c, flipped)
            display = piece.display(glyphs)
            role = ""

            if square == selected:
                role = SELECTED
            elif in_check and piece.is_king and (
                piece.is_white if white_to_move else piece.is_black
            ):
                role = DANGER

            # A selected square is never its own destination.
            if is_legal_destination(piece_moves, square):
                if piece.is_empty:
                    display = DESTINATION_MARK
                role = DESTINATION

            line += [(" ", ""), (display, role), (f" {border.VERTICAL}", "")]
        lines.append(line)

        if r != LAST_ROW:
            lines.append([(border.middle().rstrip("\n"), "")])

    lines.append([(border.bottom().rstrip("\n"), "")])
    lines.append([(border.bottom_labels(flipped), FAINT)])
    return lines


def render_board(
    grid: Sequence[str],
    *,
    selected: Square | None = None,
    piece_moves: Sequence[chess.Move] = (),
    white_to_move: bool = True,
    in_check: bool = False,
    flipped: bool = False,
    theme: BoardTheme | None = None,
    glyphs: str = "unicode",
) -> str:
    """Draw *grid* as a bordered board, emphasis as ANSI escapes.

    With the white pawn on e2 selected::

           ┌───┬───┬───┬───┬───┬───┬───┬───┐
         8 │ ♖ │ ♘ │ ♗ │ ♕ │ ♔ │ ♗ │ ♘ │ ♖ │
           ├───┼───┼───┼───┼───┼───┼───┼───┤
           ...
         4 │   │   │   │   │ . │   │   │   │
           ├───┼───┼───┼───┼───┼───┼───┼───┤
         3 │   │   │   │   │ . │   │   │   │
           ├───┼───┼───┼───┼───┼───┼───┼───┤
         2 │ ♟ │ ♟ │ ♟ │ ♟ │ ♟ │ ♟ │ ♟ │ ♟ │
           ├───┼───┼───┼───┼───┼───┼───┼───┤
         1 │ ♜ │ ♞ │ ♝ │ ♛ │ ♚ │ ♝ │ ♞ │ ♜ │
           └───┴───┴───┴───┴───┴───┴───┴───┘
             A   B   C   D   E   F   G   H
    """
    theme = theme or BoardTheme.default()
    lines = board_spans(
        grid,
        selected=selected,
        piece_moves=piece_moves,
        white_to_move=white_to_move,
        in_check=in_check,
        flipped=flipped,
        glyphs=glyphs,
    )
    return "".join(
        "".join(theme.paint(text, theme.prefix(role)) for text, role in line) + "\n"
        for line in lines
    )
