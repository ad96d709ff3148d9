"""FEN validation and grid expansion."""

from __future__ import annotations

import chess

from termchess.core.piece import EMPTY

STARTING_FEN = chess.STARTING_FEN

# Positions the engine parses but cannot play a game from.
_UNPLAYABLE = chess.STATUS_NO_WHITE_KING | chess.STATUS_NO_BLACK_KING | chess.STATUS_TOO_MANY_KINGS


def is_valid_fen(fen: str) -> bool:
    """True when python-chess parses *fen* and each side has one king.

    Loose castling rights or a stray en-passant square are accepted.
    """
    try:
        board = chess.Board(fen)
    except ValueError:
        return False
    return not board.status() & _UNPLAYABLE


def fen_grid(fen: str) -> list[str]:
    """Expand the placement field of *fen* into 8 rows of 8 characters.

    Row 0 is rank 8; empty squares are :data:`~termchess.core.piece.EMPTY`.
    """
    placement = fen.split()[0]
    rows: list[str] = []
    for rank_text in placement.split("/"):
        row = ""
        for ch in rank_text:
            row += EMPTY * int(ch) if ch.isdigit() else ch
        if len(row) != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
        rows.append(row)
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    return rows
