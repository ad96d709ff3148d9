"""Queries over the engine's legal-move list.

Moves are compared by their origin+destination string (``"e2e4"``), so a
promotion is matched by squares alone and disambiguated separately.
"""

from __future__ import annotations

from collections.abc import Sequence

import chess

from termchess.core.types import Square


def move_string(move: chess.Move) -> str:
    """Origin + destination square names, without promotion suffix."""
    return chess.square_name(move.from_square) + chess.square_name(move.to_square)


def moves_from(moves: Sequence[chess.Move], square: Square | None) -> list[chess.Move]:
    """Moves whose origin is *square*, in engine order."""
    if not square:
        return []
    return [m for m in moves if chess.square_name(m.from_square) == square]


def is_legal_destination(moves: Sequence[chess.Move], square: Square | None) -> bool:
    """Does any of *moves* land on *square*?"""
    if not square:
        return False
    return any(chess.square_name(m.to_square) == square for m in moves)


def find_move(
    moves: Sequence[chess.Move],
    from_sq: Square,
    to_sq: Square,
    promotion: chess.PieceType = chess.QUEEN,
) -> chess.Move | None:
    """Find the move *from_sq* → *to_sq*.

    Pawn pushes to the last rank come in four flavours; the one promoting to
    *promotion* wins, otherwise the first candidate in engine order.
    """
    key = from_sq + to_sq
    candidates = [m for m in moves if move_string(m) == key]
    if not candidates:
        return None
    for move in candidates:
        if move.promotion == promotion:
            return move
    return candidates[0]
