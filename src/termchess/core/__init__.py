"""Core helpers — square addressing, move queries, FEN grids.

Rules and move generation come from python-chess; nothing here knows how
pieces move.

Quick start::

    import chess
    from termchess.core import moves_from, square_at

    board = chess.Board()
    moves_from(list(board.legal_moves), square_at(6, 4))  # e2 pushes
"""

from termchess.core.moves import find_move, is_legal_destination, move_string, moves_from
from termchess.core.notation import STARTING_FEN, fen_grid, is_valid_fen
from termchess.core.piece import Piece, to_pieces
from termchess.core.types import FILES, RANKS, Square, is_valid_square, square_at

__all__ = [
    # Types / helpers
    "FILES",
    "RANKS",
    "Square",
    "is_valid_square",
    "square_at",
    # Moves
    "find_move",
    "is_legal_destination",
    "move_string",
    "moves_from",
    # Pieces / notation
    "Piece",
    "STARTING_FEN",
    "fen_grid",
    "is_valid_fen",
    "to_pieces",
]
