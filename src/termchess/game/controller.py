"""Game — turns clicks and key presses into moves on a python-chess board.

Selection works in two steps: pick a square, then pick one of its legal
destinations. Picking anything else simply selects that square instead, so
switching pieces needs no explicit deselect.

All state lives on the :class:`Game` instance. :meth:`Game.update` handles
one message to completion and returns the commands the runtime should
deliver afterwards, so a :class:`NotifyMsg` is only ever observed once the
board it describes is in place.
"""

from __future__ import annotations

import logging
from typing import Any

import chess

from termchess.core.moves import find_move, moves_from
from termchess.core.notation import STARTING_FEN, fen_grid, is_valid_fen
from termchess.core.types import FILES, RANKS, Square, is_valid_square
from termchess.game.messages import (
    Command,
    InputMsg,
    KeyMsg,
    MouseButton,
    MouseMsg,
    MoveMsg,
    NotifyMsg,
    QuitMsg,
)
from termchess.ui import border
from termchess.ui.board_view import Span, board_spans, render_board
from termchess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

QUIT_KEYS = ("ctrl+c", "q")
FLIP_KEY = "ctrl+f"
DESELECT_KEY = "esc"


class Game:
    """Board, legal moves and the user's current selection.

    The legal-move list is regenerated after every move; ``piece_moves`` is
    the part of it starting on the selected square.
    """

    __slots__ = (
        "_board",
        "_moves",
        "_piece_moves",
        "_selected",
        "_buffer",
        "_flipped",
        "theme",
        "glyphs",
        "promotion",
    )

    def __init__(
        self,
        fen: str | None = None,
        *,
        flipped: bool = False,
        theme: BoardTheme | None = None,
        glyphs: str = "unicode",
        promotion: chess.PieceType = chess.QUEEN,
    ) -> None:
        if fen is None:
            fen = STARTING_FEN
        elif not is_valid_fen(fen):
            _LOGGER.debug("Invalid FEN %r, using the starting position", fen)
            fen = STARTING_FEN

        self._board = chess.Board(fen)
        self._moves: list[chess.Move] = list(self._board.legal_moves)
        self._piece_moves: list[chess.Move] = []
        self._selected: Square | None = None
        self._buffer: str | None = None
        self._flipped = flipped
        self.theme = theme or BoardTheme.default()
        self.glyphs = glyphs
        self.promotion = promotion

    @classmethod
    def with_position(cls, fen: str, **kwargs: Any) -> Game:
        """New game from *fen*; falls back to the starting position."""
        return cls(fen, **kwargs)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def buffer(self) -> str | None:
        """File letter waiting for its rank digit."""
        return self._buffer

    @property
    def legal_moves(self) -> list[chess.Move]:
        return list(self._moves)

    @property
    def piece_moves(self) -> list[chess.Move]:
        return list(self._piece_moves)

    @property
    def flipped(self) -> bool:
        return self._flipped

    @property
    def white_to_move(self) -> bool:
        return self._board.turn == chess.WHITE

    @property
    def in_check(self) -> bool:
        return self._board.is_check()

    @property
    def is_checkmate(self) -> bool:
        return self._board.is_check() and not self._moves

    def set_flipped(self, flipped: bool) -> None:
        """Show the board from Black's side when *flipped*."""
        self._flipped = flipped

    def position(self) -> str:
        """Current position as FEN."""
        return self._board.fen()

    # ── Rendering ────────────────────────────────────────────────────────

    def view(self) -> str:
        """Render the board with the current selection and its targets."""
        return render_board(
            fen_grid(self._board.fen()),
            selected=self._selected,
            piece_moves=self._piece_moves,
            white_to_move=self.white_to_move,
            in_check=self._board.is_check(),
            flipped=self._flipped,
            theme=self.theme,
            glyphs=self.glyphs,
        )

    def view_lines(self) -> list[list[Span]]:
        """The same frame as :meth:`view`, as lines of (text, role) spans."""
        return board_spans(
            fen_grid(self._board.fen()),
            selected=self._selected,
            piece_moves=self._piece_moves,
            white_to_move=self.white_to_move,
            in_check=self._board.is_check(),
            flipped=self._flipped,
            glyphs=self.glyphs,
        )

    # ── Message handling ─────────────────────────────────────────────────

    def update(self, msg: InputMsg) -> list[Command]:
        """Handle one input message; return commands for the runtime."""
        if isinstance(msg, MouseMsg):
            if msg.button != MouseButton.LEFT or not msg.pressed:
                return []
            return self.select(border.cell(msg.x, msg.y, self._flipped))

        if isinstance(msg, KeyMsg):
            return self._on_key(msg.key)

        if isinstance(msg, MoveMsg):
            self._selected = msg.from_sq
            self._piece_moves = moves_from(self._moves, msg.from_sq)
            return self.select(msg.to_sq)

        return []

    def _on_key(self, key: str) -> list[Command]:
        if key in QUIT_KEYS:
            return [QuitMsg()]
        if key == FLIP_KEY:
            self._flipped = not self._flipped
            return []
        if key == DESELECT_KEY:
            return self.deselect()
        if len(key) == 1 and key in FILES:
            self._buffer = key
            return []
        if len(key) == 1 and key in RANKS:
            if self._buffer is None:
                _LOGGER.debug("Rank %s without a file, ignored", key)
                return []
            square = self._buffer + key
            self._buffer = None
            return self.select(square)
        return []

    # ── Selection ────────────────────────────────────────────────────────

    def deselect(self) -> list[Command]:
        self._selected = None
        self._piece_moves = []
        self._buffer = None
        return []

    def select(self, square: Square | None) -> list[Command]:
        """Select *square*, or play a move if it completes one.

        ``None`` (e.g. a click beside the board) or anything that is not a
        square name clears the selection.
        """
        if square is None or not is_valid_square(square):
            return self.deselect()

        if self._selected is not None:
            from_sq, to_sq = self._selected, square
            move = find_move(self._piece_moves, from_sq, to_sq, self.promotion)
            if move is not None:
                return [self._play(move, from_sq, to_sq)]

        # Not a legal target, so the clicked square becomes the selection.
        self._selected = square
        self._piece_moves = moves_from(self._moves, square)
        return []

    def _play(self, move: chess.Move, from_sq: Square, to_sq: Square) -> NotifyMsg:
        self._board.push(move)
        self._moves = list(self._board.legal_moves)
        check = self._board.is_check()
        checkmate = check and not self._moves
        _LOGGER.info("Played %s (check=%s, checkmate=%s)", move.uci(), check, checkmate)

        self.deselect()
        return NotifyMsg(
            from_sq=from_sq,
            to_sq=to_sq,
            turn=self.white_to_move,
            check=check,
            checkmate=checkmate,
        )
