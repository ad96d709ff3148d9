"""Piece markers as they appear in a FEN grid, and their display glyphs."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY = " "

_UNICODE: dict[str, str] = {
    "P": "♟",
    "N": "♞",
    "B": "♝",
    "R": "♜",
    "Q": "♛",
    "K": "♚",
    "p": "♙",
    "n": "♘",
    "b": "♗",
    "r": "♖",
    "q": "♕",
    "k": "♔",
}

GLYPH_SETS = ("unicode", "ascii")


@dataclass(frozen=True, slots=True)
class Piece:
    """A single grid cell: a FEN piece letter or :data:`EMPTY`."""

    char: str = EMPTY

    @classmethod
    def from_char(cls, char: str) -> Piece:
        if char != EMPTY and char not in _UNICODE:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(char)

    @property
    def is_empty(self) -> bool:
        return self.char == EMPTY

    @property
    def is_white(self) -> bool:
        return self.char.isupper()

    @property
    def is_black(self) -> bool:
        return self.char.islower()

    @property
    def is_king(self) -> bool:
        return self.char in ("K", "k")

    def display(self, glyphs: str = "unicode") -> str:
        """Single-character glyph for *glyphs* set ("unicode" or "ascii").

        The unicode set draws white pieces with the filled shapes, which read
        better on a dark terminal background.
        """
        if self.is_empty:
            return EMPTY
        if glyphs == "ascii":
            return self.char
        return _UNICODE[self.char]


def to_pieces(row: str) -> list[Piece]:
    """Expand one grid row string (8 chars) into pieces."""
    return [Piece.from_char(ch) for ch in row]
