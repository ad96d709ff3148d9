"""User-configurable settings, resolved from defaults, environment and CLI."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

import chess

from termchess.core.piece import GLYPH_SETS
from termchess.ui.styles.theme import THEMES

ENV_PREFIX = "TERMCHESS_"
PROMOTION_PIECES = ("q", "r", "b", "n")

_TRUE = ("1", "true", "yes", "on")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    fen: str | None = None
    promotion: str = "q"

    # Board
    flipped: bool = False
    theme: str = "color"
    glyphs: str = "unicode"

    # Logging
    log_file: str | None = None

    def validate(self) -> AppSettings:
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme: {self.theme!r}")
        if self.glyphs not in GLYPH_SETS:
            raise ValueError(f"Unknown glyph set: {self.glyphs!r}")
        if self.promotion not in PROMOTION_PIECES:
            raise ValueError(f"Invalid promotion piece: {self.promotion!r}")
        return self

    @property
    def promotion_piece(self) -> chess.PieceType:
        return chess.PIECE_SYMBOLS.index(self.promotion)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``TERMCHESS_*`` variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        for name in ("fen", "log_file"):
            value = env.get(ENV_PREFIX + name.upper())
            if value:
                setattr(settings, name, value)
        for name in ("theme", "glyphs", "promotion"):
            value = env.get(ENV_PREFIX + name.upper())
            if value:
                setattr(settings, name, value.lower())
        flipped = env.get(ENV_PREFIX + "FLIPPED")
        if flipped:
            settings.flipped = flipped.lower() in _TRUE
        return settings

    def with_args(self, args: argparse.Namespace) -> AppSettings:
        """Copy with every CLI flag the user actually passed applied."""
        changes = {
            name: getattr(args, name)
            for name in ("fen", "theme", "glyphs", "promotion", "log_file")
            if getattr(args, name, None) is not None
        }
        if getattr(args, "flip", False):
            changes["flipped"] = True
        return replace(self, **changes)
