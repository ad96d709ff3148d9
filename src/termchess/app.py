"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from termchess.core.piece import GLYPH_SETS
from termchess.game.controller import Game
from termchess.game.messages import NotifyMsg
from termchess.settings import PROMOTION_PIECES, AppSettings
from termchess.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termchess",
        description="Play chess in the terminal. Click a piece, then its target, "
        "or type squares like e2 e4. Esc deselects, Ctrl+F flips, q quits.",
    )
    parser.add_argument("--fen", default=None, help="Starting position (default: standard)")
    parser.add_argument("--flip", action="store_true", help="Show the board from Black's side")
    parser.add_argument("--theme", choices=sorted(THEMES), default=None, help="Colour theme")
    parser.add_argument("--glyphs", choices=GLYPH_SETS, default=None, help="Piece glyphs")
    parser.add_argument(
        "--promotion", choices=PROMOTION_PIECES, default=None,
        help="Piece pawns promote to (default: q)",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file")
    parser.add_argument(
        "--print", action="store_true", dest="print_only",
        help="Print the board once and exit",
    )
    return parser


def configure_logging(log_file: str | None) -> None:
    """Log to *log_file*; the screen belongs to the board."""
    if log_file is None:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(name)s] %(message)s",
        filename=log_file,
    )


def make_game(settings: AppSettings) -> Game:
    return Game(
        settings.fen,
        flipped=settings.flipped,
        theme=BoardTheme.named(settings.theme),
        glyphs=settings.glyphs,
        promotion=settings.promotion_piece,
    )


def _log_notify(msg: NotifyMsg) -> None:
    _LOGGER.info(
        "%s%s played; %s to move%s",
        msg.from_sq,
        msg.to_sq,
        "white" if msg.turn else "black",
        " (checkmate)" if msg.checkmate else " (check)" if msg.check else "",
    )


def main(argv: list[str] | None = None) -> int:
    """Launch termchess."""
    args = build_parser().parse_args(argv)
    settings = AppSettings.from_env().with_args(args).validate()
    configure_logging(settings.log_file)

    game = make_game(settings)
    if args.print_only:
        sys.stdout.write(game.view())
        return 0

    from termchess.ui.terminal import TerminalApp

    app = TerminalApp(game)
    app.events.on_notify.append(_log_notify)
    app.run()
    _LOGGER.info("Final position: %s", game.position())
    return 0


if __name__ == "__main__":
    sys.exit(main())
