"""Curses runtime: key codes and mouse clicks in, full-frame redraws out.

The loop feeds each pending message to :meth:`Game.update`, delivers the
returned commands, redraws, then waits for the next key or click. Only one
message is in flight at a time.
"""

from __future__ import annotations

import curses
import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

from termchess.game.controller import Game
from termchess.game.messages import (
    InputMsg,
    KeyMsg,
    MouseButton,
    MouseMsg,
    NotifyMsg,
    QuitMsg,
)
from termchess.ui.styles.theme import DANGER, DESTINATION, FAINT, SELECTED, BoardTheme

_LOGGER = logging.getLogger(__name__)

# Colour pair numbers
PAIR_SELECTED = 1
PAIR_DANGER = 2
PAIR_DESTINATION = 3

# Poll interval so messages queued with send() are picked up while idle.
POLL_MS = 100

_CONTROL_KEYS = {
    3: "ctrl+c",
    6: "ctrl+f",
    27: "esc",
    10: "enter",
    13: "enter",
    127: "backspace",
    curses.KEY_ENTER: "enter",
    curses.KEY_BACKSPACE: "backspace",
}

_PRESSES = (
    (curses.BUTTON1_PRESSED, MouseButton.LEFT),
    (curses.BUTTON2_PRESSED, MouseButton.MIDDLE),
    (curses.BUTTON3_PRESSED, MouseButton.RIGHT),
    (curses.BUTTON4_PRESSED, MouseButton.WHEEL_UP),
)


def init_colors() -> None:
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_SELECTED, curses.COLOR_CYAN, -1)
    curses.init_pair(PAIR_DANGER, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_DESTINATION, curses.COLOR_MAGENTA, -1)


def role_attrs(theme: BoardTheme) -> dict[str, int]:
    """Curses attribute per emphasis role; roles the theme leaves plain get 0."""
    attrs = {
        SELECTED: curses.color_pair(PAIR_SELECTED) | curses.A_BOLD,
        DANGER: curses.color_pair(PAIR_DANGER) | curses.A_BOLD,
        DESTINATION: curses.color_pair(PAIR_DESTINATION) | curses.A_BOLD,
        FAINT: curses.A_DIM,
    }
    return {role: attr if theme.prefix(role) else 0 for role, attr in attrs.items()}


def safe_addstr(win, y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def decode_key(ch: int) -> KeyMsg | None:
    """Map a ``getch`` code to a key message; None for keys the game ignores."""
    key = _CONTROL_KEYS.get(ch)
    if key is not None:
        return KeyMsg(key)
    if 32 <= ch <= 126:
        return KeyMsg(chr(ch).lower())
    return None


def decode_mouse(bstate: int, x: int, y: int) -> MouseMsg:
    """Turn a ``getmouse`` report into a message; *x*/*y* are 0-based cells."""
    for mask, button in _PRESSES:
        if bstate & mask:
            return MouseMsg(x, y, button, pressed=True)
    if bstate & curses.BUTTON1_RELEASED:
        return MouseMsg(x, y, MouseButton.LEFT, pressed=False)
    return MouseMsg(x, y, MouseButton.NONE, pressed=False)


def status_line(game: Game) -> str:
    """One-line summary under the board."""
    side = "White" if game.white_to_move else "Black"
    if game.is_checkmate:
        winner = "Black" if game.white_to_move else "White"
        return f"Checkmate, {winner} wins."
    if not game.legal_moves:
        return "Stalemate."
    text = f"{side} to move"
    if game.in_check:
        text += " (check)"
    if game.buffer:
        text += f"  [{game.buffer}_]"
    return text


@dataclass
class TerminalEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_notify: list[Callable[[NotifyMsg], None]] = field(default_factory=list)


class TerminalApp:
    """Drives a :class:`Game` on a real terminal through curses."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.events = TerminalEvents()
        self._pending: deque[InputMsg] = deque()
        # Filled in once colours are initialised; plain until then.
        self._attrs: dict[str, int] = {}

    def send(self, msg: InputMsg) -> None:
        """Queue a message, e.g. a :class:`MoveMsg` from an opponent."""
        self._pending.append(msg)

    def dispatch(self, msg: InputMsg) -> bool:
        """Handle one message. Returns False once the user quits."""
        for cmd in self.game.update(msg):
            if isinstance(cmd, QuitMsg):
                return False
            if isinstance(cmd, NotifyMsg):
                for cb in self.events.on_notify:
                    cb(cmd)
        return True

    def draw(self, stdscr) -> None:
        stdscr.erase()
        lines = self.game.view_lines()
        for y, line in enumerate(lines):
            x = 0
            for text, role in line:
                safe_addstr(stdscr, y, x, text, self._attrs.get(role, 0))
                x += len(text)
        safe_addstr(stdscr, len(lines) + 1, 0, status_line(self.game))
        stdscr.refresh()

    def event(self, ch: int) -> InputMsg | None:
        """Message for a ``getch`` code; None for resizes and ignored keys."""
        if ch == curses.KEY_RESIZE:
            return None
        if ch == curses.KEY_MOUSE:
            try:
                _, x, y, _, bstate = curses.getmouse()
            except curses.error:
                return None
            return decode_mouse(bstate, x, y)
        return decode_key(ch)

    def run(self) -> None:
        """Block until the user quits; curses restores the terminal."""
        curses.wrapper(self._main)

    def _main(self, stdscr) -> None:
        curses.curs_set(0)
        curses.raw()
        curses.set_escdelay(25)
        curses.mouseinterval(0)
        curses.mousemask(curses.BUTTON1_PRESSED)
        stdscr.keypad(True)
        stdscr.timeout(POLL_MS)
        if curses.has_colors():
            init_colors()
            self._attrs = role_attrs(self.game.theme)
        else:
            _LOGGER.debug("Terminal has no colours, drawing plain")
        self._loop(stdscr)

    def _loop(self, stdscr) -> None:
        while True:
            while self._pending:
                if not self.dispatch(self._pending.popleft()):
                    return
            self.draw(stdscr)
            ch = stdscr.getch()
            while ch == -1 and not self._pending:
                ch = stdscr.getch()
            if ch != -1:
                msg = self.event(ch)
                if msg is not None:
                    self._pending.append(msg)
