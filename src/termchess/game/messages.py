"""Messages flowing into and out of the game.

Inputs (:class:`KeyMsg`, :class:`MouseMsg`, :class:`MoveMsg`) are handed to
:meth:`termchess.game.controller.Game.update`; outputs (:class:`NotifyMsg`,
:class:`QuitMsg`) are returned from it for the runtime to deliver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TypeAlias


class MouseButton(IntEnum):
    """Mouse buttons as reported by the terminal."""

    NONE = 0
    LEFT = auto()
    MIDDLE = auto()
    RIGHT = auto()
    WHEEL_UP = auto()
    WHEEL_DOWN = auto()


# ── Inputs ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class KeyMsg:
    """A key press, named like ``"e"``, ``"1"``, ``"esc"`` or ``"ctrl+f"``."""

    key: str


@dataclass(frozen=True, slots=True)
class MouseMsg:
    """A mouse event at terminal cell (*x*, *y*), both 0-based."""

    x: int
    y: int
    button: MouseButton = MouseButton.LEFT
    pressed: bool = True


@dataclass(frozen=True, slots=True)
class MoveMsg:
    """Play *from_sq* → *to_sq* from outside the board, e.g. an engine reply."""

    from_sq: str
    to_sq: str


# ── Outputs ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NotifyMsg:
    """Emitted after a move has been played.

    *turn* is True when White is to move after the move; *check* and
    *checkmate* describe the side to move.
    """

    from_sq: str
    to_sq: str
    turn: bool
    check: bool
    checkmate: bool


@dataclass(frozen=True, slots=True)
class QuitMsg:
    """The user asked to leave."""


InputMsg: TypeAlias = KeyMsg | MouseMsg | MoveMsg
Command: TypeAlias = NotifyMsg | QuitMsg
