"""Game layer — the selection state machine and its messages.

Quick start::

    from termchess.game import Game, KeyMsg

    game = Game()
    for key in "e2e4":
        commands = game.update(KeyMsg(key))
    print(game.view())
"""

from termchess.game.controller import Game
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

__all__ = [
    # Messages
    "Command",
    "InputMsg",
    "KeyMsg",
    "MouseButton",
    "MouseMsg",
    "MoveMsg",
    "NotifyMsg",
    "QuitMsg",
    # State machine
    "Game",
]
