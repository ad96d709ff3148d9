"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os

import pytest

from termchess.game.controller import Game
from termchess.ui.styles.theme import BoardTheme


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's TERMCHESS_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("TERMCHESS_"):
            monkeypatch.delenv(name)


@pytest.fixture
def game() -> Game:
    """A fresh game from the starting position, rendered without colour."""
    return Game(theme=BoardTheme.plain())
