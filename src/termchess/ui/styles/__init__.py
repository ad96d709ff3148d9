"""Board colour themes."""

from termchess.ui.styles.theme import THEMES, BoardTheme

__all__ = ["THEMES", "BoardTheme"]
