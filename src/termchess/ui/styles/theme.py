"""Terminal colour themes for the board."""

from __future__ import annotations

from dataclasses import dataclass

RESET = "\033[0m"

# Emphasis roles attached to rendered text.
SELECTED = "selected"
DANGER = "danger"
DESTINATION = "destination"
FAINT = "faint"


@dataclass(frozen=True)
class BoardTheme:
    """SGR escape prefixes for each kind of emphasis.

    An empty prefix leaves the text untouched.
    """

    selected: str  # the selected piece
    danger: str  # king in check
    destination: str  # legal targets of the selected piece
    faint: str  # rank numbers and file letters

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            selected="\033[36m",  # cyan
            danger="\033[31m",  # red
            destination="\033[35m",  # magenta
            faint="\033[2m",
        )

    @classmethod
    def plain(cls) -> BoardTheme:
        """No escapes at all, for pipes and dumb terminals."""
        return cls(selected="", danger="", destination="", faint="")

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        try:
            return THEMES[name]()
        except KeyError:
            raise ValueError(f"Unknown theme: {name!r}") from None

    def prefix(self, role: str) -> str:
        """Escape prefix for *role*; empty for plain text."""
        return getattr(self, role) if role else ""

    def paint(self, text: str, prefix: str) -> str:
        if not prefix:
            return text
        return f"{prefix}{text}{RESET}"


THEMES = {
    "color": BoardTheme.default,
    "plain": BoardTheme.plain,
}
