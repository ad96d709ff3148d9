"""termchess: play chess in the terminal with mouse or keyboard."""

__version__ = "0.1.0"
