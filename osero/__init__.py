"""Two-player terminal Othello."""

__version__ = "0.1.0"
