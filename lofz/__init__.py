"""Lights Out puzzle against a Flipper opponent, played as text."""

__version__ = "0.1.0"
__all__ = ["board", "cli", "game", "layout", "leaderboard", "render", "texts"]