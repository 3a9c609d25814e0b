"""Rules engine, console and bots for the Dominion deck-building card game."""

__version__ = "0.1.0"
__all__ = ["cards", "effects", "game", "interface", "playdom", "player", "rngs", "seek"]