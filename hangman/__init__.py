"""A terminal hangman game with difficulty levels, word lists with hints and gallows pictures."""

__version__ = "1.0.0"

__all__ = ["bitmaps", "cli", "logic", "models", "painter", "tools", "wordbank"]