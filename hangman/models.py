"""Game state shared by the hangman modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Difficulty(IntEnum):
    """How hard a round is; picks the word list and the number of attempts."""

    EASY = 0
    MEDIUM = 1
    HARD = 2


class Drawing(IntEnum):
    """Stages of the gallows picture; each stage includes the ones before it."""

    BASE = 0
    POLE = 1
    HANGER = 2
    MAN = 3


@dataclass
class GameData:
    """Everything a running game keeps between guesses and rounds."""

    difficulty: Difficulty = Difficulty.EASY
    attempts_left: int = 0
    current_word: str = ""
    current_hint: str = ""
    found_letters: list[str] = field(default_factory=list)
    wrong_letters: list[str] = field(default_factory=list)
    current_drawing: Drawing = Drawing.BASE
    games_played: int = 0
    games_won: int = 0
    games_lost: int = 0