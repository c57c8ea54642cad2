"""Guess checking and text helpers for the hangman game."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

from hangman.models import Drawing

INVALID_GUESS_MESSAGE = "Invalid guess. Make sure to only input *one* letter."
NO_WRONG_GUESSES = "No wrong guesses yet."
RESOURCE_FOLDER_NAME = "HangmanFiles"

_FILE_NAMES = {
    Drawing.BASE: "base",
    Drawing.POLE: "pole",
    Drawing.HANGER: "hanger",
    Drawing.MAN: "man",
}


def is_guess_illegal(guess: str) -> bool:
    """Return True unless the guess is exactly one ASCII letter."""
    first = guess[:1]
    return len(guess) > 1 or not (first.isascii() and first.isalpha())


def was_letter_guessed_before(
    wrong_letters: list[str], guess: str, found_letters: list[str]
) -> bool:
    """Return True if the guess's first letter was already tried."""
    first = guess[:1]
    if not first:
        return False
    return first in wrong_letters or first in found_letters


def validate_guess(
    guess: str, found_letters: list[str], wrong_letters: list[str], hidden_word: str
) -> bool:
    """Record a guess and return False only if it was a new, wrong letter.

    Repeated and illegal guesses are ignored and count as not wrong.
    """
    if was_letter_guessed_before(wrong_letters, guess, found_letters) or is_guess_illegal(guess):
        return True
    if guess in hidden_word:
        found_letters.append(guess[0])
        return True
    wrong_letters.append(guess[0])
    return False


def check_win(word: str, found_letters: list[str]) -> bool:
    """Return True when every character of the word has been found."""
    return all(char in found_letters for char in word)


def hide_word(word: str, found_letters: list[str]) -> str:
    """Show found letters and an underscore for the rest, each followed by a space."""
    return "".join(
        (char if char in found_letters else "_") + " " for char in word
    )


def format_wrong_letters(wrong_letters: list[str]) -> str:
    """List the wrong letters separated by commas."""
    if not wrong_letters:
        return NO_WRONG_GUESSES
    return ", ".join(wrong_letters)


def file_name_for_drawing(drawing: Drawing | int) -> str:
    """Return the base file name under which a drawing is stored."""
    return _FILE_NAMES.get(drawing, "unknown")


def resource_folder(base: str | PathLike[str] | None = None) -> Path:
    """Return the folder holding the game's files.

    Without a base, the folder of the running program is used.
    """
    if base is None:
        script = sys.argv[0] if sys.argv and sys.argv[0] else ""
        base = Path(script).resolve().parent if script else Path.cwd()
    return Path(base) / RESOURCE_FOLDER_NAME