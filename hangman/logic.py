"""Rules of a hangman round: attempts, guesses, wins and losses."""

from __future__ import annotations

from enum import Enum
from os import PathLike
from pathlib import Path

from hangman.models import Difficulty, Drawing, GameData
from hangman.tools import (
    check_win,
    is_guess_illegal,
    resource_folder,
    validate_guess,
    was_letter_guessed_before,
)
from hangman.wordbank import WordBank

EASY_ATTEMPTS = 5
MEDIUM_ATTEMPTS = 4
HARD_ATTEMPTS = 3
WORD_LIST_ERROR_MESSAGE = "Couldn't retrieve word from word list."

_ATTEMPTS = {
    Difficulty.EASY: EASY_ATTEMPTS,
    Difficulty.MEDIUM: MEDIUM_ATTEMPTS,
    Difficulty.HARD: HARD_ATTEMPTS,
}

_DRAWING_FOR_ATTEMPTS = {
    5: Drawing.BASE,
    4: Drawing.BASE,
    3: Drawing.POLE,
    2: Drawing.POLE,
    1: Drawing.HANGER,
}


class GuessOutcome(Enum):
    """What a single guess did to the round."""

    CORRECT = "correct"
    WRONG = "wrong"
    REPEATED = "repeated"
    INVALID = "invalid"
    WON = "won"
    LOST = "lost"


class WordListError(Exception):
    """The word list for the chosen difficulty could not be used."""


def attempts_for(difficulty: Difficulty | int) -> int:
    """Return how many wrong guesses a difficulty allows."""
    return _ATTEMPTS[Difficulty(difficulty)]


class GameLogic:
    """Runs rounds of hangman on a shared GameData."""

    def __init__(
        self, data: GameData, words_folder: str | PathLike[str] | None = None
    ) -> None:
        self.data = data
        self.words_folder = (
            Path(words_folder) if words_folder is not None else resource_folder() / "Words"
        )

    def start(self, difficulty: Difficulty | int) -> None:
        """Begin a new round; raises WordListError if no word can be picked."""
        data = self.data
        data.difficulty = Difficulty(difficulty)
        data.wrong_letters = []
        data.found_letters = []
        data.attempts_left = attempts_for(data.difficulty)
        self.update_current_drawing()

        bank = WordBank(data.difficulty, self.words_folder)
        try:
            bank.read_words()
            index = bank.random_index()
        except (OSError, ValueError) as exc:
            data.current_word = ""
            data.current_hint = ""
            raise WordListError(WORD_LIST_ERROR_MESSAGE) from exc
        data.current_word = bank.word(index)
        data.current_hint = bank.hint(index)

    def make_guess(self, guess: str) -> GuessOutcome:
        """Apply one guess and report what it did."""
        data = self.data
        if was_letter_guessed_before(data.wrong_letters, guess, data.found_letters):
            outcome = GuessOutcome.REPEATED
        elif is_guess_illegal(guess):
            outcome = GuessOutcome.INVALID
        elif validate_guess(guess, data.found_letters, data.wrong_letters, data.current_word):
            outcome = GuessOutcome.CORRECT
        else:
            data.attempts_left -= 1
            if data.attempts_left <= 0:
                data.games_played += 1
                data.games_lost += 1
                return GuessOutcome.LOST
            return GuessOutcome.WRONG

        if check_win(data.current_word, data.found_letters):
            data.games_played += 1
            data.games_won += 1
            return GuessOutcome.WON
        return outcome

    def update_current_drawing(self) -> Drawing:
        """Set and return the stage matching the attempts left."""
        drawing = _DRAWING_FOR_ATTEMPTS.get(self.data.attempts_left, Drawing.MAN)
        self.data.current_drawing = drawing
        return drawing