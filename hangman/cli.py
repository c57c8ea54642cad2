"""Terminal front end for the hangman game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from hangman.bitmaps import (
    DEFAULT_SIZE,
    BitmapCreator,
    BitmapLoader,
    BitmapManager,
    BitmapSaver,
)
from hangman.logic import GameLogic, GuessOutcome, WordListError
from hangman.models import Difficulty, GameData
from hangman.tools import (
    INVALID_GUESS_MESSAGE,
    format_wrong_letters,
    hide_word,
    resource_folder,
)

DIFFICULTY_PROMPT = "Difficulty [e]asy, [m]edium, [h]ard, [q]uit: "
GUESS_PROMPT = "Guess a letter: "
UNKNOWN_DIFFICULTY = "Please choose easy, medium or hard."

_CHOICES = {
    "e": Difficulty.EASY,
    "easy": Difficulty.EASY,
    "1": Difficulty.EASY,
    "m": Difficulty.MEDIUM,
    "medium": Difficulty.MEDIUM,
    "2": Difficulty.MEDIUM,
    "h": Difficulty.HARD,
    "hard": Difficulty.HARD,
    "3": Difficulty.HARD,
}
_CANCEL = {"q", "quit"}


def prompt_difficulty(
    read: Callable[[str], str], write: Callable[[str], object]
) -> Difficulty | None:
    """Ask until a difficulty is chosen; return None if the player backs out."""
    while True:
        try:
            answer = read(DIFFICULTY_PROMPT).strip().lower()
        except EOFError:
            return None
        if answer in _CANCEL:
            return None
        if answer in _CHOICES:
            return _CHOICES[answer]
        write(UNKNOWN_DIFFICULTY)


def status_line(data: GameData) -> str:
    """Summarise the games played, won and lost."""
    return (
        f"Games played: {data.games_played} | "
        f"Wins: {data.games_won} | "
        f"Losses: {data.games_lost}"
    )


def _show_round(data: GameData, write: Callable[[str], object]) -> None:
    write(f"Word: {hide_word(data.current_word, data.found_letters).rstrip()}")
    write(f"Hint: {data.current_hint}")
    write(f"Attempts left: {data.attempts_left}")
    write(f"Wrong letters: {format_wrong_letters(data.wrong_letters)}")


def _play_round(
    logic: GameLogic,
    manager: BitmapManager,
    picture: str | None,
    read: Callable[[str], str],
    write: Callable[[str], object],
) -> None:
    data = logic.data

    def refresh_picture() -> None:
        drawing = logic.update_current_drawing()
        if picture:
            manager.show(drawing, DEFAULT_SIZE).save(picture)

    refresh_picture()
    while True:
        _show_round(data, write)
        try:
            guess = read(GUESS_PROMPT)
        except EOFError:
            write("")
            return
        outcome = logic.make_guess(guess)
        refresh_picture()
        if outcome is GuessOutcome.INVALID:
            write(INVALID_GUESS_MESSAGE)
        elif outcome is GuessOutcome.WON:
            write(f"You won! You found the word: {data.current_word}")
            return
        elif outcome is GuessOutcome.LOST:
            write(f"You lost. The hidden word was: {data.current_word}")
            return


def main(argv: list[str] | None = None) -> int:
    """Play one round of hangman in the terminal."""
    parser = argparse.ArgumentParser(prog="hangman", description="Play hangman.")
    parser.add_argument(
        "--base-dir",
        help="folder holding the HangmanFiles directory (default: program folder)",
    )
    parser.add_argument(
        "--picture",
        help="image file to keep updated with the current gallows stage",
    )
    args = parser.parse_args(argv)

    folder = resource_folder(args.base_dir)
    drawings = folder / "Drawings"
    data = GameData()
    logic = GameLogic(data, folder / "Words")

    with BitmapManager(
        BitmapLoader(drawings), BitmapCreator(), BitmapSaver(drawings)
    ) as manager:
        difficulty = prompt_difficulty(input, print)
        if difficulty is None:
            return 0
        try:
            logic.start(difficulty)
        except WordListError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(status_line(data))
        _play_round(logic, manager, args.picture, input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())