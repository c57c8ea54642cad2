"""Word lists with hints, one file per difficulty."""

from __future__ import annotations

import random
from itertools import islice
from os import PathLike
from pathlib import Path

from hangman.models import Difficulty

MAX_ENTRIES = 50
NO_HINT = "No hint provided :("

_FILE_NAMES = {
    Difficulty.EASY: "Easy.txt",
    Difficulty.MEDIUM: "Medium.txt",
    Difficulty.HARD: "Hard.txt",
}


def _parse_line(line: str) -> tuple[str, str]:
    head, separator, hint = line.rpartition(":")
    word = head.rpartition(":")[2] if separator else ""
    return word, hint or NO_HINT


class WordBank:
    """The words and hints of one difficulty's list.

    Each line of the list reads ``word:hint``; only the first
    ``MAX_ENTRIES`` lines are used.
    """

    def __init__(self, difficulty: Difficulty | int, folder: str | PathLike[str]) -> None:
        self.difficulty = Difficulty(difficulty)
        self.path = Path(folder) / _FILE_NAMES[self.difficulty]
        self._entries: list[tuple[str, str]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def read_words(self) -> int:
        """Load the list from disk and return the number of entries.

        Raises OSError if the file cannot be read.
        """
        with self.path.open(encoding="utf-8") as handle:
            self._entries = [
                _parse_line(line.removesuffix("\n"))
                for line in islice(handle, MAX_ENTRIES)
            ]
        return len(self._entries)

    def random_index(self) -> int:
        """Return a random valid index; raises ValueError for an empty list."""
        if not self._entries:
            raise ValueError(f"no words loaded from {self.path}")
        return random.randrange(len(self._entries))

    def word(self, index: int) -> str:
        """Return the word at index, or an empty string if out of range."""
        if 0 <= index < len(self._entries):
            return self._entries[index][0]
        return ""

    def hint(self, index: int) -> str:
        """Return the hint at index, or an empty string if out of range."""
        if 0 <= index < len(self._entries):
            return self._entries[index][1]
        return ""