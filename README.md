# hangman

A hangman game for the terminal. You pick a difficulty, a word is drawn at
random from that difficulty's word list, and you guess it one letter at a
time before the gallows is complete.

## Installing

```
pip install .
```

## Playing

```
hangman [--base-dir DIR] [--picture FILE]
```

- `--base-dir DIR` — the folder that holds the `HangmanFiles` directory.
  Without it, the folder of the running program is used.
- `--picture FILE` — an image file that is rewritten after every guess with
  the current gallows stage (300×300 pixels).

First choose a difficulty by typing `e`, `easy` or `1`; `m`, `medium` or
`2`; `h`, `hard` or `3`. Typing `q` or `quit`, or ending the input, leaves
the game.

| Difficulty | Wrong guesses allowed |
|------------|-----------------------|
| Easy       | 5                     |
| Medium     | 4                     |
| Hard       | 3                     |

Before each guess the game shows the hidden word with found letters filled
in (`_ a _ _ _ a _`), the hint, the attempts left and the wrong letters
guessed so far. A guess must be a single ASCII letter; anything else is
rejected with a message and costs nothing. Guessing a letter you have
already tried also costs nothing. Letters are compared case-sensitively.
The round is won when every letter of the word is found and lost when the
attempts run out. Ending the input during a round stops it.

If the word list cannot be read or is empty, the game prints
"Couldn't retrieve word from word list." and exits with status 1.

## Word lists

Words are read from `HangmanFiles/Words/Easy.txt`, `Medium.txt` and
`Hard.txt`. Only the first 50 lines of a list are used. Each line holds one
entry:

```
elephant:A large grey animal with a trunk
python:A snake, or a programming language
tiger:
```

The text after the last colon is the hint, and the text between that colon
and any colon before it is the word. An entry with nothing after the colon
gets the hint "No hint provided :(". A line without a colon has an empty
word, so every line should contain one.

## Drawings

The gallows has four stages — `base`, `pole`, `hanger` and `man` — shown
according to the attempts left (5 or 4: base, 3 or 2: pole, 1: hanger,
0: man). Each stage is kept as a `.bmp` file in `HangmanFiles/Drawings`.
Stages with no file there, or whose file cannot be read, are painted at
300×300 pixels; when the game ends, every stage not yet on disk is saved
there. You can replace the files with your own pictures of the same names.

## What it does not do

- There is no graphical window: the picture is only shown through the file
  given with `--picture`.
- Each run plays a single round. The games played, won and lost are counted
  in memory only and are not saved, so the status line printed at the start
  of a round always reads from zero.

## Using it as a library

- `hangman.models` — the `Difficulty` and `Drawing` enums and the
  `GameData` state.
- `hangman.tools` — `validate_guess`, `is_guess_illegal`,
  `was_letter_guessed_before`, `check_win`, `hide_word`,
  `format_wrong_letters`, `file_name_for_drawing` and `resource_folder`.
- `hangman.wordbank.WordBank` — `read_words()` loads a list (raising
  `OSError` if it cannot), `random_index()`, `word(index)` and
  `hint(index)`.
- `hangman.logic` — `GameLogic` with `start(difficulty)` (raising
  `WordListError`), `make_guess(guess)` returning a `GuessOutcome`, and
  `update_current_drawing()`; `attempts_for(difficulty)`.
- `hangman.painter` — `HangmanPainter` paints a stage onto a Pillow
  `ImageDraw` within a `Rect`.
- `hangman.bitmaps` — `BitmapLoader`, `BitmapCreator`, `BitmapSaver` and
  `BitmapManager` (a context manager whose `show(drawing, size)` returns the
  stage picture stretched to a size).
- `hangman.cli` — `main(argv=None)`, `prompt_difficulty(read, write)` and
  `status_line(data)`.

## Running the tests

```
pip install .[test]
pytest
```