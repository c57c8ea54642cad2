import io

from PIL import Image

from hangman.bitmaps import DEFAULT_SIZE
from hangman.cli import UNKNOWN_DIFFICULTY, main, prompt_difficulty, status_line
from hangman.models import Difficulty, GameData
from hangman.tools import INVALID_GUESS_MESSAGE


def _reader(answers):
    pending = iter(answers)

    def read(prompt):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


def _setup(tmp_path, file_name, content):
    words = tmp_path / "HangmanFiles" / "Words"
    words.mkdir(parents=True)
    (words / file_name).write_text(content, encoding="utf-8")


def test_prompt_difficulty_retries_until_valid():
    written = []
    result = prompt_difficulty(_reader(["x", " M "]), written.append)
    assert result is Difficulty.MEDIUM
    assert written == [UNKNOWN_DIFFICULTY]


def test_prompt_difficulty_accepts_names():
    assert prompt_difficulty(_reader(["hard"]), print) is Difficulty.HARD
    assert prompt_difficulty(_reader(["e"]), print) is Difficulty.EASY


def test_prompt_difficulty_cancel_and_eof():
    assert prompt_difficulty(_reader(["q"]), print) is None
    assert prompt_difficulty(_reader([]), print) is None


def test_status_line():
    data = GameData(games_played=3, games_won=2, games_lost=1)
    line = status_line(data)
    assert "Games played: 3" in line
    assert "Wins: 2" in line
    assert "Losses: 1" in line


def test_main_winning_round(tmp_path, monkeypatch, capsys):
    _setup(tmp_path, "Easy.txt", "cat:A pet\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("e\nc\na\nt\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "You won! You found the word: cat" in out
    assert "Hint: A pet" in out
    drawings = tmp_path / "HangmanFiles" / "Drawings"
    assert {p.name for p in drawings.iterdir()} == {
        "base.bmp",
        "pole.bmp",
        "hanger.bmp",
        "man.bmp",
    }


def test_main_losing_round_with_invalid_guess(tmp_path, monkeypatch, capsys):
    _setup(tmp_path, "Hard.txt", "dog:x\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("h\nab\nq\nz\nx\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert INVALID_GUESS_MESSAGE in out
    assert "You lost. The hidden word was: dog" in out
    assert "Wrong letters: q, z" in out


def test_main_missing_word_list(tmp_path, monkeypatch, capsys):
    (tmp_path / "HangmanFiles").mkdir()
    monkeypatch.setattr("sys.stdin", io.StringIO("m\n"))
    assert main(["--base-dir", str(tmp_path)]) == 1
    assert "Couldn't retrieve word from word list." in capsys.readouterr().err


def test_main_cancelled(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main(["--base-dir", str(tmp_path)]) == 0
    assert "Word:" not in capsys.readouterr().out


def test_main_writes_picture(tmp_path, monkeypatch):
    _setup(tmp_path, "Medium.txt", "owl:bird\n")
    picture = tmp_path / "stage.png"
    monkeypatch.setattr("sys.stdin", io.StringIO("m\nz\n"))
    assert main(["--base-dir", str(tmp_path), "--picture", str(picture)]) == 0
    with Image.open(picture) as image:
        assert image.size == DEFAULT_SIZE