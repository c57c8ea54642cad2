import pytest

from hangman.models import Difficulty
from hangman.wordbank import MAX_ENTRIES, NO_HINT, WordBank


def _write(folder, name, text):
    path = folder / name
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def easy_bank(tmp_path):
    _write(tmp_path, "Easy.txt", "apple:A fruit\npear:\nbanana\nx:y:z\n")
    bank = WordBank(Difficulty.EASY, tmp_path)
    bank.read_words()
    return bank


@pytest.mark.parametrize(
    "difficulty, name",
    [
        (Difficulty.EASY, "Easy.txt"),
        (Difficulty.MEDIUM, "Medium.txt"),
        (Difficulty.HARD, "Hard.txt"),
    ],
)
def test_file_per_difficulty(tmp_path, difficulty, name):
    assert WordBank(difficulty, tmp_path).path == tmp_path / name


def test_read_words_counts_entries(tmp_path):
    _write(tmp_path, "Hard.txt", "one:1\ntwo:2\n")
    bank = WordBank(Difficulty.HARD, tmp_path)
    assert bank.read_words() == 2
    assert len(bank) == 2


def test_word_and_hint(easy_bank):
    assert easy_bank.word(0) == "apple"
    assert easy_bank.hint(0) == "A fruit"


def test_missing_hint_gets_placeholder(easy_bank):
    assert easy_bank.word(1) == "pear"
    assert easy_bank.hint(1) == NO_HINT


def test_line_without_colon_is_only_a_hint(easy_bank):
    assert easy_bank.word(2) == ""
    assert easy_bank.hint(2) == "banana"


def test_several_colons_use_last_two_parts(easy_bank):
    assert easy_bank.word(3) == "y"
    assert easy_bank.hint(3) == "z"


def test_out_of_range_gives_empty_strings(easy_bank):
    for index in (-1, len(easy_bank), 100):
        assert easy_bank.word(index) == ""
        assert easy_bank.hint(index) == ""


def test_missing_file_raises(tmp_path):
    bank = WordBank(Difficulty.MEDIUM, tmp_path)
    with pytest.raises(FileNotFoundError):
        bank.read_words()


def test_random_index_in_range(easy_bank):
    indices = {easy_bank.random_index() for _ in range(200)}
    assert indices <= set(range(len(easy_bank)))
    assert len(indices) > 1


def test_random_index_on_empty_list_raises(tmp_path):
    _write(tmp_path, "Easy.txt", "")
    bank = WordBank(Difficulty.EASY, tmp_path)
    assert bank.read_words() == 0
    with pytest.raises(ValueError):
        bank.random_index()


def test_entries_are_capped(tmp_path):
    lines = "".join(f"word{n}:hint{n}\n" for n in range(MAX_ENTRIES + 10))
    _write(tmp_path, "Easy.txt", lines)
    bank = WordBank(Difficulty.EASY, tmp_path)
    assert bank.read_words() == MAX_ENTRIES
    assert bank.word(MAX_ENTRIES - 1) == f"word{MAX_ENTRIES - 1}"
    assert bank.word(MAX_ENTRIES) == ""


def test_windows_line_endings(tmp_path):
    (tmp_path / "Easy.txt").write_bytes(b"kiwi:green\r\nplum:purple\r\n")
    bank = WordBank(Difficulty.EASY, tmp_path)
    bank.read_words()
    assert bank.hint(0) == "green"
    assert bank.word(1) == "plum"


def test_difficulty_accepts_int(tmp_path):
    bank = WordBank(2, tmp_path)
    assert bank.difficulty is Difficulty.HARD