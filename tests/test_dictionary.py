import random

import pytest

from mrdle.dictionary import WordStore, get_word_store, load_word_file, unpack_blob
from mrdle.errors import InconsistentWordLength, WordFileUnreadable
from mrdle.word_list import DEFAULT_WORD_SIZE, DEFAULT_WORDS_BLOB


def test_load_strips_and_lowercases(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("  Story \n\tALLOT\nhurry  \n")

    assert load_word_file(path) == ["story", "allot", "hurry"]


def test_store_is_sorted_and_searchable(word_file):
    store = WordStore.from_file(word_file)

    assert list(store.words) == sorted(store.words)
    for word in ["story", "allot", "hurry", "apple", "lolly", "frost"]:
        assert store.contains(word)
        assert word in store
    assert not store.contains("crane")
    assert not store.contains("")


def test_contains_is_case_sensitive(store):
    guess = "ApPlE"
    assert not store.contains(guess)
    assert store.contains(guess.lower())


def test_duplicates_are_kept():
    store = WordStore(["apple", "allot", "apple"])
    assert store.count() == 3
    assert store.words == ("allot", "apple", "apple")
    assert store.contains("apple")


def test_inconsistent_length_raises(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nallot\nbanana\n")

    with pytest.raises(InconsistentWordLength) as exc_info:
        load_word_file(path)
    assert exc_info.value.word == "banana"
    assert exc_info.value.expected == 5


def test_inconsistent_length_gives_empty_store(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\n")

    store = WordStore.from_file(path)

    assert store.count() == 0
    assert store.word_size() == 0
    assert "Inconsistent word length: banana" in caplog.text


def test_unreadable_file(tmp_path, caplog):
    path = tmp_path / "missing.txt"

    with pytest.raises(WordFileUnreadable):
        load_word_file(path)

    store = WordStore.from_file(path)
    assert store.count() == 0
    assert "Failed to open word file" in caplog.text


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n  \napple\n\n\t\nallot\n")

    assert load_word_file(path) == ["apple", "allot"]


def test_byte_order_mark_is_ignored(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\ufeffapple\nallot\n", encoding="utf-8")

    assert load_word_file(path) == ["apple", "allot"]


def test_all_blank_file_gives_empty_store(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n   \n\t\n")

    store = WordStore.from_file(path)
    assert store.count() == 0
    assert len(store) == 0
    assert store.word_size() == 0


def test_unpack_blob():
    assert unpack_blob("abcdefghi", 3) == ["abc", "def", "ghi"]
    assert unpack_blob("", 5) == []


def test_builtin_store():
    store = get_word_store()

    assert store.word_size() == DEFAULT_WORD_SIZE
    assert store.count() == len(DEFAULT_WORDS_BLOB) // DEFAULT_WORD_SIZE
    assert len(DEFAULT_WORDS_BLOB) % DEFAULT_WORD_SIZE == 0
    assert all(word.isalpha() and word.islower() for word in store)
    assert list(store.words) == sorted(store.words)
    assert store.contains("crane")


def test_get_word_store_prefers_file(word_file):
    store = get_word_store(word_file)
    assert store.count() == 6


def test_random_word_uses_store_generator():
    words = ["apple", "allot", "lolly"]
    first = WordStore(words, random.Random(7))
    second = WordStore(words, random.Random(7))

    picks = [first.random_word() for _ in range(50)]
    assert picks == [second.random_word() for _ in range(50)]
    assert set(picks) == set(words)


def test_random_word_on_empty_store():
    with pytest.raises(ValueError):
        WordStore().random_word()
