"""Tests for reading the corpus and ignore files."""

import pytest

from word_frequency_pipeline.errors import InputAccessError
from word_frequency_pipeline.utils.io import (
    parse_ignore_words,
    read_corpus_tokens,
    read_ignore_words,
)


def test_ignore_words_split_on_commas_and_newlines(tmp_path):
    p = tmp_path / "ignore.txt"
    p.write_bytes(b"The,AND\r\na\nof, in\n\n")
    assert read_ignore_words(p) == frozenset({"the", "and", "a", "of", "in"})


def test_ignore_duplicates_are_harmless():
    assert parse_ignore_words(["a,a,b", "B"]) == frozenset({"a", "b"})


def test_corpus_tokens_keep_last_word_without_newline(tmp_path):
    p = tmp_path / "book.txt"
    p.write_text("One two\nthree", encoding="utf-8")
    assert read_corpus_tokens(p) == ["one", "two", "three"]


def test_missing_file_is_reported(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(InputAccessError) as exc:
        read_corpus_tokens(missing)
    assert exc.value.path == missing
    assert "file not found" in str(exc.value)


def test_directory_is_reported(tmp_path):
    with pytest.raises(InputAccessError):
        read_ignore_words(tmp_path)


def test_undecodable_file_is_reported(tmp_path):
    p = tmp_path / "latin1.txt"
    p.write_bytes("caf\xe9 cr\xe8me".encode("latin-1"))
    with pytest.raises(InputAccessError) as exc:
        read_corpus_tokens(p, encoding="utf-8")
    assert "utf-8" in str(exc.value)
    assert read_corpus_tokens(p, encoding="latin-1") == ["café", "crème"]


def test_input_access_error_is_an_oserror(tmp_path):
    with pytest.raises(OSError):
        read_ignore_words(tmp_path / "missing.txt")
