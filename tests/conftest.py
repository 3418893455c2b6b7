"""Shared fixtures for word_frequency_pipeline tests."""

import pytest


EXAMPLE_CORPUS = "The cat and the dog. A CAT sat."
EXAMPLE_IGNORE = "the,and,a"


@pytest.fixture
def example_files(tmp_path):
    """Corpus + ignore file for the small cat/dog example."""
    corpus = tmp_path / "book.txt"
    corpus.write_text(EXAMPLE_CORPUS + "\n", encoding="utf-8")
    ignore = tmp_path / "ignore.txt"
    ignore.write_text(EXAMPLE_IGNORE + "\n", encoding="utf-8")
    return corpus, ignore


@pytest.fixture
def long_corpus_text():
    """A few thousand tokens with plenty of count ties."""
    words = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]
    lines = []
    for i in range(400):
        # word i % 8 repeated a varying number of times, plus noise tokens
        w = words[i % len(words)]
        lines.append(f"{w} {w.upper()}, x {words[(i * 3) % len(words)]}; the-{w}42 and")
    return "\n".join(lines)
