"""Tests for top-K ranking."""

import pytest

from word_frequency_pipeline.counting.rank import RankedEntry, rank_top_k

FREQ = {"sat": 1, "cat": 2, "dog": 1, "ant": 1, "zebra": 5}


def test_count_descending_then_word_ascending():
    ranked = rank_top_k(FREQ, 10)
    assert [(e.word, e.count) for e in ranked] == [
        ("zebra", 5),
        ("cat", 2),
        ("ant", 1),
        ("dog", 1),
        ("sat", 1),
    ]


def test_truncates_to_k():
    assert rank_top_k(FREQ, 3) == [
        RankedEntry(5, "zebra"),
        RankedEntry(2, "cat"),
        RankedEntry(1, "ant"),
    ]


def test_zero_gives_empty_list():
    assert rank_top_k(FREQ, 0) == []


def test_negative_k_rejected():
    with pytest.raises(ValueError):
        rank_top_k(FREQ, -1)


def test_small_k_matches_full_sort():
    freq = {f"w{i:04d}": (i * 7919) % 13 + 1 for i in range(500)}
    full = rank_top_k(freq, len(freq))
    assert rank_top_k(freq, 10) == full[:10]
