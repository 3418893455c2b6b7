"""
counting/rank.py

Turns the global frequency map into a top-K list.

Ordering: count descending, then word ascending. The secondary key makes the
list identical across runs, worker counts and executors.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import List, Mapping, Tuple


@dataclass(frozen=True)
class RankedEntry:
    count: int
    word: str


def _rank_key(item: Tuple[str, int]) -> Tuple[int, str]:
    word, count = item
    return (-count, word)


def rank_top_k(frequency: Mapping[str, int], k: int) -> List[RankedEntry]:
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    if k == 0 or not frequency:
        return []

    items = frequency.items()
    # Partial selection only pays off when K is small relative to the vocabulary.
    if k * 4 < len(frequency):
        top = heapq.nsmallest(k, items, key=_rank_key)
    else:
        top = sorted(items, key=_rank_key)[:k]
    return [RankedEntry(count=c, word=w) for w, c in top]
