"""
counting/merge.py

Folds the per-partition results into one global frequency map.
Summation is commutative, so the order of `partials` never changes the result.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from .counter import PartialResult


@dataclass
class MergedResult:
    frequency: Counter[str] = field(default_factory=Counter)
    counted_words: int = 0
    ignored_words: int = 0
    partitions: int = 0

    @property
    def distinct_words(self) -> int:
        return len(self.frequency)

    @property
    def tokens_total(self) -> int:
        return self.counted_words + self.ignored_words


def merge_partials(partials: Iterable[PartialResult]) -> MergedResult:
    merged = MergedResult()
    for p in partials:
        merged.frequency.update(p.counts)
        merged.counted_words += p.counted_words
        merged.ignored_words += p.ignored_words
        merged.partitions += 1
    return merged
