"""
counting/partition.py

What this file does:
- Splits a token sequence of a given length into N contiguous index ranges.
- Verifies that a list of ranges covers [0, length-1] exactly once.

How it fits:
- The pipeline partitions once per run and hands one range to each counter.
- Every partition gets length // N tokens; the last one also takes the remainder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..errors import LogicFault


@dataclass(frozen=True)
class PartitionRange:
    index: int
    start: int
    end: int  # inclusive; end < start means empty

    @property
    def size(self) -> int:
        return max(0, self.end - self.start + 1)

    @property
    def is_empty(self) -> bool:
        return self.end < self.start


def partition_ranges(length: int, workers: int) -> List[PartitionRange]:
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    base = length // workers
    last = base + length % workers

    # Short sequences leave the leading partitions empty and give
    # everything to the last one.
    ranges: List[PartitionRange] = []
    start = 0
    for i in range(workers):
        size = last if i == workers - 1 else base
        ranges.append(PartitionRange(i, start, start + size - 1))
        start += size
    return ranges


def check_coverage(ranges: Sequence[PartitionRange], length: int) -> None:
    """
    Raise LogicFault unless `ranges` are in order, contiguous, non-overlapping
    and together cover exactly [0, length-1].
    """
    expected = 0
    for r in ranges:
        if r.start != expected:
            raise LogicFault(
                f"partition {r.index} starts at {r.start}, expected {expected} (gap or overlap)"
            )
        if r.end < r.start - 1:
            raise LogicFault(f"partition {r.index} has negative size: [{r.start}, {r.end}]")
        expected = r.end + 1
    if expected != length:
        raise LogicFault(f"partitions cover [0, {expected - 1}], sequence length is {length}")
