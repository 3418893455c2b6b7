"""
counting/counter.py

Per-partition word counting (one call per worker).

Rule per token:
- countable if len(token) > 1 AND token not in the ignore set
- countable tokens go into the partition's private Counter and `counted_words`
- everything else goes into `ignored_words`

Every index in the range lands in exactly one of the two totals.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import AbstractSet, Sequence

from ..errors import LogicFault
from .partition import PartitionRange


@dataclass
class PartialResult:
  partition: PartitionRange
  counts: Counter[str] = field(default_factory=Counter)
  counted_words: int = 0
  ignored_words: int = 0

  @property
  def tokens_seen(self) -> int:
    return self.counted_words + self.ignored_words


def count_partition(
  tokens: Sequence[str],
  partition: PartitionRange,
  ignore: AbstractSet[str],
  offset: int = 0,
) -> PartialResult:
  """
  Count tokens[partition.start - offset .. partition.end - offset].

  `offset` is the global index of tokens[0]; it is non-zero when the caller
  ships only this partition's slice (process workers).
  """
  result = PartialResult(partition)
  if partition.is_empty:
    return result

  lo = partition.start - offset
  hi = partition.end - offset
  if lo < 0 or hi >= len(tokens):
    raise LogicFault(
      f"partition {partition.index} [{partition.start}, {partition.end}] is outside "
      f"the token sequence (offset={offset}, length={len(tokens)})"
    )

  counts = result.counts
  counted = 0
  ignored = 0
  for i in range(lo, hi + 1):
    tok = tokens[i]
    if len(tok) > 1 and tok not in ignore:
      counts[tok] += 1
      counted += 1
    else:
      ignored += 1

  result.counted_words = counted
  result.ignored_words = ignored
  return result
