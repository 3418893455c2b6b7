"""
pipeline/run.py

Orchestrates one word-frequency run:
  1) Load the ignore set and the corpus tokens (all I/O errors surface here)
  2) Partition the token list into `workers` contiguous ranges
  3) Fork: one counter per range on a fresh executor
  4) Join: wait for every counter before touching any result
  5) Merge the partial results (single-threaded)
  6) Rank and truncate to top_n

Executors:
- "thread":  ThreadPoolExecutor, tokens + ignore set shared by reference
- "process": ProcessPoolExecutor, each worker gets its own slice by value
- "serial":  counters run one after another in the calling thread

The executor is created per run and shut down when the run ends; there is no
long-lived pool.
"""

from __future__ import annotations

import codecs
import hashlib
import json
import sys
import time
from concurrent.futures import ALL_COMPLETED, Executor, ProcessPoolExecutor, ThreadPoolExecutor, wait
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence

from ..counting.counter import PartialResult, count_partition
from ..counting.merge import MergedResult, merge_partials
from ..counting.partition import PartitionRange, check_coverage, partition_ranges
from ..counting.rank import RankedEntry, rank_top_k
from ..errors import LogicFault, UsageError
from ..text.tokenize import tokenize_lines
from ..utils.io import read_corpus_tokens, read_ignore_words

DEFAULT_WORKERS = 8
EXECUTORS = ("thread", "process", "serial")


@dataclass(frozen=True)
class PipelineConfig:
    top_n: int
    workers: int = DEFAULT_WORKERS
    executor: str = "thread"
    encoding: str = "utf-8"
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.top_n < 0:
            raise UsageError(f"top_n must be a non-negative integer, got {self.top_n}")
        if self.workers < 1:
            raise UsageError(f"workers must be >= 1, got {self.workers}")
        if self.executor not in EXECUTORS:
            raise UsageError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise UsageError(f"unknown encoding: {self.encoding!r}") from None

    def to_json(self) -> str:
        payload = asdict(self)
        payload.pop("verbose")
        return json.dumps(payload, sort_keys=True, ensure_ascii=False)

    @property
    def config_hash(self) -> str:
        return hashlib.sha256(self.to_json().encode("utf-8")).hexdigest()


@dataclass
class FrequencyReport:
    ranked: List[RankedEntry]
    tokens_total: int
    counted_words: int
    ignored_words: int
    ignore_list_size: int
    distinct_words: int
    elapsed_ms: int
    config: PipelineConfig
    corpus_path: Optional[str] = None
    ignore_path: Optional[str] = None
    partitions: List[PartitionRange] = field(default_factory=list)


def _log(config: PipelineConfig, msg: str) -> None:
    if config.verbose:
        print(f"[wordfreq] {msg}", file=sys.stderr)


def _make_executor(kind: str, workers: int) -> Optional[Executor]:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordfreq")
    if kind == "process":
        return ProcessPoolExecutor(max_workers=workers)
    return None


def count_concurrently(
    tokens: Sequence[str],
    ignore: AbstractSet[str],
    ranges: Sequence[PartitionRange],
    executor: str = "thread",
) -> List[PartialResult]:
    """
    Run one counter per range and return the partial results in range order.

    Returns only after every counter has finished. If any counter raised,
    its exception is re-raised once all of them are done.
    """
    check_coverage(ranges, len(tokens))

    pool = _make_executor(executor, len(ranges))
    if pool is None:
        return [count_partition(tokens, r, ignore) for r in ranges]

    with pool:
        if executor == "process":
            futures = [
                pool.submit(count_partition, tokens[r.start : r.end + 1], r, ignore, r.start)
                for r in ranges
            ]
        else:
            futures = [pool.submit(count_partition, tokens, r, ignore) for r in ranges]
        wait(futures, return_when=ALL_COMPLETED)

    return [f.result() for f in futures]


def count_tokens(
    tokens: Sequence[str],
    ignore: AbstractSet[str],
    config: PipelineConfig,
) -> tuple[MergedResult, List[RankedEntry], List[PartitionRange]]:
    ranges = partition_ranges(len(tokens), config.workers)
    _log(config, f"partitioned {len(tokens):,} tokens into {len(ranges)} ranges ({config.executor})")

    partials = count_concurrently(tokens, ignore, ranges, executor=config.executor)
    merged = merge_partials(partials)
    if merged.tokens_total != len(tokens):
        raise LogicFault(
            f"counted {merged.tokens_total} tokens, sequence has {len(tokens)}"
        )
    _log(config, f"merged {merged.partitions} partial results -> {merged.distinct_words:,} distinct words")

    ranked = rank_top_k(merged.frequency, config.top_n)
    return merged, ranked, ranges


def run_pipeline(
    corpus_path: str | Path,
    ignore_path: str | Path,
    top_n: int,
    workers: int = DEFAULT_WORKERS,
    executor: str = "thread",
    encoding: str = "utf-8",
    verbose: bool = False,
) -> FrequencyReport:
    config = PipelineConfig(
        top_n=top_n,
        workers=workers,
        executor=executor,
        encoding=encoding,
        verbose=verbose,
    )
    t0 = time.time()

    ignore = read_ignore_words(ignore_path, encoding=config.encoding)
    _log(config, f"ignore list: {len(ignore):,} words from {ignore_path}")
    tokens = read_corpus_tokens(corpus_path, encoding=config.encoding)
    _log(config, f"corpus: {len(tokens):,} tokens from {corpus_path}")

    merged, ranked, ranges = count_tokens(tokens, ignore, config)
    elapsed_ms = int(round((time.time() - t0) * 1000))

    return FrequencyReport(
        ranked=ranked,
        tokens_total=len(tokens),
        counted_words=merged.counted_words,
        ignored_words=merged.ignored_words,
        ignore_list_size=len(ignore),
        distinct_words=merged.distinct_words,
        elapsed_ms=elapsed_ms,
        config=config,
        corpus_path=str(corpus_path),
        ignore_path=str(ignore_path),
        partitions=ranges,
    )


def run_on_text(
    text: str,
    ignore: AbstractSet[str],
    top_n: int,
    workers: int = DEFAULT_WORKERS,
    executor: str = "thread",
) -> FrequencyReport:
    """Same pipeline over an in-memory string; no files involved."""
    config = PipelineConfig(top_n=top_n, workers=workers, executor=executor)
    t0 = time.time()
    tokens = tokenize_lines(text.splitlines())
    ignore = frozenset(ignore)
    merged, ranked, ranges = count_tokens(tokens, ignore, config)
    return FrequencyReport(
        ranked=ranked,
        tokens_total=len(tokens),
        counted_words=merged.counted_words,
        ignored_words=merged.ignored_words,
        ignore_list_size=len(ignore),
        distinct_words=merged.distinct_words,
        elapsed_ms=int(round((time.time() - t0) * 1000)),
        config=config,
        partitions=ranges,
    )
