"""Tests for splitting the token sequence into contiguous ranges."""

import pytest

from word_frequency_pipeline.counting.partition import (
    PartitionRange,
    check_coverage,
    partition_ranges,
)
from word_frequency_pipeline.errors import LogicFault


def _covered(ranges):
    out = []
    for r in ranges:
        out.extend(range(r.start, r.end + 1))
    return out


@pytest.mark.parametrize("length", [0, 1, 5, 7, 8, 9, 64, 1001])
@pytest.mark.parametrize("workers", [1, 2, 3, 8, 13])
def test_ranges_cover_sequence_exactly_once(length, workers):
    ranges = partition_ranges(length, workers)
    assert len(ranges) == workers
    assert _covered(ranges) == list(range(length))
    check_coverage(ranges, length)


def test_last_partition_takes_remainder():
    ranges = partition_ranges(10, 3)
    assert [r.size for r in ranges] == [3, 3, 4]
    assert ranges[0] == PartitionRange(0, 0, 2)
    assert ranges[2] == PartitionRange(2, 6, 9)


def test_short_sequence_leaves_empty_partitions():
    ranges = partition_ranges(3, 8)
    assert all(r.is_empty for r in ranges[:-1])
    assert ranges[-1].start == 0 and ranges[-1].end == 2


def test_partitioning_is_deterministic():
    assert partition_ranges(12345, 8) == partition_ranges(12345, 8)


def test_invalid_worker_count_rejected():
    with pytest.raises(ValueError):
        partition_ranges(10, 0)


def test_check_coverage_detects_gap():
    ranges = [PartitionRange(0, 0, 3), PartitionRange(1, 5, 9)]
    with pytest.raises(LogicFault):
        check_coverage(ranges, 10)


def test_check_coverage_detects_overlap():
    ranges = [PartitionRange(0, 0, 5), PartitionRange(1, 5, 9)]
    with pytest.raises(LogicFault):
        check_coverage(ranges, 10)


def test_check_coverage_detects_short_cover():
    ranges = [PartitionRange(0, 0, 4), PartitionRange(1, 5, 8)]
    with pytest.raises(LogicFault):
        check_coverage(ranges, 10)
