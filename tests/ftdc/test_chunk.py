# topmark:header:start
#
#   project      : FtdcStat
#   file         : test_chunk.py
#   file_relpath : tests/ftdc/test_chunk.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `RawChunk` access helpers."""

from __future__ import annotations

from ftdcstat.constants import TIMESTAMP_KEY
from ftdcstat.ftdc.chunk import RawChunk, list_keys


def test_value_at_reads_samples() -> None:
    chunk = RawChunk(series={"a": [1, 2, 3]})

    assert [chunk.value_at("a", i) for i in range(3)] == [1, 2, 3]


def test_value_at_absent_or_short_series_is_zero() -> None:
    chunk = RawChunk(series={"a": [1]})

    assert chunk.value_at("b", 0) == 0
    assert chunk.value_at("a", 5) == 0


def test_timestamps_default_to_empty() -> None:
    chunk = RawChunk(series={"a": [1]})

    assert chunk.sample_count == 0
    assert list(chunk.timestamps) == []


def test_timestamps_come_from_date_series() -> None:
    chunk = RawChunk(series={TIMESTAMP_KEY: [1000, 2000], "a": [1, 2]})

    assert list(chunk.timestamps) == [1000, 2000]
    assert chunk.sample_count == 2


def test_list_keys_sorted() -> None:
    chunk = RawChunk(series={"b/x": [1], "a": [2], "B": [3]})

    assert list_keys(chunk) == ["B", "a", "b/x"]
    assert chunk.keys() == ["b/x", "a", "B"]


def test_list_keys_of_empty_chunk() -> None:
    assert list_keys(RawChunk()) == []
