# topmark:header:start
#
#   project      : FtdcStat
#   file         : chunk.py
#   file_relpath : src/ftdcstat/ftdc/chunk.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoded FTDC chunks.

A `RawChunk` is one unit of aligned time series: every series in a chunk has
one sample per offset, and the timestamps live in the ``replSetGetStatus/date``
series. Chunks are read-only once decoded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ftdcstat.constants import TIMESTAMP_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


@dataclass(frozen=True)
class RawChunk:
    """Aligned raw series of one decoded chunk.

    Attributes:
        series (Mapping[str, Sequence[int]]): Raw series name to unsigned samples.
    """

    series: Mapping[str, Sequence[int]] = field(default_factory=dict)

    @property
    def timestamps(self) -> Sequence[int]:
        """Sample timestamps in milliseconds since epoch (empty if absent)."""
        return self.series.get(TIMESTAMP_KEY, ())

    @property
    def sample_count(self) -> int:
        """Number of rows this chunk renders (length of the timestamp series)."""
        return len(self.timestamps)

    def keys(self) -> list[str]:
        """Return the raw series names in insertion order."""
        return list(self.series)

    def value_at(self, key: str, offset: int) -> int:
        """Return the sample of ``key`` at ``offset``.

        Absent series, and series shorter than ``offset``, read as zero.
        """
        values: Sequence[int] | None = self.series.get(key)
        if values is None or len(values) <= offset:
            return 0
        return values[offset]


def list_keys(chunk: RawChunk) -> list[str]:
    """Return the lexicographically sorted raw series names of ``chunk``."""
    return sorted(chunk.series)
