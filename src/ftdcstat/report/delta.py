# topmark:header:start
#
#   project      : FtdcStat
#   file         : delta.py
#   file_relpath : src/ftdcstat/report/delta.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-interval deltas of monotonically increasing counters.

The engine remembers the last raw value seen for every key during one report
run. Calls for a given key must arrive in increasing sample order.

Reset policy:
    - The first value seen for a key becomes its own baseline, so the first
      delta is always ``0``.
    - A value of ``0``, or a value below the stored one, is a counter reset
      (process restart or rollover). The baseline is forced to ``0`` and the
      delta equals the new raw value: a one-time spike, not smoothed away.
    - A genuine zero sample is therefore also treated as a reset.
"""

from __future__ import annotations

from ftdcstat.config.logging import get_logger

logger = get_logger(__name__)


class DeltaEngine:
    """Stateful counter-to-delta converter for one report run."""

    def __init__(self) -> None:
        self._last: dict[str, int] = {}

    def compute_delta(self, key: str, raw_value: int) -> int:
        """Return the increase of ``key`` since its previous sample.

        Args:
            key (str): Raw series name.
            raw_value (int): Current raw counter value.

        Returns:
            int: The interval delta (never negative).
        """
        baseline: int = self._last.setdefault(key, raw_value)
        if raw_value == 0 or raw_value < baseline:
            logger.trace("Counter reset on %s: %d -> %d", key, baseline, raw_value)
            baseline = 0
        self._last[key] = raw_value
        return raw_value - baseline

    def last_value(self, key: str) -> int | None:
        """Return the last raw value stored for ``key`` (None if never seen)."""
        return self._last.get(key)

    def reset(self) -> None:
        """Forget every key."""
        self._last.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._last

    def __len__(self) -> int:
        return len(self._last)
