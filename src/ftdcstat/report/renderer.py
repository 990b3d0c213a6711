# topmark:header:start
#
#   project      : FtdcStat
#   file         : renderer.py
#   file_relpath : src/ftdcstat/report/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tabular report renderer.

The renderer walks chunks in order and, within each chunk, every offset of
the timestamp series. For each offset it computes one value per metric
(summing the metric's raw series, each passed through the delta engine for
rate columns) and emits one row. The header is printed once upfront and again
before every row whose epoch second is a multiple of ten.

Example:
    ```python
    renderer = ReportRenderer(parse_metrics(GENERAL_METRICS), width=8)
    for line in renderer.iter_lines(read_path(path)):
        print(line.text)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from ftdcstat.config.logging import get_logger
from ftdcstat.constants import DEFAULT_COLUMN_WIDTH
from ftdcstat.report.columns import is_header_anchor, render_header, render_row
from ftdcstat.report.delta import DeltaEngine

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from ftdcstat.cli_shared.console_api import ConsoleLike
    from ftdcstat.ftdc.chunk import RawChunk
    from ftdcstat.metrics.spec import MetricDef

logger = get_logger(__name__)


class LineKind(str, Enum):
    """Kind of an emitted report line."""

    HEADER = "header"
    ROW = "row"


class ReportLine(NamedTuple):
    """One line of report output."""

    kind: LineKind
    text: str


@dataclass
class ReportStats:
    """Counters collected while rendering a report."""

    chunks: int = 0
    rows: int = 0
    headers: int = 0


class ReportRenderer:
    """Render chunks as fixed-width report lines.

    Args:
        metrics (Sequence[MetricDef]): Report columns, in display order.
        width (int): Width of every value column.
        utc (bool): Render timestamps in UTC instead of local time.
        delta_engine (DeltaEngine | None): Counter state; a fresh engine is
            created when omitted. Share one engine only across chunks of the
            same run.
    """

    def __init__(
        self,
        metrics: Sequence[MetricDef],
        *,
        width: int = DEFAULT_COLUMN_WIDTH,
        utc: bool = False,
        delta_engine: DeltaEngine | None = None,
    ) -> None:
        if width < 1:
            raise ValueError(f"Column width must be positive, got {width}")
        self.metrics: tuple[MetricDef, ...] = tuple(metrics)
        self.width = width
        self.utc = utc
        self.delta_engine: DeltaEngine = delta_engine if delta_engine is not None else DeltaEngine()
        self._header: str = render_header(self.metrics, width)

    def header(self) -> str:
        """Return the column header line."""
        return self._header

    def compute_value(self, chunk: RawChunk, offset: int, metric: MetricDef) -> int:
        """Return the value of one cell.

        Each source key contributes its raw sample (zero when the series is
        absent or too short), passed through the delta engine for rate
        columns. The reset policy therefore applies per raw key, not to the
        sum. Malformed metrics yield zero.
        """
        if metric.malformed:
            return 0
        total = 0
        for key in metric.source_keys:
            value: int = chunk.value_at(key, offset)
            if metric.is_delta:
                value = self.delta_engine.compute_delta(key, value)
            total += value
        return total

    def render_row(self, chunk: RawChunk, offset: int) -> str:
        """Compute and format the row at ``offset`` of ``chunk``."""
        values: list[int] = [self.compute_value(chunk, offset, m) for m in self.metrics]
        return render_row(chunk.timestamps[offset], values, self.width, utc=self.utc)

    def iter_lines(self, chunks: Iterable[RawChunk]) -> Iterator[ReportLine]:
        """Yield the header, then every row with periodic header reprints."""
        yield ReportLine(LineKind.HEADER, self._header)
        for index, chunk in enumerate(chunks):
            timestamps: Sequence[int] = chunk.timestamps
            logger.debug("Rendering chunk %d (%d samples)", index, len(timestamps))
            for offset, millis in enumerate(timestamps):
                row: str = self.render_row(chunk, offset)
                if is_header_anchor(millis):
                    yield ReportLine(LineKind.HEADER, self._header)
                yield ReportLine(LineKind.ROW, row)

    def render(self, chunks: Sequence[RawChunk], console: ConsoleLike) -> ReportStats:
        """Write the report to ``console``.

        Header lines are emphasized when the console supports styling.

        Returns:
            ReportStats: Number of chunks, rows and header lines written.
        """
        stats = ReportStats(chunks=len(chunks))
        for line in self.iter_lines(chunks):
            if line.kind is LineKind.HEADER:
                stats.headers += 1
                console.header(line.text)
            else:
                stats.rows += 1
                console.line(line.text)
        logger.info("Rendered %d row(s) from %d chunk(s)", stats.rows, stats.chunks)
        return stats
