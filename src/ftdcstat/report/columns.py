# topmark:header:start
#
#   project      : FtdcStat
#   file         : columns.py
#   file_relpath : src/ftdcstat/report/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-width column rendering for report lines.

Every cell of a report line, timestamp included, goes through
[`ColumnFormat.render`][ftdcstat.report.columns.ColumnFormat.render].
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from ftdcstat.constants import (
    HEADER_REPRINT_SECONDS,
    TIME_COLUMN_LABEL,
    TIME_COLUMN_WIDTH,
    TIMESTAMP_FORMAT,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ftdcstat.metrics.spec import MetricDef


class Align(str, Enum):
    """Cell alignment, expressed as a format-spec alignment character."""

    LEFT = "<"
    RIGHT = ">"


@dataclass(frozen=True)
class ColumnFormat:
    """Formatting rule for one column.

    Attributes:
        width (int): Minimum (and, when truncating, maximum) cell width.
        align (Align): Alignment inside the cell.
        truncate (bool): Cut values longer than ``width``, keeping the leftmost characters.
    """

    width: int
    align: Align = Align.RIGHT
    truncate: bool = True

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError(f"Column width must be positive, got {self.width}")

    def render(self, value: object) -> str:
        """Return ``value`` as a padded (and possibly truncated) cell."""
        precision: str = f".{self.width}" if self.truncate else ""
        return format(str(value), f"{self.align.value}{self.width}{precision}")


TIME_COLUMN: ColumnFormat = ColumnFormat(width=TIME_COLUMN_WIDTH, align=Align.LEFT, truncate=False)


def format_cell(width: int, value: object) -> str:
    """Return a right-justified, width-bounded value cell."""
    return ColumnFormat(width=width).render(value)


def format_timestamp(millis: int, *, utc: bool = False) -> str:
    """Format a millisecond epoch timestamp as ``YY-MM-DD HH:MM:SS``.

    Sub-second precision is dropped. Local time is used unless ``utc`` is set.
    """
    seconds: int = millis // 1000
    moment: datetime = (
        datetime.fromtimestamp(seconds, tz=timezone.utc) if utc else datetime.fromtimestamp(seconds)
    )
    return moment.strftime(TIMESTAMP_FORMAT)


def is_header_anchor(millis: int) -> bool:
    """Return True if the header should be reprinted before this row."""
    return (millis // 1000) % HEADER_REPRINT_SECONDS == 0


def render_header(metrics: Iterable[MetricDef], width: int) -> str:
    """Render the column header line.

    Args:
        metrics (Iterable[MetricDef]): Report columns, in order.
        width (int): Value column width.

    Returns:
        str: ``time`` label followed by one display name cell per metric.
    """
    column = ColumnFormat(width=width)
    return TIME_COLUMN.render(TIME_COLUMN_LABEL) + "".join(
        column.render(m.display_name) for m in metrics
    )


def render_row(millis: int, values: Iterable[int], width: int, *, utc: bool = False) -> str:
    """Render one report row from a timestamp and computed values."""
    column = ColumnFormat(width=width)
    return TIME_COLUMN.render(format_timestamp(millis, utc=utc)) + "".join(
        column.render(v) for v in values
    )
