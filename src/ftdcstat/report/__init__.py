# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report rendering: delta engine, column formatting and the table renderer."""

from __future__ import annotations

from ftdcstat.report.columns import ColumnFormat, format_cell, format_timestamp
from ftdcstat.report.delta import DeltaEngine
from ftdcstat.report.renderer import LineKind, ReportLine, ReportRenderer, ReportStats

__all__ = [
    "ColumnFormat",
    "DeltaEngine",
    "LineKind",
    "ReportLine",
    "ReportRenderer",
    "ReportStats",
    "format_cell",
    "format_timestamp",
]
