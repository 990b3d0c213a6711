# topmark:header:start
#
#   project      : FtdcStat
#   file         : test_columns.py
#   file_relpath : tests/report/test_columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for fixed-width column formatting."""

from __future__ import annotations

from datetime import datetime

import pytest

from ftdcstat.metrics.spec import parse_metrics
from ftdcstat.report.columns import (
    TIME_COLUMN,
    Align,
    ColumnFormat,
    format_cell,
    format_timestamp,
    is_header_anchor,
    render_header,
    render_row,
)


def test_cells_are_right_justified() -> None:
    assert format_cell(8, 42) == "      42"
    assert format_cell(3, "") == "   "


def test_cells_truncate_to_width() -> None:
    """Long values keep their leftmost characters."""
    assert format_cell(4, 1234567) == "1234"
    assert format_cell(8, "SwapCached") == "SwapCach"


def test_time_column_is_left_aligned_and_not_truncated() -> None:
    assert TIME_COLUMN.render("time") == "time" + " " * 13
    assert len(TIME_COLUMN.render("x" * 20)) == 20


def test_left_alignment() -> None:
    assert ColumnFormat(width=5, align=Align.LEFT).render("ab") == "ab   "


def test_width_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ColumnFormat(width=0)


def test_timestamp_format_utc() -> None:
    assert format_timestamp(0, utc=True) == "70-01-01 00:00:00"
    assert format_timestamp(1_700_000_000_999, utc=True) == "23-11-14 22:13:20"


def test_timestamp_format_local() -> None:
    expected = datetime.fromtimestamp(1_700_000_000).strftime("%y-%m-%d %H:%M:%S")
    assert format_timestamp(1_700_000_000_500) == expected


@pytest.mark.parametrize(
    ("millis", "anchor"),
    [(0, True), (999, True), (1000, False), (9999, False), (10_000, True), (20_500, True)],
)
def test_header_anchor_every_ten_seconds(millis: int, anchor: bool) -> None:
    assert is_header_anchor(millis) is anchor


def test_header_line_layout() -> None:
    metrics = parse_metrics("a,insert,d;b,,;c,conn")

    header = render_header(metrics, 8)

    assert header == "time" + " " * 13 + "  insert" + " " * 8 + "    conn"


def test_row_line_layout() -> None:
    row = render_row(1000, [0, 123456789], 6, utc=True)

    assert row == "70-01-01 00:00:01" + "     0" + "123456"
