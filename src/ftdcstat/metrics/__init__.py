# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/metrics/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report metric definitions: the definition language and the built-in presets."""

from __future__ import annotations

from ftdcstat.metrics.presets import (
    BUILTIN_PRESETS,
    CPU_METRICS,
    GENERAL_METRICS,
    MEM_METRICS,
    Preset,
    UnknownPresetError,
    available_presets,
    get_preset,
    select_metrics_spec,
)
from ftdcstat.metrics.spec import MetricDef, clean_metrics, parse_metrics

__all__ = [
    "BUILTIN_PRESETS",
    "CPU_METRICS",
    "GENERAL_METRICS",
    "MEM_METRICS",
    "MetricDef",
    "Preset",
    "UnknownPresetError",
    "available_presets",
    "clean_metrics",
    "get_preset",
    "parse_metrics",
    "select_metrics_spec",
]
