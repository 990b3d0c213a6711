# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat configuration: TOML loading, layered merging and logging setup."""

from __future__ import annotations

from ftdcstat.config.model import ArgsLike, Config, ConfigError, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "ConfigError",
    "MutableConfig",
]
