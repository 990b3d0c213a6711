# topmark:header:start
#
#   project      : FtdcStat
#   file         : keys.py
#   file_relpath : src/ftdcstat/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration keys used by FtdcStat.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys as they appear in `ftdcstat.toml`.

    The same layout is expected under `[tool.ftdcstat]` in `pyproject.toml`.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [report]
    SECTION_REPORT: Final[str] = "report"

    KEY_WIDTH: Final[str] = "width"
    KEY_PRESET: Final[str] = "preset"
    KEY_METRICS: Final[str] = "metrics"
    KEY_UTC: Final[str] = "utc"

    # [presets]: name -> metric list
    SECTION_PRESETS: Final[str] = "presets"


class ArgKey:
    """Keys of the CLI argument mapping consumed by `MutableConfig.apply_cli_args`."""

    WIDTH: Final[str] = "width"
    PRESET: Final[str] = "preset"
    METRICS: Final[str] = "metrics"
    CPU: Final[str] = "cpu"
    MEM: Final[str] = "mem"
    UTC: Final[str] = "utc"
