# topmark:header:start
#
#   project      : FtdcStat
#   file         : constants.py
#   file_relpath : src/ftdcstat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

FTDCSTAT_VERSION: str = get_version("ftdcstat")

# Name of the timestamp series shared by every chunk (milliseconds since epoch):
TIMESTAMP_KEY: Final[str] = "replSetGetStatus/date"

DEFAULT_COLUMN_WIDTH: Final[int] = 8
DEFAULT_PRESET: Final[str] = "general"

# "YY-MM-DD HH:MM:SS" is exactly 17 characters wide.
TIME_COLUMN_WIDTH: Final[int] = 17
TIME_COLUMN_LABEL: Final[str] = "time"
TIMESTAMP_FORMAT: Final[str] = "%y-%m-%d %H:%M:%S"

# Reprint the header before rows whose epoch second is a multiple of this:
HEADER_REPRINT_SECONDS: Final[int] = 10

# Config discovery
CONFIG_FILE_NAME: Final[str] = "ftdcstat.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "ftdcstat"

LOG_LEVEL_ENV_VAR: Final[str] = "FTDCSTAT_LOG_LEVEL"
