# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/ftdc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FTDC input: decoded chunks and the file/directory decoder."""

from __future__ import annotations

from ftdcstat.ftdc.chunk import RawChunk, list_keys
from ftdcstat.ftdc.decoder import FtdcDecodeError, decode, read_path

__all__ = [
    "FtdcDecodeError",
    "RawChunk",
    "decode",
    "list_keys",
    "read_path",
]
