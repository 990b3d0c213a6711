# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat package.

FtdcStat renders full time diagnostic data capture (FTDC) series as a
mongostat-like console table. It decodes diagnostic files, turns counters
into per-interval rates, and exposes both a CLI and a small typed API.
"""

from __future__ import annotations
