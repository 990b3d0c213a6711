# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat CLI commands."""
