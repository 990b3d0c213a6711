# topmark:header:start
#
#   project      : FtdcStat
#   file         : __init__.py
#   file_relpath : src/ftdcstat/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic pieces shared by the CLI and the library API."""
