# topmark:header:start
#
#   project      : FtdcStat
#   file         : __main__.py
#   file_relpath : src/ftdcstat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FtdcStat via ``python -m ftdcstat``.

It delegates directly to :func:`ftdcstat.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how FtdcStat is launched.

Examples:
    Render a report using the module interface::

        python -m ftdcstat report diagnostic.data/
"""

from __future__ import annotations

from ftdcstat.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
