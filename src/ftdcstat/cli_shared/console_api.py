# topmark:header:start
#
#   project      : FtdcStat
#   file         : console_api.py
#   file_relpath : src/ftdcstat/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output surface shared by the report renderer and the CLI commands.

Report lines and command listings go to a `ConsoleLike`; diagnostics go to
`logging`. The renderer only needs `line` and `header`, so any object with
these methods (a Click console, a test double) can receive a report.
"""

from __future__ import annotations

from typing import Any, Protocol


class ConsoleLike(Protocol):
    """Program-output sink.

    ``line`` and ``header`` write to standard output, ``error`` to standard
    error. ``styled`` returns its input unchanged when styling is off.
    """

    def line(self, text: str = "") -> None:
        """Write one line of program output."""
        ...

    def header(self, text: str) -> None:
        """Write a report header line, emphasized when styling is on."""
        ...

    def error(self, text: str) -> None:
        """Write a failure message to standard error."""
        ...

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` with Click style arguments applied."""
        ...
