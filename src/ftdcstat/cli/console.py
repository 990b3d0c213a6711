# topmark:header:start
#
#   project      : FtdcStat
#   file         : console.py
#   file_relpath : src/ftdcstat/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for FtdcStat program output.

Streams are resolved at write time unless given explicitly, so a console
built inside `click.testing.CliRunner` writes to the runner's captured
streams. With color off, header lines and styled fragments are written as
plain text; this is what redirected reports get.
"""

from __future__ import annotations

from typing import Any, TextIO

import click

HEADER_STYLE: dict[str, Any] = {"bold": True}
ERROR_STYLE: dict[str, Any] = {"fg": "bright_red"}


class ClickConsole:
    """`ConsoleLike` implementation on top of `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styling.
        out (TextIO | None): Report stream (current stdout when omitted).
        err (TextIO | None): Error stream (current stderr when omitted).
    """

    def __init__(
        self,
        *,
        enable_color: bool = False,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._out = out
        self._err = err

    def line(self, text: str = "") -> None:
        """Write ``text`` and a newline to the report stream."""
        click.echo(text, file=self._out, color=self.enable_color)

    def header(self, text: str) -> None:
        """Write a header line in bold (plain when color is off)."""
        self.line(self.styled(text, **HEADER_STYLE))

    def error(self, text: str) -> None:
        """Write ``text`` in red to the error stream."""
        click.echo(
            self.styled(text, **ERROR_STYLE),
            file=self._err,
            err=self._err is None,
            color=self.enable_color,
        )

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` wrapped in ANSI codes, or unchanged when color is off."""
        return click.style(text, **style) if self.enable_color else text
