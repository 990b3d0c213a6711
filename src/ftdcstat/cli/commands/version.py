# topmark:header:start
#
#   project      : FtdcStat
#   file         : version.py
#   file_relpath : src/ftdcstat/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat `version` command.

Prints the current FtdcStat version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ftdcstat.cli.cmd_common import get_effective_verbosity
from ftdcstat.constants import FTDCSTAT_VERSION

if TYPE_CHECKING:
    from ftdcstat.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of FtdcStat.",
)
def version_command() -> None:
    """Show the current version of FtdcStat."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.line(console.styled("FtdcStat version:\n", bold=True, underline=True))
        console.line(f"    {console.styled(FTDCSTAT_VERSION, bold=True)}")
    else:
        console.line(console.styled(FTDCSTAT_VERSION, bold=True))
