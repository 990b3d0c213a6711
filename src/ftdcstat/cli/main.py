# topmark:header:start
#
#   project      : FtdcStat
#   file         : main.py
#   file_relpath : src/ftdcstat/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat CLI entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ftdcstat.cli.commands.keys import keys_command
from ftdcstat.cli.commands.presets import presets_command
from ftdcstat.cli.commands.report import report_command
from ftdcstat.cli.commands.version import version_command
from ftdcstat.cli.console import ClickConsole
from ftdcstat.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from ftdcstat.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from ftdcstat.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env, independent of program-output verbosity
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


DEFAULT_COMMAND = "report"


class ReportByDefaultGroup(click.Group):
    """Command group that treats a leading non-command argument as a report path.

    ``ftdcstat [GROUP OPTIONS] PATH [REPORT OPTIONS]`` and
    ``ftdcstat [GROUP OPTIONS] -cpu PATH`` run as if ``report`` had been given.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Insert the default command after the group options when none is named."""
        options: dict[str, click.Parameter] = {
            opt: param for param in self.get_params(ctx) for opt in param.opts
        }
        i = 0
        while i < len(args):
            name, sep, _ = args[i].partition("=")
            param = options.get(name)
            if param is None:
                # Clustered short flags such as -vv
                if name[:1] == "-" and name[1:2] != "-" and len(name) > 2:
                    if all(f"-{ch}" in options for ch in name[1:]):
                        i += 1
                        continue
                break
            takes_value = isinstance(param, click.Option) and not (
                param.is_flag or param.count
            )
            i += 2 if takes_value and not sep else 1

        if i < len(args) and args[i] != "--" and args[i] not in self.commands:
            logger.debug("No command given; running '%s'", DEFAULT_COMMAND)
            args = [*args[:i], DEFAULT_COMMAND, *args[i:]]
        return super().parse_args(ctx, args)


@click.group(
    cls=ReportByDefaultGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="FtdcStat: mongostat-like tables from FTDC diagnostic data.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the FtdcStat CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.line("Hint: use 'ftdcstat report PATH' to render diagnostic data.")
        console.line()
        console.line(ctx.get_help())


cli.add_command(version_command)

cli.add_command(report_command)

cli.add_command(keys_command)

cli.add_command(presets_command)

if __name__ == "__main__":
    cli()
