# topmark:header:start
#
#   project      : FtdcStat
#   file         : options.py
#   file_relpath : src/ftdcstat/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based FtdcStat CLI.

This module centralizes reusable options (verbosity, color, config, report
selection) and their resolution logic, so commands and groups can stay thin.

Report options accept the classic single-dash spelling (``-metrics``,
``-cpu``, ``-mem``, ``-width``, ``-keys``) next to the ``--`` form.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from ftdcstat.cli.errors import FtdcstatUsageError
from ftdcstat.config.logging import get_logger
from ftdcstat.constants import DEFAULT_COLUMN_WIDTH

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Returns:
        ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        FtdcstatUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FtdcstatUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """Color output modes."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False, exists=True),
        multiple=True,
        help="Additional config file (ftdcstat.toml or pyproject.toml). Can be repeated.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore ftdcstat.toml / pyproject.toml files found from the current directory.",
    )(f)
    return f


def report_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the metric selection and layout options of the report command."""
    f = click.option(
        "-metrics",
        "--metrics",
        "metrics",
        type=str,
        default=None,
        help="Custom metric list 'key[+key...],name,[d];...'. Overrides every preset.",
    )(f)
    f = click.option(
        "-cpu",
        "--cpu",
        "cpu",
        is_flag=True,
        help="Show OS CPU counters.",
    )(f)
    f = click.option(
        "-mem",
        "--mem",
        "mem",
        is_flag=True,
        help="Show OS memory counters (wins over -cpu).",
    )(f)
    f = click.option(
        "--preset",
        "preset",
        type=str,
        default=None,
        help="Base preset by name (built-in or from the [presets] config table).",
    )(f)
    f = click.option(
        "-width",
        "--width",
        "width",
        type=click.IntRange(min=1),
        default=None,
        help=f"Column width (default: {DEFAULT_COLUMN_WIDTH}).",
    )(f)
    f = click.option(
        "--utc",
        "utc",
        is_flag=True,
        help="Render timestamps in UTC instead of local time.",
    )(f)
    return f
