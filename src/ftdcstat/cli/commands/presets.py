# topmark:header:start
#
#   project      : FtdcStat
#   file         : presets.py
#   file_relpath : src/ftdcstat/cli/commands/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat `presets` command.

Lists the built-in and configured metric presets, or shows the columns of a
single preset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ftdcstat.cli.cmd_common import build_config
from ftdcstat.cli.errors import FtdcstatConfigError
from ftdcstat.cli.options import common_config_options
from ftdcstat.metrics.presets import (
    BUILTIN_PRESETS,
    UnknownPresetError,
    available_presets,
    get_preset,
)
from ftdcstat.metrics.spec import parse_metrics

if TYPE_CHECKING:
    from ftdcstat.cli_shared.console_api import ConsoleLike
    from ftdcstat.config.model import Config
    from ftdcstat.metrics.spec import MetricDef


def _describe(metric: MetricDef) -> str:
    if metric.malformed:
        return f"{metric.display_name or '-'}\t(malformed, renders 0)"
    kind: str = "rate" if metric.is_delta else "value"
    return f"{metric.display_name or '-'}\t{kind}\t{'+'.join(metric.source_keys)}"


@click.command(
    name="presets",
    help="List metric presets, or show the columns of one preset.",
)
@click.argument("name", required=False)
@common_config_options
def presets_command(*, name: str | None, config_paths: tuple[str, ...], no_config: bool) -> None:
    """List presets or describe one.

    Args:
        name (str | None): Preset to describe; lists every preset when omitted.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config(config_paths=config_paths, no_config=no_config, args={})

    if name is None:
        for preset_name, text in available_presets(config.presets).items():
            origin: str = "built-in" if preset_name in BUILTIN_PRESETS else "config"
            if preset_name in BUILTIN_PRESETS and preset_name in config.presets:
                origin = "config (overrides built-in)"
            count: int = len(parse_metrics(text))
            console.line(f"{console.styled(preset_name, bold=True)}\t{count} column(s)\t{origin}")
        return

    try:
        text = get_preset(name, config.presets)
    except UnknownPresetError as exc:
        raise FtdcstatConfigError(str(exc)) from exc
    for metric in parse_metrics(text):
        console.line(_describe(metric))
