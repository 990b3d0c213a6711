# topmark:header:start
#
#   project      : FtdcStat
#   file         : report.py
#   file_relpath : src/ftdcstat/cli/commands/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat `report` command.

Renders a diagnostic file or directory as a mongostat-like table: one row per
sample, one column per metric, with the header repeated every ten seconds of
captured time.

Metric selection (later wins): configured/``--preset`` base preset, ``-cpu``,
``-mem``, ``-metrics``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ftdcstat.cli.cmd_common import (
    build_config,
    get_effective_verbosity,
    load_chunks,
    resolve_metrics,
)
from ftdcstat.cli.commands.keys import emit_keys
from ftdcstat.cli.options import common_config_options, report_selection_options
from ftdcstat.config.keys import ArgKey
from ftdcstat.report.renderer import ReportRenderer

if TYPE_CHECKING:
    from ftdcstat.cli_shared.console_api import ConsoleLike
    from ftdcstat.config.model import Config
    from ftdcstat.ftdc.chunk import RawChunk
    from ftdcstat.metrics.spec import MetricDef
    from ftdcstat.report.renderer import ReportStats


@click.command(
    name="report",
    help="Render diagnostic data as a mongostat-like table.",
    epilog="""
PATH is an FTDC file (e.g. metrics.2024-01-01T00-00-00Z-00000) or a
diagnostic.data directory. Custom metric lists use the syntax
'key[+key...],name,[d];...' where 'd' marks a per-interval rate column.
""",
)
@click.argument("path", type=click.Path(path_type=Path))
@report_selection_options
@click.option(
    "-keys",
    "--keys",
    "show_keys",
    is_flag=True,
    help="List the raw series keys of the first chunk instead of rendering.",
)
@common_config_options
def report_command(
    *,
    path: Path,
    metrics: str | None,
    cpu: bool,
    mem: bool,
    preset: str | None,
    width: int | None,
    utc: bool,
    show_keys: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Render the report.

    Args:
        path (Path): Diagnostic file or directory.
        metrics (str | None): Custom metric list.
        cpu (bool): Select the CPU preset.
        mem (bool): Select the memory preset.
        preset (str | None): Base preset name.
        width (int | None): Value column width.
        utc (bool): Render timestamps in UTC.
        show_keys (bool): List raw keys instead of rendering.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        args={
            ArgKey.METRICS: metrics,
            ArgKey.CPU: cpu,
            ArgKey.MEM: mem,
            ArgKey.PRESET: preset,
            ArgKey.WIDTH: width,
            ArgKey.UTC: utc,
        },
    )

    chunks: list[RawChunk] = load_chunks(path)
    if show_keys:
        emit_keys(console, chunks, verbosity=vlevel)
        return

    metric_defs: list[MetricDef] = resolve_metrics(config)
    renderer = ReportRenderer(metric_defs, width=config.width, utc=config.utc)
    stats: ReportStats = renderer.render(chunks, console)

    if vlevel > 0:
        console.line()
        console.line(
            console.styled(
                f"{stats.rows} row(s) from {stats.chunks} chunk(s), {len(metric_defs)} column(s)",
                dim=True,
            )
        )
