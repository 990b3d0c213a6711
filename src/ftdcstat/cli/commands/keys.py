# topmark:header:start
#
#   project      : FtdcStat
#   file         : keys.py
#   file_relpath : src/ftdcstat/cli/commands/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FtdcStat `keys` command.

Lists the raw series names found in the first chunk of a diagnostic file or
directory, one per line in sorted order. Useful for writing custom metric
lists.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ftdcstat.cli.cmd_common import get_effective_verbosity, load_chunks
from ftdcstat.config.logging import get_logger
from ftdcstat.ftdc.chunk import list_keys

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ftdcstat.cli_shared.console_api import ConsoleLike
    from ftdcstat.ftdc.chunk import RawChunk

logger = get_logger(__name__)


def emit_keys(console: ConsoleLike, chunks: Sequence[RawChunk], *, verbosity: int = 0) -> int:
    """Print the sorted keys of the first chunk and return how many were printed.

    With ``verbosity > 0`` each key is followed by its sample count.
    """
    if not chunks:
        logger.warning("No metrics chunks decoded; nothing to list")
        return 0
    first: RawChunk = chunks[0]
    keys: list[str] = list_keys(first)
    for key in keys:
        if verbosity > 0:
            console.line(f"{key}\t{len(first.series[key])}")
        else:
            console.line(key)
    return len(keys)


@click.command(
    name="keys",
    help="List the raw series keys of the first chunk.",
)
@click.argument("path", type=click.Path(path_type=Path))
def keys_command(*, path: Path) -> None:
    """List raw series keys.

    Args:
        path (Path): Diagnostic file or ``diagnostic.data`` directory.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    chunks: list[RawChunk] = load_chunks(path)
    emit_keys(console, chunks, verbosity=get_effective_verbosity(ctx))
