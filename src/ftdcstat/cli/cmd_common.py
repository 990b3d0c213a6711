# topmark:header:start
#
#   project      : FtdcStat
#   file         : cmd_common.py
#   file_relpath : src/ftdcstat/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
configuration resolution, metric selection and input decoding. Library
exceptions are translated here into CLI errors with sysexits-aligned exit
codes; both input-read and decode failures are fatal.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ftdcstat.cli.errors import (
    FtdcstatConfigError,
    FtdcstatDecodeError,
    FtdcstatFileNotFoundError,
    FtdcstatIOError,
    FtdcstatPermissionDeniedError,
)
from ftdcstat.config.logging import get_logger
from ftdcstat.config.model import ConfigError, MutableConfig
from ftdcstat.ftdc.decoder import FtdcDecodeError, read_path
from ftdcstat.metrics.presets import UnknownPresetError
from ftdcstat.metrics.spec import parse_metrics

if TYPE_CHECKING:
    from ftdcstat.config.model import ArgsLike, Config
    from ftdcstat.ftdc.chunk import RawChunk
    from ftdcstat.metrics.spec import MetricDef

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the root context (0 if unset)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def build_config(
    *,
    config_paths: tuple[str, ...] | list[str],
    no_config: bool,
    args: ArgsLike,
) -> Config:
    """Materialize a frozen `Config` from config files and CLI options.

    Raises:
        FtdcstatConfigError: If a config value is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        config: Config = draft.apply_cli_args(args).freeze()
    except ConfigError as exc:
        raise FtdcstatConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config


def resolve_metrics(config: Config) -> list[MetricDef]:
    """Return the parsed report columns selected by ``config``.

    Raises:
        FtdcstatConfigError: If the configured preset does not exist.
    """
    try:
        spec: str = config.resolve_metrics_spec()
    except UnknownPresetError as exc:
        raise FtdcstatConfigError(str(exc)) from exc
    return parse_metrics(spec)


def load_chunks(path: Path) -> list[RawChunk]:
    """Read and decode ``path``, translating failures into CLI errors.

    Exit code mapping:
        FILE_NOT_FOUND → FileNotFoundError
        PERMISSION_DENIED → PermissionError
        IO_ERROR → any other OSError
        DECODE_ERROR → FtdcDecodeError
    """
    try:
        return read_path(path)
    except FileNotFoundError as exc:
        logger.error("Input not found: %s", path)
        raise FtdcstatFileNotFoundError(f"No such file or directory: {path}") from exc
    except PermissionError as exc:
        logger.error("Permission denied: %s", path)
        raise FtdcstatPermissionDeniedError(f"Permission denied: {path}") from exc
    except OSError as exc:
        logger.error("Cannot read %s: %s", path, exc)
        raise FtdcstatIOError(f"Cannot read {path}: {exc}") from exc
    except FtdcDecodeError as exc:
        logger.error("Cannot decode %s: %s", path, exc)
        raise FtdcstatDecodeError(f"Cannot decode {path}: {exc}") from exc
