# topmark:header:start
#
#   project      : FtdcStat
#   file         : errors.py
#   file_relpath : src/ftdcstat/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FtdcStat CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from ftdcstat.cli_shared.exit_codes import ExitCode


class FtdcstatError(click.ClickException):
    """Base class for all FtdcStat CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class FtdcstatUsageError(FtdcstatError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class FtdcstatConfigError(FtdcstatError):
    """Error for configuration errors (invalid config values, unknown preset)."""

    exit_code = ExitCode.CONFIG_ERROR


class FtdcstatFileNotFoundError(FtdcstatError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class FtdcstatPermissionDeniedError(FtdcstatError):
    """Error for an unreadable input path."""

    exit_code = ExitCode.PERMISSION_DENIED


class FtdcstatIOError(FtdcstatError):
    """Error for other I/O failures while reading the input."""

    exit_code = ExitCode.IO_ERROR


class FtdcstatDecodeError(FtdcstatError):
    """Error for malformed diagnostic data."""

    exit_code = ExitCode.DECODE_ERROR
