# topmark:header:start
#
#   project      : FtdcStat
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running FtdcStat through Click's test runner.

Commands that discover configuration should run from the ``isolation``
fixture directory so files outside the test tree never leak in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from ftdcstat.cli.main import cli
from ftdcstat.cli_shared.exit_codes import ExitCode
from tests.ftdc_builders import opcounter_samples, write_ftdc

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (Sequence[str]): Arguments after the program name.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv])


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: int) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output


def stdout_lines(result: Result) -> list[str]:
    """Return the non-empty lines printed to stdout."""
    return [line for line in result.stdout.splitlines() if line.strip()]


@pytest.fixture
def insert_file(isolation: Path) -> Path:
    """An FTDC file with two samples: insert 5 then 8 and uptime 100 then 101, at t=1s and t=2s."""
    return write_ftdc(
        isolation / "metrics.2024-01-01T00-00-00Z-00000",
        opcounter_samples([1000, 2000], [5, 8], uptime=[100, 101]),
    )
