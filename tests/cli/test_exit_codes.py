# topmark:header:start
#
#   project      : FtdcStat
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: sysexits-aligned exit codes for input, decode and config failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ftdcstat.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@pytest.mark.parametrize("command", ["report", "keys"])
def test_missing_input_is_file_not_found(isolation: Path, command: str) -> None:
    result = run_cli([command, str(isolation / "metrics.missing")])

    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "No such file or directory" in result.output


@mark_cli
@pytest.mark.parametrize("command", ["report", "keys"])
def test_corrupt_input_is_decode_error(isolation: Path, command: str) -> None:
    path = isolation / "metrics.corrupt"
    path.write_bytes(b"this is not an ftdc file")

    result = run_cli([command, str(path)])

    assert_exit(result, ExitCode.DECODE_ERROR)
    assert "Cannot decode" in result.output


@mark_cli
def test_unknown_preset_is_config_error(insert_file: Path) -> None:
    result = run_cli(["report", "--preset", "nope", str(insert_file)])

    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "Unknown preset 'nope'" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive(insert_file: Path) -> None:
    result = run_cli(["-v", "-q", "report", str(insert_file)])

    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_missing_explicit_config_is_usage_error(insert_file: Path) -> None:
    result = run_cli(["report", "--config", "absent.toml", str(insert_file)])

    assert_exit(result, 2)
