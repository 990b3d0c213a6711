# topmark:header:start
#
#   project      : FtdcStat
#   file         : test_report.py
#   file_relpath : tests/cli/test_report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `report` rendering, metric selection and configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, stdout_lines
from tests.conftest import mark_cli
from tests.ftdc_builders import opcounter_samples, write_ftdc

if TYPE_CHECKING:
    from pathlib import Path

GENERAL_HEADER = (
    "time" + " " * 13 + "  insert   query  update  delete getmore command"
    "    conn   state   res_M vsize_M  uptime"
)


@mark_cli
def test_report_general_preset(insert_file: Path) -> None:
    result = run_cli(["report", "--utc", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result) == [
        GENERAL_HEADER,
        "70-01-01 00:00:01" + "       0" * 10 + "     100",
        "70-01-01 00:00:02" + "       3" + "       0" * 9 + "     101",
    ]


@mark_cli
def test_report_custom_metrics_and_width(insert_file: Path) -> None:
    result = run_cli(
        [
            "report",
            "--utc",
            "-metrics",
            "serverStatus/opcounters/insert,ins,d;serverStatus/uptime,up,",
            "-width",
            "5",
            str(insert_file),
        ]
    )

    assert_SUCCESS(result)
    assert stdout_lines(result) == [
        "time" + " " * 13 + "  ins   up",
        "70-01-01 00:00:01    0  100",
        "70-01-01 00:00:02    3  101",
    ]


@mark_cli
def test_report_double_dash_spelling(insert_file: Path) -> None:
    single = run_cli(["report", "--utc", "-width", "6", "-cpu", str(insert_file)])
    double = run_cli(["report", "--utc", "--width", "6", "--cpu", str(insert_file)])

    assert_SUCCESS(single)
    assert single.stdout == double.stdout


@mark_cli
def test_report_cpu_and_mem_presets(insert_file: Path) -> None:
    cpu = run_cli(["report", "--utc", "-cpu", str(insert_file)])
    mem = run_cli(["report", "--utc", "-cpu", "-mem", str(insert_file)])

    assert_SUCCESS(cpu)
    assert_SUCCESS(mem)
    assert "    ctxt" in stdout_lines(cpu)[0]
    assert " MemFree" in stdout_lines(mem)[0]
    assert "ctxt" not in stdout_lines(mem)[0]


@mark_cli
def test_report_custom_metrics_win_over_presets(insert_file: Path) -> None:
    result = run_cli(["report", "--utc", "-mem", "-metrics", "a,only,", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result)[0] == "time" + " " * 13 + "    only"


@mark_cli
def test_report_malformed_definition_renders_zero(insert_file: Path) -> None:
    result = run_cli(
        ["report", "--utc", "-metrics", "serverStatus/uptime,bad", str(insert_file)]
    )

    assert_SUCCESS(result)
    lines = stdout_lines(result)
    assert lines[0] == "time" + " " * 13 + "     bad"
    assert lines[1].endswith("       0")
    assert lines[2].endswith("       0")


@mark_cli
def test_report_header_reprinted_every_ten_seconds(isolation: Path) -> None:
    dates = list(range(8000, 13_000, 1000))
    path = write_ftdc(isolation / "metrics.x", opcounter_samples(dates, [1] * len(dates)))

    result = run_cli(
        ["report", "--utc", "-metrics", "serverStatus/opcounters/insert,i,", str(path)]
    )

    assert_SUCCESS(result)
    lines = stdout_lines(result)
    assert [line.startswith("time") for line in lines] == [
        True,  # upfront
        False,  # 8 s
        False,  # 9 s
        True,
        False,  # 10 s
        False,  # 11 s
        False,  # 12 s
    ]


@mark_cli
def test_report_directory_spans_files(isolation: Path) -> None:
    data_dir = isolation / "diagnostic.data"
    data_dir.mkdir()
    write_ftdc(data_dir / "metrics.2024-01-01T00-00-00Z-00000", opcounter_samples([1000], [5]))
    write_ftdc(data_dir / "metrics.interim", opcounter_samples([2000], [9]))

    result = run_cli(
        ["report", "--utc", "-metrics", "serverStatus/opcounters/insert,ins,d", str(data_dir)]
    )

    assert_SUCCESS(result)
    assert stdout_lines(result)[1:] == [
        "70-01-01 00:00:01       0",
        "70-01-01 00:00:02       4",
    ]


@mark_cli
def test_report_uses_config_file(isolation: Path, insert_file: Path) -> None:
    (isolation / "ftdcstat.toml").write_text(
        "root = true\n"
        "[report]\n"
        "width = 4\n"
        "preset = 'mine'\n"
        "utc = true\n"
        "[presets]\n"
        "mine = 'serverStatus/opcounters/insert,ins,d'\n",
        encoding="utf-8",
    )

    result = run_cli(["report", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result) == [
        "time" + " " * 13 + " ins",
        "70-01-01 00:00:01   0",
        "70-01-01 00:00:02   3",
    ]


@mark_cli
def test_report_cli_overrides_config(isolation: Path, insert_file: Path) -> None:
    (isolation / "ftdcstat.toml").write_text(
        "root = true\n[report]\nwidth = 4\n", encoding="utf-8"
    )

    result = run_cli(["report", "--utc", "-width", "6", "-metrics", "a,abc,", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result)[0] == "time" + " " * 13 + "   abc"


@mark_cli
def test_report_no_config_ignores_discovered_file(isolation: Path, insert_file: Path) -> None:
    (isolation / "ftdcstat.toml").write_text(
        "root = true\n[report]\nwidth = 4\n", encoding="utf-8"
    )

    result = run_cli(["report", "--no-config", "--utc", "-metrics", "a,abc,", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result)[0] == "time" + " " * 13 + "     abc"


@mark_cli
def test_report_explicit_config_file(isolation: Path, insert_file: Path) -> None:
    extra = isolation / "extra.toml"
    extra.write_text("[report]\nwidth = 3\nmetrics = 'a,abcdef,'\n", encoding="utf-8")

    result = run_cli(["report", "--utc", "--config", str(extra), str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result)[0] == "time" + " " * 13 + "abc"


@mark_cli
def test_report_keys_flag_lists_keys(insert_file: Path) -> None:
    result = run_cli(["report", "-keys", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result) == [
        "replSetGetStatus/date",
        "serverStatus/opcounters/insert",
        "serverStatus/uptime",
    ]


@mark_cli
def test_report_verbose_summary(insert_file: Path) -> None:
    result = run_cli(["-v", "report", "--utc", str(insert_file)])

    assert_SUCCESS(result)
    assert stdout_lines(result)[-1] == "2 row(s) from 1 chunk(s), 11 column(s)"


@mark_cli
def test_report_invalid_width_is_usage_error(insert_file: Path) -> None:
    result = run_cli(["report", "-width", "0", str(insert_file)])

    assert_exit(result, 2)


@mark_cli
def test_report_invalid_config_value(isolation: Path, insert_file: Path) -> None:
    (isolation / "ftdcstat.toml").write_text(
        "root = true\n[report]\nwidth = 'wide'\n", encoding="utf-8"
    )

    result = run_cli(["report", str(insert_file)])

    assert_exit(result, 78)


@mark_cli
def test_path_without_command_runs_report(insert_file: Path) -> None:
    implicit = run_cli(["--utc", str(insert_file)])
    explicit = run_cli(["report", "--utc", str(insert_file)])

    assert_SUCCESS(implicit)
    assert implicit.stdout == explicit.stdout
    assert stdout_lines(implicit)[0] == GENERAL_HEADER


@mark_cli
def test_group_options_before_implicit_report(insert_file: Path) -> None:
    result = run_cli(["-vv", "--color", "never", "-cpu", "--utc", str(insert_file)])

    assert_SUCCESS(result)
    lines = stdout_lines(result)
    assert "    ctxt" in lines[0]
    assert lines[-1] == "2 row(s) from 1 chunk(s), 11 column(s)"


@mark_cli
def test_unknown_word_is_treated_as_missing_path(isolation: Path) -> None:
    result = run_cli(["reprot"])

    assert_exit(result, 66)
