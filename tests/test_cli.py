"""Tests for the root tenurectl CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tenurectl import __version__
from tenurectl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "tenurectl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/absent.toml"], ["--locale", "ar"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


def test_unknown_locale_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--locale", "fr", "measure", "2023-01-01", "2023-01-02"])
    assert result.exit_code == 2


@pytest.mark.parametrize("name", ["measure", "total"])
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_reports_error(cli_runner: CliRunner, work_dir: Path) -> None:
    (work_dir / "tenurectl.toml").write_text("[display\n")
    result = cli_runner.invoke(cli, ["measure", "2023-01-01", "2023-01-02"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
