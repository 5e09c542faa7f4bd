"""Root CLI group for tenurectl with global flags and command registration."""

from __future__ import annotations

import click

from tenurectl import __version__
from tenurectl.commands import register_commands
from tenurectl.commands._context import AppContext
from tenurectl.config.settings import TenureSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tenurectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting duration.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--locale",
    type=click.Choice(["en", "ar"]),
    default=None,
    help="Label language (overrides [display] locale).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    locale: str | None,
) -> None:
    """tenurectl — professional experience calculator."""
    ctx.ensure_object(dict)
    settings = TenureSettings.from_cli(
        config_path=config_path,
        locale=locale,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
