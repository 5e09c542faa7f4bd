"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from tenurectl.config.logging import configure_logging
from tenurectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tenurectl.config.settings import TenureSettings
    from tenurectl.services.experience import ExperienceService
    from tenurectl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: TenureSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        structlog.get_logger("tenurectl.cli").debug(
            "settings.loaded",
            config_path=str(settings.config_path) if settings.config_path else None,
            locale=settings.display.locale,
        )

    @property
    def service(self) -> ExperienceService:
        from tenurectl.services.experience import ExperienceService

        return ExperienceService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            locale=self.settings.display.locale,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
