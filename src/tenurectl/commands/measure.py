"""Command: measure a single work period."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tenurectl.commands._base import TenureCommand

if TYPE_CHECKING:
    from tenurectl.commands._context import AppContext


@click.command(
    cls=TenureCommand,
    examples="""\
  tenurectl measure 2023-01-15 2023-03-10
  tenurectl measure 15/01/2023 10/03/2023
  tenurectl --json measure 2020-02-01 2020-02-29""",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def measure(app: AppContext, start: str, end: str) -> None:
    """Measure the period from START through END (END inclusive)."""
    app.emit(app.service.measure_period(start, end))
