"""Command: total professional experience across work periods."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tenurectl.commands._base import TenureCommand

if TYPE_CHECKING:
    from tenurectl.commands._context import AppContext


@click.command(
    cls=TenureCommand,
    examples="""\
  tenurectl total --period 2015-09-01 2018-06-30 --period 2019-01-07 2023-12-31
  tenurectl total --file periods.toml
  tenurectl --locale ar total --file periods.toml
  tenurectl -q total --file periods.toml --period 2024-01-01 2024-06-30""",
)
@click.option(
    "--period",
    "periods",
    type=(str, str),
    multiple=True,
    metavar="START END",
    help="A work period; repeat for several.",
)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file of [[period]] tables with start/end keys.",
)
@click.pass_obj
def total(app: AppContext, periods: tuple[tuple[str, str], ...], file_path: Path | None) -> None:
    """Total the experience across all given periods."""
    from tenurectl.domain.periods import ExperiencePeriod
    from tenurectl.services.experience import periods_from_pairs

    svc = app.service
    collected: list[ExperiencePeriod] = []

    if file_path is not None:
        loaded = svc.load_periods(file_path)
        if not loaded.ok:
            app.emit(loaded)
            return
        collected.extend(ExperiencePeriod.model_validate(p) for p in loaded.data["periods"])

    collected.extend(periods_from_pairs(periods))
    app.emit(svc.total_experience(collected))
