"""Subcommand modules for tenurectl.

Provides register_commands() which uses deferred imports to keep
``tenurectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tenurectl.commands.measure import measure
    from tenurectl.commands.total import total

    cli.add_command(measure)
    cli.add_command(total)
