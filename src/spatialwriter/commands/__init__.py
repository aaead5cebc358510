"""Subcommand modules for spatialwriter.

Provides register_commands() which uses deferred imports so the command
modules are only loaded once the CLI is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from spatialwriter.commands.axis_order import axis_order
    from spatialwriter.commands.convert import convert
    from spatialwriter.commands.formats import formats

    cli.add_command(convert)
    cli.add_command(axis_order)
    cli.add_command(formats)
