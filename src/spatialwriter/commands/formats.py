"""Command: list the available binary formats."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from spatialwriter.commands._context import AppContext


@click.command()
@click.pass_obj
def formats(app: AppContext) -> None:
    """List binary formats, plugin formats included."""
    app.emit(app.service.list_formats())
