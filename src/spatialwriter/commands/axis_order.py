"""Command: show the axis order of an SRID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from spatialwriter.commands._base import SwCommand

if TYPE_CHECKING:
    from spatialwriter.commands._context import AppContext


@click.command(
    "axis-order",
    cls=SwCommand,
    examples="""\
  spatialwriter axis-order 4326
  spatialwriter --json axis-order 7035""",
)
@click.argument("srid", type=click.IntRange(0, 2**32 - 1))
@click.pass_obj
def axis_order(app: AppContext, srid: int) -> None:
    """Print XY or YX: the order MySQL stores coordinates for SRID."""
    app.emit(app.service.axis_order(srid))
