"""Command: convert a GeoJSON geometry to WKB, EWKB or MySQL binary."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from spatialwriter.commands._base import SwCommand
from spatialwriter.domain.geojson import MAX_SRID

if TYPE_CHECKING:
    from spatialwriter.commands._context import AppContext

_CONVERT_EXAMPLES = """\
  spatialwriter convert '{"type": "Point", "coordinates": [1, 2]}'
  spatialwriter convert --format ewkb --srid 4326 '{"type": "Point", "coordinates": [1, 2]}'
  spatialwriter convert --format mysql --input parcel.geojson
  cat parcel.geojson | spatialwriter --json convert -f mysql"""


@click.command(cls=SwCommand, examples=_CONVERT_EXAMPLES)
@click.argument("geojson", required=False)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the GeoJSON geometry from a file.",
)
@click.option(
    "-f",
    "--format",
    "fmt",
    default=None,
    help="Binary format (wkb, ewkb, mysql, or a plugin format). Default from config.",
)
@click.option(
    "--srid",
    type=click.IntRange(0, MAX_SRID),
    default=None,
    help="SRID of the geometry. Overrides a GeoJSON crs member.",
)
@click.pass_obj
def convert(
    app: AppContext,
    geojson: str | None,
    input_path: Path | None,
    fmt: str | None,
    srid: int | None,
) -> None:
    """Print the hex encoding of a GeoJSON geometry.

    Reads GEOJSON from the argument, --input, or stdin.
    """
    if geojson is not None and input_path is not None:
        msg = "Pass the geometry either as an argument or with --input, not both."
        raise click.UsageError(msg)

    if input_path is not None:
        try:
            text = input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            msg = f"{input_path} is not UTF-8 text: {exc.reason}"
            raise click.BadParameter(msg, param_hint="--input") from exc
    elif geojson is None or geojson == "-":
        text = click.get_text_stream("stdin").read()
    else:
        text = geojson

    app.emit(app.service.convert(text, fmt=fmt, srid=srid))
