"""Build geometries from GeoJSON.

Accepts the seven GeoJSON geometry objects and a Feature wrapping one
of them. Positions must be two-dimensional: a third or fourth ordinate
is rejected rather than dropped.

The SRID comes from the explicit *srid* argument or, failing that,
from a legacy named ``crs`` member such as::

    {"type": "name", "properties": {"name": "EPSG:4326"}}
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from typing import Any

from spatialwriter.domain.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from spatialwriter.errors import UnsupportedDimensionError

_CRS_NAME = re.compile(r"EPSG:(?:[\d.]*:)?(\d+)$", re.IGNORECASE)

# SRIDs are written as unsigned 32-bit integers.
MAX_SRID = 2**32 - 1

# Nesting depth of positions inside "coordinates" for each type.
_DEPTHS: dict[str, int] = {
    "Point": 0,
    "LineString": 1,
    "MultiPoint": 1,
    "Polygon": 2,
    "MultiLineString": 2,
    "MultiPolygon": 3,
}

_BUILDERS: dict[str, Callable[..., Geometry]] = {
    "Point": Point.from_coordinates,
    "LineString": LineString.from_coordinates,
    "MultiPoint": MultiPoint.from_coordinates,
    "Polygon": Polygon.from_coordinates,
    "MultiLineString": MultiLineString.from_coordinates,
    "MultiPolygon": MultiPolygon.from_coordinates,
}


def srid_from_crs(crs: Any) -> int | None:
    """Extract an EPSG code from a named GeoJSON ``crs`` member.

    Returns None when *crs* is absent or not an EPSG name.

    Raises:
        ValueError: If the EPSG code does not fit in 32 bits.
    """
    if not isinstance(crs, Mapping) or crs.get("type") != "name":
        return None
    properties = crs.get("properties")
    if not isinstance(properties, Mapping):
        return None
    name = properties.get("name")
    if not isinstance(name, str):
        return None
    match = _CRS_NAME.search(name.strip())
    if match is None:
        return None
    srid = int(match.group(1))
    if srid > MAX_SRID:
        msg = f"crs name {name!r} has an SRID outside 0..{MAX_SRID}"
        raise ValueError(msg)
    return srid


def _check_positions(coordinates: Any, depth: int, geometry_type: str) -> None:
    """Validate nesting and reject positions with Z or M ordinates."""
    if not isinstance(coordinates, (list, tuple)):
        msg = f"{geometry_type} coordinates must be an array, got {type(coordinates).__name__}"
        raise ValueError(msg)
    if depth > 0:
        for child in coordinates:
            _check_positions(child, depth - 1, geometry_type)
        return
    if len(coordinates) > 2:
        msg = (
            f"{geometry_type} position {list(coordinates)!r} has Z or M ordinates; "
            "only X and Y are supported"
        )
        raise UnsupportedDimensionError(msg)
    if len(coordinates) < 2:
        msg = f"{geometry_type} position {list(coordinates)!r} needs two ordinates"
        raise ValueError(msg)
    for value in coordinates:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"{geometry_type} ordinate {value!r} is not a number"
            raise ValueError(msg)
        try:
            float(value)
        except OverflowError as exc:
            msg = f"{geometry_type} ordinate is too large for a double"
            raise ValueError(msg) from exc


def from_geojson(data: Mapping[str, Any], srid: int | None = None) -> Geometry:
    """Build a geometry from a decoded GeoJSON mapping.

    Args:
        data: GeoJSON geometry or Feature.
        srid: SRID applied to the top-level geometry. Overrides ``crs``.

    Raises:
        ValueError: If the mapping is not a supported GeoJSON geometry
            or an SRID does not fit in 32 bits.
        UnsupportedDimensionError: If a position has more than two ordinates.
    """
    if not isinstance(data, Mapping):
        msg = f"GeoJSON object must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)

    if srid is None:
        srid = srid_from_crs(data.get("crs"))
    elif not 0 <= srid <= MAX_SRID:
        msg = f"SRID {srid} is outside 0..{MAX_SRID}"
        raise ValueError(msg)

    geometry_type = data.get("type")
    if geometry_type == "Feature":
        inner = data.get("geometry")
        if inner is None:
            msg = "GeoJSON Feature has no geometry"
            raise ValueError(msg)
        return from_geojson(inner, srid)

    if geometry_type == "GeometryCollection":
        members = data.get("geometries")
        if not isinstance(members, list):
            msg = "GeometryCollection geometries must be an array"
            raise ValueError(msg)
        return GeometryCollection(tuple(from_geojson(m) for m in members), srid)

    builder = _BUILDERS.get(geometry_type)  # type: ignore[arg-type]
    if builder is None:
        msg = f"Unsupported GeoJSON type: {geometry_type!r}"
        raise ValueError(msg)

    coordinates = data.get("coordinates")
    _check_positions(coordinates, _DEPTHS[geometry_type], geometry_type)
    return builder(coordinates, srid)


def parse_geojson(text: str, srid: int | None = None) -> Geometry:
    """Decode GeoJSON text and build its geometry.

    Raises:
        ValueError: If *text* is not valid JSON or not a supported geometry.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid GeoJSON: {exc}"
        raise ValueError(msg) from exc
    return from_geojson(data, srid)
