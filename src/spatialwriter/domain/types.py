"""Geometry types, axis orders, and binary format names.

The numeric codes are shared by WKB, EWKB and the MySQL internal
storage format. GeometryCollection owns code 7 even though no encoder
writes its body yet.
"""

from __future__ import annotations

from enum import StrEnum


class GeometryType(StrEnum):
    """Type tag carried by every geometry."""

    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"


class AxisOrder(StrEnum):
    """Order in which a coordinate pair is serialized."""

    XY = "XY"
    YX = "YX"


class BinaryFormat(StrEnum):
    """Built-in binary formats."""

    WKB = "wkb"
    EWKB = "ewkb"
    MYSQL = "mysql"


WKB_TYPE_CODES: dict[str, int] = {
    GeometryType.POINT: 1,
    GeometryType.LINESTRING: 2,
    GeometryType.POLYGON: 3,
    GeometryType.MULTIPOINT: 4,
    GeometryType.MULTILINESTRING: 5,
    GeometryType.MULTIPOLYGON: 6,
    GeometryType.GEOMETRYCOLLECTION: 7,
}

# High bit of the EWKB type word announcing a 4-byte SRID after it.
EWKB_SRID_FLAG = 0x20000000

# Byte order marker; everything is written little endian.
LITTLE_ENDIAN = 1
