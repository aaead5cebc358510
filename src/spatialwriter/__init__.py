"""spatialwriter: write geometries as WKB, EWKB, or MySQL internal binary.

Quick start::

    from spatialwriter import MySQLBinaryStrategy, Point, Writer

    writer = Writer(MySQLBinaryStrategy())
    writer.convert(Point(1, 2, srid=4326)).hex()
"""

from __future__ import annotations

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
from spatialwriter.domain.types import AxisOrder, BinaryFormat, GeometryType
from spatialwriter.errors import (
    SpatialWriterError,
    UnavailableResourceError,
    UnsupportedDimensionError,
    UnsupportedGeometryVariantError,
    UnsupportedTypeCodeError,
)
from spatialwriter.writer.axis_order import get_axis_order
from spatialwriter.writer.facade import Writer
from spatialwriter.writer.strategies import (
    BinaryStrategy,
    EwkbBinaryStrategy,
    MySQLBinaryStrategy,
    WkbBinaryStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "AxisOrder",
    "BinaryFormat",
    "BinaryStrategy",
    "EwkbBinaryStrategy",
    "Geometry",
    "GeometryCollection",
    "GeometryType",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "MySQLBinaryStrategy",
    "Point",
    "Polygon",
    "SpatialWriterError",
    "UnavailableResourceError",
    "UnsupportedDimensionError",
    "UnsupportedGeometryVariantError",
    "UnsupportedTypeCodeError",
    "WkbBinaryStrategy",
    "Writer",
    "__version__",
    "get_axis_order",
]
