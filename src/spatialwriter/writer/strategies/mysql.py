"""MySQL internal geometry storage strategy.

Layout::

    [srid: u32, 0 if none][byte order: u8 = 1][type: u32][coordinates]

Differences from WKB:

- the SRID comes first and is always present;
- every member of a Multi* geometry gets its own byte order and type,
  but not its own SRID;
- coordinate pairs follow the axis order of the SRID, so a point in
  EPSG:4326 is written latitude (Y) first.

The SRID that decides the axis order is threaded down the recursion:
the top-level SRID wins, and a member's own SRID is only used when no
enclosing geometry has one.

The result values can be checked against the server with::

    SELECT HEX(ST_GeomFromText('POINT(0 0)', 4326));
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spatialwriter.domain.geometry import (
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from spatialwriter.domain.types import AxisOrder, BinaryFormat
from spatialwriter.writer.axis_order import default_helper
from spatialwriter.writer.strategies.base import BinaryStrategy

if TYPE_CHECKING:
    from spatialwriter.domain.geometry import Geometry
    from spatialwriter.writer.axis_order import SpatialReferenceHelper
    from spatialwriter.writer.packing import BinaryBuffer


class MySQLBinaryStrategy(BinaryStrategy):
    """Encode geometries the way MySQL stores them internally.

    Args:
        reference: Axis order resolver. The process-wide helper when None.
    """

    name = BinaryFormat.MYSQL.value

    def __init__(self, reference: SpatialReferenceHelper | None = None) -> None:
        self._reference = reference

    @property
    def reference(self) -> SpatialReferenceHelper:
        return self._reference or default_helper()

    def _write(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        srid = getattr(geometry, "srid", None)
        buffer.write_uint32(srid or 0)
        self._write_header(buffer, geometry)
        self._write_coordinates(buffer, geometry, srid)

    def _write_header(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        self._write_byte_order(buffer)
        buffer.write_uint32(self._type_code(geometry))

    def _write_coordinates(
        self, buffer: BinaryBuffer, geometry: Geometry, srid: int | None
    ) -> None:
        match geometry:
            case Point():
                self._write_point(buffer, geometry, srid)
            case LineString():
                self._write_line_string(buffer, geometry, srid)
            case Polygon():
                self._write_polygon(buffer, geometry, srid)
            case MultiPoint():
                self._write_members(buffer, geometry, geometry.points, srid)
            case MultiLineString():
                self._write_members(buffer, geometry, geometry.line_strings, srid)
            case MultiPolygon():
                self._write_members(buffer, geometry, geometry.polygons, srid)
            case _:
                self._unsupported(geometry)

    def _write_point(self, buffer: BinaryBuffer, point: Point, srid: int | None) -> None:
        effective = srid if srid is not None else point.srid
        if self.reference.get_axis_order(effective) is AxisOrder.YX:
            buffer.write_point(point.y, point.x)
        else:
            buffer.write_point(point.x, point.y)

    def _write_line_string(
        self, buffer: BinaryBuffer, line_string: LineString, srid: int | None
    ) -> None:
        effective = srid if srid is not None else line_string.srid
        buffer.write_uint32(len(line_string.points))
        for point in line_string.points:
            self._write_point(buffer, point, effective)

    def _write_polygon(self, buffer: BinaryBuffer, polygon: Polygon, srid: int | None) -> None:
        effective = srid if srid is not None else polygon.srid
        buffer.write_uint32(len(polygon.rings))
        for ring in polygon.rings:
            self._write_line_string(buffer, ring, effective)

    def _write_members(
        self,
        buffer: BinaryBuffer,
        container: Geometry,
        members: tuple[Geometry, ...],
        srid: int | None,
    ) -> None:
        effective = srid if srid is not None else container.srid
        buffer.write_uint32(len(members))
        for member in members:
            self._write_header(buffer, member)
            self._write_coordinates(buffer, member, effective)
