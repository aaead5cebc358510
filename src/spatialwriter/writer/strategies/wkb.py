"""OGC Well-Known Binary strategy.

Layout::

    [byte order: u8 = 1][type: u32][coordinates]

Points inside a LineString or a Polygon ring are bare coordinate pairs.
Members of a Multi* geometry are complete WKB geometries, each with its
own byte order and type. The SRID is ignored and points are always
written X then Y.

See https://libgeos.org/specifications/wkb/#standard-wkb
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
from spatialwriter.domain.types import BinaryFormat
from spatialwriter.writer.strategies.base import BinaryStrategy

if TYPE_CHECKING:
    from spatialwriter.domain.geometry import Geometry
    from spatialwriter.writer.packing import BinaryBuffer


class WkbBinaryStrategy(BinaryStrategy):
    """Little-endian 2D WKB."""

    name = BinaryFormat.WKB.value

    def _write(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        self._write_byte_order(buffer)
        buffer.write_uint32(self._type_code(geometry))
        self._write_coordinates(buffer, geometry)

    def _write_coordinates(self, buffer: BinaryBuffer, geometry: Geometry) -> None:
        match geometry:
            case Point():
                self._write_point(buffer, geometry)
            case LineString():
                self._write_line_string(buffer, geometry)
            case Polygon():
                self._write_polygon(buffer, geometry)
            case MultiPoint():
                self._write_members(buffer, geometry.points)
            case MultiLineString():
                self._write_members(buffer, geometry.line_strings)
            case MultiPolygon():
                self._write_members(buffer, geometry.polygons)
            case _:
                self._unsupported(geometry)

    @staticmethod
    def _write_point(buffer: BinaryBuffer, point: Point) -> None:
        buffer.write_point(point.x, point.y)

    def _write_line_string(self, buffer: BinaryBuffer, line_string: LineString) -> None:
        buffer.write_uint32(len(line_string.points))
        for point in line_string.points:
            self._write_point(buffer, point)

    def _write_polygon(self, buffer: BinaryBuffer, polygon: Polygon) -> None:
        buffer.write_uint32(len(polygon.rings))
        for ring in polygon.rings:
            self._write_line_string(buffer, ring)

    def _write_members(self, buffer: BinaryBuffer, members: tuple[Geometry, ...]) -> None:
        """Write a member count, then every member through the whole encoder."""
        buffer.write_uint32(len(members))
        for member in members:
            self._write(buffer, member)
