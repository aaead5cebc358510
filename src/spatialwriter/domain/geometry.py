"""Geometry value objects.

A closed set of immutable geometries: Point, LineString, Polygon and
their Multi* variants, plus GeometryCollection which only exists as a
type tag for now. Children are stored as tuples so instances stay
hashable and safe to share.

The SRID belongs to the geometry handed to a writer. Children may carry
one too, but writers decide whether it matters (see the MySQL strategy).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import ClassVar, Self

from spatialwriter.domain.types import GeometryType

Coordinates = Sequence[float]


@dataclass(frozen=True)
class Point:
    """A two-dimensional position."""

    type: ClassVar[GeometryType] = GeometryType.POINT

    x: float
    y: float
    srid: int | None = None

    @classmethod
    def from_coordinates(cls, coordinates: Coordinates, srid: int | None = None) -> Self:
        x, y = coordinates
        return cls(float(x), float(y), srid)

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class LineString:
    """An ordered sequence of points."""

    type: ClassVar[GeometryType] = GeometryType.LINESTRING

    points: tuple[Point, ...]
    srid: int | None = None

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[Coordinates], srid: int | None = None
    ) -> Self:
        return cls(tuple(Point.from_coordinates(c) for c in coordinates), srid)

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class Polygon:
    """An exterior ring followed by zero or more holes.

    Rings are not checked for closure or orientation.
    """

    type: ClassVar[GeometryType] = GeometryType.POLYGON

    rings: tuple[LineString, ...]
    srid: int | None = None

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[Iterable[Coordinates]], srid: int | None = None
    ) -> Self:
        return cls(tuple(LineString.from_coordinates(r) for r in coordinates), srid)

    @property
    def exterior(self) -> LineString | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LineString, ...]:
        return self.rings[1:]

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class MultiPoint:
    type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    points: tuple[Point, ...]
    srid: int | None = None

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[Coordinates], srid: int | None = None
    ) -> Self:
        return cls(tuple(Point.from_coordinates(c) for c in coordinates), srid)

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class MultiLineString:
    type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    line_strings: tuple[LineString, ...]
    srid: int | None = None

    @classmethod
    def from_coordinates(
        cls, coordinates: Iterable[Iterable[Coordinates]], srid: int | None = None
    ) -> Self:
        return cls(tuple(LineString.from_coordinates(ls) for ls in coordinates), srid)

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class MultiPolygon:
    type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    polygons: tuple[Polygon, ...]
    srid: int | None = None

    @classmethod
    def from_coordinates(
        cls,
        coordinates: Iterable[Iterable[Iterable[Coordinates]]],
        srid: int | None = None,
    ) -> Self:
        return cls(tuple(Polygon.from_coordinates(p) for p in coordinates), srid)

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


@dataclass(frozen=True)
class GeometryCollection:
    """Heterogeneous collection.

    Writers know its type code but cannot encode its members yet.
    """

    type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION

    geometries: tuple[Geometry, ...]
    srid: int | None = None

    def with_srid(self, srid: int | None) -> Self:
        return dataclasses.replace(self, srid=srid)


Geometry = (
    Point
    | LineString
    | Polygon
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)
