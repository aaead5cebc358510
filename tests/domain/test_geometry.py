"""Tests for geometry value objects."""

from __future__ import annotations

import dataclasses

import pytest

from spatialwriter.domain.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from spatialwriter.domain.types import WKB_TYPE_CODES, GeometryType


class TestTypeTags:
    @pytest.mark.parametrize(
        ("cls", "tag", "code"),
        [
            (Point, GeometryType.POINT, 1),
            (LineString, GeometryType.LINESTRING, 2),
            (Polygon, GeometryType.POLYGON, 3),
            (MultiPoint, GeometryType.MULTIPOINT, 4),
            (MultiLineString, GeometryType.MULTILINESTRING, 5),
            (MultiPolygon, GeometryType.MULTIPOLYGON, 6),
            (GeometryCollection, GeometryType.GEOMETRYCOLLECTION, 7),
        ],
    )
    def test_tag_and_code(self, cls: type, tag: GeometryType, code: int) -> None:
        assert cls.type is tag
        assert WKB_TYPE_CODES[cls.type] == code

    def test_type_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(Point)]
        assert names == ["x", "y", "srid"]


class TestFromCoordinates:
    def test_point(self) -> None:
        point = Point.from_coordinates([1, 2], srid=4326)
        assert point == Point(1.0, 2.0, 4326)
        assert isinstance(point.x, float)

    def test_line_string_children_have_no_srid(self) -> None:
        line = LineString.from_coordinates([[0, 0], [1, 1]], srid=4326)
        assert line.srid == 4326
        assert line.points == (Point(0.0, 0.0), Point(1.0, 1.0))
        assert all(p.srid is None for p in line.points)

    def test_polygon_rings(self) -> None:
        polygon = Polygon.from_coordinates(
            [
                [[0, 0], [0, 1], [1, 1], [0, 0]],
                [[0.2, 0.2], [0.2, 0.4], [0.4, 0.4], [0.2, 0.2]],
            ]
        )
        assert polygon.exterior is not None
        assert len(polygon.exterior.points) == 4
        assert len(polygon.interiors) == 1

    def test_empty_polygon_has_no_exterior(self) -> None:
        polygon = Polygon(())
        assert polygon.exterior is None
        assert polygon.interiors == ()

    def test_multi_point(self) -> None:
        multi = MultiPoint.from_coordinates([[0, 3], [1, 2]])
        assert multi.points == (Point(0.0, 3.0), Point(1.0, 2.0))

    def test_multi_line_string(self) -> None:
        multi = MultiLineString.from_coordinates([[[0, 0], [1, 1]], [[2, 2], [3, 3]]])
        assert len(multi.line_strings) == 2

    def test_multi_polygon(self) -> None:
        multi = MultiPolygon.from_coordinates([[[[0, 0], [1, 0], [0, 1], [0, 0]]]], srid=7035)
        assert multi.srid == 7035
        assert len(multi.polygons[0].rings[0].points) == 4

    def test_point_with_three_ordinates_rejected(self) -> None:
        with pytest.raises(ValueError):
            Point.from_coordinates([1, 2, 3])


class TestImmutability:
    def test_frozen(self) -> None:
        point = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 3  # type: ignore[misc]

    def test_hashable(self) -> None:
        line = LineString.from_coordinates([[0, 0], [1, 1]])
        assert hash(line) == hash(LineString.from_coordinates([[0, 0], [1, 1]]))

    def test_with_srid_returns_copy(self) -> None:
        line = LineString.from_coordinates([[0, 0], [1, 1]])
        tagged = line.with_srid(4326)
        assert tagged.srid == 4326
        assert line.srid is None
        assert tagged.points is line.points

    def test_collection_with_srid(self) -> None:
        collection = GeometryCollection((Point(0, 0),))
        assert collection.with_srid(3857).srid == 3857
