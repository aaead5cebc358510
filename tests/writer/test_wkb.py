"""Tests for the WKB strategy."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from spatialwriter.domain.geometry import (
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    Polygon,
)
from spatialwriter.errors import UnsupportedGeometryVariantError, UnsupportedTypeCodeError
from spatialwriter.writer.strategies import WkbBinaryStrategy


@dataclass(frozen=True)
class _Circle:
    type = "Circle"
    srid: int | None = None


@dataclass(frozen=True)
class _FakePoint:
    """Claims to be a Point but is not one of the geometry classes."""

    type = "Point"
    srid: int | None = None


def _hex(geometry: object) -> str:
    return WkbBinaryStrategy().execute_strategy(geometry).hex().upper()  # type: ignore[arg-type]


class TestWkbPoint:
    def test_origin(self) -> None:
        assert _hex(Point(0, 0)) == "010100000000000000000000000000000000000000"

    def test_negative(self) -> None:
        assert _hex(Point(-1, 1)) == "0101000000000000000000F0BF000000000000F03F"

    def test_floats(self) -> None:
        assert _hex(Point(42.2, 2.42)) == "01010000009A999999991945405C8FC2F5285C0340"

    @pytest.mark.parametrize("srid", [4326, 7035])
    def test_srid_ignored(self, srid: int) -> None:
        assert _hex(Point(1, -1, srid)) == "0101000000000000000000F03F000000000000F0BF"


class TestWkbLineString:
    def test_two_points(self) -> None:
        line = LineString.from_coordinates([[0, 0], [1, 1]])
        assert _hex(line) == (
            "010200000002000000"
            "00000000000000000000000000000000"
            "000000000000F03F000000000000F03F"
        )

    def test_empty(self) -> None:
        assert _hex(LineString(())) == "010200000000000000"


class TestWkbPolygon:
    def test_with_hole(self) -> None:
        polygon = Polygon.from_coordinates(
            [
                [[-1, 0], [0, -1], [1, 0], [0, 1], [-1, 0]],
                [[-2, 0], [0, -2], [2, 0], [0, 2], [-2, 0]],
            ]
        )
        assert _hex(polygon) == (
            "01030000000200000005000000000000000000F0BF0000000000000000000000000000000000"
            "0000000000F0BF000000000000F03F00000000000000000000000000000000000000000000F0"
            "3F000000000000F0BF00000000000000000500000000000000000000C0000000000000000000"
            "0000000000000000000000000000C00000000000000040000000000000000000000000000000"
            "00000000000000004000000000000000C00000000000000000"
        )


class TestWkbMulti:
    def test_multi_point_members_have_headers(self) -> None:
        multi = MultiPoint.from_coordinates([[0, 0], [0, 1], [1, 1]])
        assert _hex(multi) == (
            "0104000000030000000101000000000000000000000000000000000000000101000000000000"
            "0000000000000000000000F03F0101000000000000000000F03F000000000000F03F"
        )

    def test_members_never_carry_srid(self) -> None:
        multi = MultiPoint((Point(0, 0, 4326),), srid=4326)
        assert _hex(multi) == (
            "010400000001000000"
            "0101000000"
            "00000000000000000000000000000000"
        )


class TestWkbUnsupported:
    def test_geometry_collection(self) -> None:
        with pytest.raises(UnsupportedGeometryVariantError) as excinfo:
            _hex(GeometryCollection((Point(0, 0),)))
        assert excinfo.value.type_name == "GeometryCollection"
        assert excinfo.value.strategy == "wkb"

    def test_unknown_type_tag(self) -> None:
        with pytest.raises(UnsupportedTypeCodeError):
            _hex(_Circle())

    def test_foreign_class_with_known_tag(self) -> None:
        with pytest.raises(UnsupportedGeometryVariantError, match="_FakePoint"):
            _hex(_FakePoint())

    def test_unsupported_member_aborts_whole_conversion(self) -> None:
        multi = MultiPoint((Point(0, 0), _FakePoint()))  # type: ignore[arg-type]
        with pytest.raises(UnsupportedGeometryVariantError):
            _hex(multi)
