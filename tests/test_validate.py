import math

import pytest
from utils import square

from geotree import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    is_valid,
)

P1 = Position(100.0, 0.0)
P2 = Position(101.0, 1.0)


class TestPositions:
    @pytest.mark.parametrize(
        "pos",
        [Position(0, 0), Position(-180.0, 90.0), Position(1.5, 2.5, -10.0)],
    )
    def test_valid(self, pos):
        assert Point(pos).is_valid()

    @pytest.mark.parametrize(
        "pos",
        [
            Position(math.nan, 0.0),
            Position(0.0, math.inf),
            Position(0.0, 0.0, -math.inf),
            Position(True, 1.0),
            Position("1", 1.0),
            Position(None, 1.0),
            Position(1.0, 2.0, "high"),
        ],
    )
    def test_invalid(self, pos):
        assert not Point(pos).is_valid()

    def test_point_without_position(self):
        assert not Point(None).is_valid()


class TestMinimums:
    def test_multipoint(self):
        assert not MultiPoint().is_valid()
        assert not MultiPoint([P1]).is_valid()
        assert MultiPoint([P1, P2]).is_valid()
        assert MultiPoint([P1, P1]).is_valid()
        assert not MultiPoint([P1, Position(math.nan, 0)]).is_valid()
        assert not MultiPoint([P1, None]).is_valid()

    def test_linestring(self):
        assert not LineString().is_valid()
        assert not LineString([P1]).is_valid()
        assert LineString([P1, P2]).is_valid()
        assert not LineString([P1, P2, None]).is_valid()

    def test_multilinestring(self):
        ls = LineString([P1, P2])
        assert not MultiLineString().is_valid()
        assert MultiLineString([ls]).is_valid()
        assert not MultiLineString([ls, None]).is_valid()
        assert not MultiLineString([ls, LineString([P1])]).is_valid()
        assert not MultiLineString([ls, Point(P1)]).is_valid()


class TestPolygon:
    def test_valid(self):
        assert Polygon([square()]).is_valid()
        assert Polygon([square(), square(0.25, 0.25, 0.5)]).is_valid()

    def test_no_rings(self):
        assert not Polygon().is_valid()

    def test_unclosed_ring(self):
        assert not Polygon([square()[:-1]]).is_valid()

    def test_short_ring(self):
        a, b = Position(0, 0), Position(1, 0)
        assert not Polygon([(a, b, a)]).is_valid()
        # closed, four positions, even though degenerate
        assert Polygon([(a, b, b, a)]).is_valid()

    def test_invalid_hole(self):
        assert not Polygon([square(), square()[:-1]]).is_valid()

    def test_null_ring(self):
        assert not Polygon([square(), None]).is_valid()

    def test_non_finite_position_in_ring(self):
        ring = list(square())
        ring[2] = Position(math.nan, 1.0)
        assert not Polygon([ring]).is_valid()

    def test_multipolygon(self):
        assert not MultiPolygon().is_valid()
        assert MultiPolygon([Polygon([square()]), Polygon([square(3, 3)])]).is_valid()
        assert not MultiPolygon([Polygon([square()]), Polygon()]).is_valid()
        assert not MultiPolygon([Polygon([square()]), None]).is_valid()
        assert not MultiPolygon([LineString([P1, P2])]).is_valid()


class TestCollections:
    def test_geometry_collection(self):
        assert GeometryCollection().is_valid()
        assert GeometryCollection([Point(P1), MultiPoint([P1, P2])]).is_valid()
        assert not GeometryCollection([Point(P1), MultiPoint([P1])]).is_valid()
        assert not GeometryCollection([None]).is_valid()
        assert not GeometryCollection([Feature()]).is_valid()

    def test_invalid_at_depth(self):
        bad = GeometryCollection(
            [GeometryCollection([GeometryCollection([Point(Position(math.nan, 0))])])]
        )
        assert not bad.is_valid()
        assert not FeatureCollection([Feature(bad)]).is_valid()

    def test_feature(self):
        assert Feature().is_valid()
        assert Feature(Point(P1), {"any": object()}, id="x").is_valid()
        assert Feature(Point(P1), id=3).is_valid()
        assert not Feature(MultiPoint([P1])).is_valid()
        assert not Feature(Feature()).is_valid()
        assert not Feature(Point(P1), properties=[1, 2]).is_valid()
        assert not Feature(Point(P1), id=[1]).is_valid()
        assert not Feature(Point(P1), id=math.nan).is_valid()

    def test_feature_collection(self):
        assert FeatureCollection().is_valid()
        assert FeatureCollection([Feature(), Feature(Point(P1))]).is_valid()
        assert not FeatureCollection([Feature(), None]).is_valid()
        assert not FeatureCollection([Point(P1)]).is_valid()


@pytest.mark.parametrize("obj", [None, 1, "Point", P1, {"type": "Point"}])
def test_non_geojson_is_invalid(obj):
    assert is_valid(obj) is False


def test_reordering_does_not_change_validity():
    positions = [Position(float(i), float(i)) for i in range(5)]
    for n in range(len(positions)):
        rotated = positions[n:] + positions[:n]
        assert MultiPoint(rotated).is_valid()
        assert MultiPoint(rotated[:1]).is_valid() is False
