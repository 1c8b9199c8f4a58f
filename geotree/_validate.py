import math
from collections.abc import Mapping

from ._model import (
    Feature,
    FeatureCollection,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)

__all__ = ("is_valid",)

# Minimum element counts shared with the decoder
MIN_MULTIPOINT = 2
MIN_LINESTRING = 2
MIN_RING = 4


def is_valid(obj) -> bool:
    """Check that a GeoJSON object is structurally well formed.

    Validity is recursive: an invalid child at any depth makes the whole value
    invalid. This never raises, ``None`` or wrongly-typed children simply
    yield ``False``.
    """
    check = _VALIDATORS.get(type(obj))
    return check is not None and check(obj)


def _finite(x):
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        return False


def valid_position(p) -> bool:
    return (
        isinstance(p, Position)
        and _finite(p.lon)
        and _finite(p.lat)
        and (p.alt is None or _finite(p.alt))
    )


def _valid_positions(seq, minimum):
    return len(seq) >= minimum and all(valid_position(p) for p in seq)


def valid_ring(ring) -> bool:
    return (
        isinstance(ring, tuple)
        and _valid_positions(ring, MIN_RING)
        and ring[0] == ring[-1]
    )


def _all_valid(seq, cls):
    return all(isinstance(el, cls) and is_valid(el) for el in seq)


def _valid_point(obj):
    return valid_position(obj.coordinates)


def _valid_multipoint(obj):
    return _valid_positions(obj.coordinates, MIN_MULTIPOINT)


def _valid_linestring(obj):
    return _valid_positions(obj.coordinates, MIN_LINESTRING)


def _valid_multilinestring(obj):
    return len(obj.line_strings) > 0 and _all_valid(obj.line_strings, LineString)


def _valid_polygon(obj):
    return len(obj.rings) > 0 and all(valid_ring(r) for r in obj.rings)


def _valid_multipolygon(obj):
    return len(obj.polygons) > 0 and _all_valid(obj.polygons, Polygon)


def _valid_geometrycollection(obj):
    return _all_valid(obj.geometries, Geometry)


def _valid_feature(obj):
    if obj.geometry is not None and not (
        isinstance(obj.geometry, Geometry) and is_valid(obj.geometry)
    ):
        return False
    if not isinstance(obj.properties, Mapping):
        return False
    return obj.id is None or isinstance(obj.id, str) or _finite(obj.id)


def _valid_featurecollection(obj):
    return _all_valid(obj.features, Feature)


_VALIDATORS = {
    Point: _valid_point,
    MultiPoint: _valid_multipoint,
    LineString: _valid_linestring,
    MultiLineString: _valid_multilinestring,
    Polygon: _valid_polygon,
    MultiPolygon: _valid_multipolygon,
    GeometryCollection: _valid_geometrycollection,
    Feature: _valid_feature,
    FeatureCollection: _valid_featurecollection,
}
