from collections.abc import Mapping
from typing import Any, Dict

from ._model import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)

__all__ = ("to_builtins",)


def to_builtins(obj: GeoJSON) -> Dict[str, Any]:
    """Convert a GeoJSON object into its canonical generic JSON tree.

    The returned dict always has ``type`` as its first key. No validation is
    performed; `None` children are emitted as ``None``.

    Parameters
    ----------
    obj : GeoJSON
        The object to convert.

    Returns
    -------
    node : dict
    """
    try:
        encode = _ENCODERS[type(obj)]
    except KeyError:
        raise TypeError(
            f"Encoding objects of type {type(obj).__name__} is unsupported"
        ) from None
    return encode(obj)


def _position(p):
    if isinstance(p, Position):
        return list(p.coordinates)
    return p


def _positions(seq):
    return [_position(p) for p in seq]


def _nested(seq, inner):
    return [None if el is None else inner(el) for el in seq]


def _geometry(obj):
    return None if obj is None else to_builtins(obj)


def _other(obj):
    # Children of the wrong kind are emitted as they are
    return to_builtins(obj) if isinstance(obj, GeoJSON) else obj


def _line(ls):
    if isinstance(ls, LineString):
        return _positions(ls.coordinates)
    return _other(ls)


def _ring(ring):
    if isinstance(ring, (list, tuple)):
        return _positions(ring)
    return _other(ring)


def _encode_point(obj):
    return {"type": "Point", "coordinates": _position(obj.coordinates)}


def _encode_multipoint(obj):
    return {"type": "MultiPoint", "coordinates": _positions(obj.coordinates)}


def _encode_linestring(obj):
    return {"type": "LineString", "coordinates": _positions(obj.coordinates)}


def _encode_multilinestring(obj):
    return {
        "type": "MultiLineString",
        "coordinates": _nested(obj.line_strings, _line),
    }


def _rings(polygon):
    if isinstance(polygon, Polygon):
        return _nested(polygon.rings, _ring)
    return _other(polygon)


def _encode_polygon(obj):
    return {"type": "Polygon", "coordinates": _rings(obj)}


def _encode_multipolygon(obj):
    return {"type": "MultiPolygon", "coordinates": _nested(obj.polygons, _rings)}


def _encode_geometrycollection(obj):
    return {
        "type": "GeometryCollection",
        "geometries": [_geometry(g) for g in obj.geometries],
    }


def _properties(props):
    return dict(props) if isinstance(props, Mapping) else props


def _encode_feature(obj):
    out = {
        "type": "Feature",
        "geometry": _geometry(obj.geometry),
        "properties": _properties(obj.properties),
    }
    if obj.id is not None:
        out["id"] = obj.id
    if obj.bbox is not None:
        out["bbox"] = list(obj.bbox)
    return out


def _encode_featurecollection(obj):
    out = {
        "type": "FeatureCollection",
        "features": [_geometry(f) for f in obj.features],
    }
    if obj.bbox is not None:
        out["bbox"] = list(obj.bbox)
    return out


_ENCODERS = {
    Point: _encode_point,
    MultiPoint: _encode_multipoint,
    LineString: _encode_linestring,
    MultiLineString: _encode_multilinestring,
    Polygon: _encode_polygon,
    MultiPolygon: _encode_multipolygon,
    GeometryCollection: _encode_geometrycollection,
    Feature: _encode_feature,
    FeatureCollection: _encode_featurecollection,
}
