from typing import Any, Optional, Type

from . import _bridge
from ._errors import (
    DecodeError,
    MissingKeyError,
    NonNumericCoordinateError,
    NotAnArrayError,
    NotAnObjectError,
    TooFewElementsError,
    TooManyElementsError,
    TypeMismatchError,
    UnknownTypeError,
)
from ._model import (
    Feature,
    FeatureCollection,
    GeoJSON,
    GeoJSONType,
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
from ._validate import MIN_LINESTRING, MIN_MULTIPOINT, MIN_RING

__all__ = ("convert", "check_target", "default_prefix", "target_name")

NOT_A_JSON_OBJECT = "not a JSON object"
UNKNOWN_TYPE = "unknown geometry type"
NOT_OF_TYPE = "not of expected type "
KEY_NOT_FOUND = "key not found: "
COORDINATES_NOT_ARRAY = "coordinates not an array"
COORDINATE_NOT_NUMERIC = "coordinate not numeric"


def target_name(type) -> str:
    if type is GeoJSON or type is Geometry:
        return type.__name__
    return type.__struct_config__.tag


def default_prefix(type) -> str:
    return f"Error while decoding {target_name(type)}: "


def check_target(type):
    if type not in _TARGETS:
        raise TypeError(f"Cannot decode into {type!r}, expected a GeoJSON type")


def convert(node: Any, type: Type[GeoJSON] = GeoJSON, prefix: Optional[str] = None):
    """Decode an already-parsed generic JSON node into a GeoJSON object.

    Parameters
    ----------
    node : Any
        A generic JSON node, as produced by a JSON parser.
    type : type, optional
        The kind to decode. Either `GeoJSON` (the default, any kind),
        `Geometry` (any geometry kind), or a concrete kind like `MultiPoint`.
    prefix : str, optional
        Context prepended to every error message. Defaults to
        ``"Error while decoding <type>: "``.

    Returns
    -------
    obj : GeoJSON

    Raises
    ------
    DecodeError
        On the first structural problem found, anywhere in the tree.
    """
    check_target(type)
    if prefix is None:
        prefix = default_prefix(type)
    return _decode_object(node, type, prefix, ())


def _read_type(node):
    value = node.get("type")
    if not _bridge.is_string(value):
        return None
    try:
        return GeoJSONType(value)
    except ValueError:
        return None


def _decode_object(node, target, prefix, path):
    if not _bridge.is_object(node):
        raise NotAnObjectError(prefix, NOT_A_JSON_OBJECT, path)

    kind = _read_type(node)
    if kind is None:
        raise UnknownTypeError(prefix, UNKNOWN_TYPE, path)

    cls, decode = _DECODERS[kind]
    if not issubclass(cls, target):
        raise TypeMismatchError(prefix, f'{NOT_OF_TYPE}"{target_name(target)}"', path)
    return decode(node, prefix, path)


def _require(node, key, prefix, path):
    try:
        return node[key]
    except KeyError:
        raise MissingKeyError(prefix, KEY_NOT_FOUND + key, path) from None


def _array(node, minimum, prefix, path, name="coordinates"):
    if not _bridge.is_array(node):
        raise NotAnArrayError(prefix, f"{name} not an array", path)
    if len(node) < minimum:
        raise TooFewElementsError(
            prefix, f"expected at least {minimum} elements, got {len(node)}", path
        )
    return node


def _coordinate(value):
    # integers beyond float precision are kept exact
    as_float = float(value)
    return as_float if as_float == value else value


def _position(node, prefix, path):
    _array(node, 2, prefix, path)
    if len(node) > 3:
        raise TooManyElementsError(
            prefix, f"expected at most 3 elements, got {len(node)}", path
        )
    for i, value in enumerate(node):
        if not _bridge.is_finite_number(value):
            raise NonNumericCoordinateError(prefix, COORDINATE_NOT_NUMERIC, path + (i,))
    return Position(*(_coordinate(v) for v in node))


def _positions(node, minimum, prefix, path):
    _array(node, minimum, prefix, path)
    return tuple(_position(el, prefix, path + (i,)) for i, el in enumerate(node))


def _rings(node, prefix, path):
    _array(node, 1, prefix, path)
    return tuple(
        _positions(el, MIN_RING, prefix, path + (i,)) for i, el in enumerate(node)
    )


def _decode_point(node, prefix, path):
    coords = _require(node, "coordinates", prefix, path)
    return Point(_position(coords, prefix, path + ("coordinates",)))


def _decode_multipoint(node, prefix, path):
    coords = _require(node, "coordinates", prefix, path)
    return MultiPoint(
        _positions(coords, MIN_MULTIPOINT, prefix, path + ("coordinates",))
    )


def _decode_linestring(node, prefix, path):
    coords = _require(node, "coordinates", prefix, path)
    return LineString(
        _positions(coords, MIN_LINESTRING, prefix, path + ("coordinates",))
    )


def _decode_multilinestring(node, prefix, path):
    cpath = path + ("coordinates",)
    coords = _array(_require(node, "coordinates", prefix, path), 1, prefix, cpath)
    return MultiLineString(
        tuple(
            LineString(_positions(el, MIN_LINESTRING, prefix, cpath + (i,)))
            for i, el in enumerate(coords)
        )
    )


def _decode_polygon(node, prefix, path):
    coords = _require(node, "coordinates", prefix, path)
    return Polygon(_rings(coords, prefix, path + ("coordinates",)))


def _decode_multipolygon(node, prefix, path):
    cpath = path + ("coordinates",)
    coords = _array(_require(node, "coordinates", prefix, path), 1, prefix, cpath)
    return MultiPolygon(
        tuple(Polygon(_rings(el, prefix, cpath + (i,))) for i, el in enumerate(coords))
    )


def _decode_geometrycollection(node, prefix, path):
    gpath = path + ("geometries",)
    geometries = _array(
        _require(node, "geometries", prefix, path), 0, prefix, gpath, "geometries"
    )
    return GeometryCollection(
        tuple(
            _decode_object(el, Geometry, prefix, gpath + (i,))
            for i, el in enumerate(geometries)
        )
    )


def _decode_bbox(node, prefix, path):
    bbox = node.get("bbox")
    if bbox is None:
        return None
    path = path + ("bbox",)
    _array(bbox, 0, prefix, path, "bbox")
    for i, value in enumerate(bbox):
        if not _bridge.is_finite_number(value):
            raise NonNumericCoordinateError(
                prefix, "bbox value not numeric", path + (i,)
            )
    return tuple(bbox)


def _decode_feature(node, prefix, path):
    geometry = node.get("geometry")
    if geometry is not None:
        geometry = _decode_object(geometry, Geometry, prefix, path + ("geometry",))

    properties = node.get("properties")
    if properties is None:
        properties = {}
    elif not _bridge.is_object(properties):
        raise NotAnObjectError(
            prefix, "properties " + NOT_A_JSON_OBJECT, path + ("properties",)
        )

    id = node.get("id")
    if not (id is None or _bridge.is_string(id) or _bridge.is_number(id)):
        raise DecodeError(prefix, "id not a string or number", path + ("id",))

    return Feature(
        geometry=geometry,
        properties=properties,
        id=id,
        bbox=_decode_bbox(node, prefix, path),
    )


def _decode_featurecollection(node, prefix, path):
    fpath = path + ("features",)
    features = _array(
        _require(node, "features", prefix, path), 0, prefix, fpath, "features"
    )
    return FeatureCollection(
        tuple(
            _decode_object(el, Feature, prefix, fpath + (i,))
            for i, el in enumerate(features)
        ),
        bbox=_decode_bbox(node, prefix, path),
    )


_DECODERS = {
    GeoJSONType.POINT: (Point, _decode_point),
    GeoJSONType.MULTIPOINT: (MultiPoint, _decode_multipoint),
    GeoJSONType.LINESTRING: (LineString, _decode_linestring),
    GeoJSONType.MULTILINESTRING: (MultiLineString, _decode_multilinestring),
    GeoJSONType.POLYGON: (Polygon, _decode_polygon),
    GeoJSONType.MULTIPOLYGON: (MultiPolygon, _decode_multipolygon),
    GeoJSONType.GEOMETRYCOLLECTION: (GeometryCollection, _decode_geometrycollection),
    GeoJSONType.FEATURE: (Feature, _decode_feature),
    GeoJSONType.FEATURECOLLECTION: (FeatureCollection, _decode_featurecollection),
}

_TARGETS = frozenset([GeoJSON, Geometry, *(cls for cls, _ in _DECODERS.values())])
