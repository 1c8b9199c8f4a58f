"""Order-insensitive structural comparison of GeoJSON trees.

Two trees are equivalent when they describe the same object, even if the
elements of their collections appear in a different order, or their rings
start at a different position or wind the other way. This is potentially
expensive (quadratic per nesting level) and is never done implicitly; plain
``==`` remains exact field-wise equality.
"""
from ._model import (
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
)

__all__ = ("is_equivalent",)


def is_equivalent(a, b) -> bool:
    """Check whether two GeoJSON objects are equivalent.

    Parameters
    ----------
    a, b : GeoJSON
        The objects to compare.

    Returns
    -------
    bool
        ``True`` if ``a`` and ``b`` are of the same kind and describe the same
        object, up to reordering of collection elements and rotation or
        reversal of rings. Always ``False`` if either side is ``None``.
    """
    equal = _naive_equals(a, b)
    if equal is not None:
        return equal
    return _RULES[type(a)](a, b)


def _size(obj):
    if isinstance(obj, Point):
        p = obj.coordinates
        return len(p.coordinates) if isinstance(p, Position) else 0
    if isinstance(obj, Feature):
        return 1
    return len(getattr(obj, _CHILDREN[type(obj)]))


def _naive_equals(a, b):
    """The cheap checks. Returns ``None`` if a full comparison is needed."""
    if a is None or b is None:
        return False
    if type(a) is not type(b) or type(a) not in _RULES:
        return False
    if _size(a) != _size(b):
        return False
    if a is b or a == b:
        return True
    return None


def _match(xs, ys, equivalent):
    """Pair each element of ``xs`` with a distinct equivalent element of ``ys``.

    ``equivalent`` is an equivalence relation, so first-fit pairing finds a
    one-to-one correspondence whenever one exists, and succeeding in this
    direction implies the reverse direction too.
    """
    if len(xs) != len(ys):
        return False
    used = [False] * len(ys)
    for x in xs:
        for j, y in enumerate(ys):
            if not used[j] and equivalent(x, y):
                used[j] = True
                break
        else:
            return False
    return True


def _same(x, y):
    return x == y


def _same_or_reversed(xs, ys):
    return xs == ys or xs == ys[::-1]


def _is_rotation(xs, ys):
    n = len(xs)
    if n != len(ys):
        return False
    if n == 0:
        return True
    return any(ys[k:] + ys[:k] == xs for k in range(n))


def _closed(ring):
    return len(ring) > 1 and ring[0] == ring[-1]


def ring_equivalent(r, s) -> bool:
    """Whether two rings are the same up to rotation and reversal.

    The closing position is dropped and the remaining bodies compared
    cyclically. Rings that are not closed only match exactly or reversed.
    """
    if r == s:
        return True
    if not isinstance(r, tuple) or not isinstance(s, tuple) or len(r) != len(s):
        return False
    if not (_closed(r) and _closed(s)):
        return _same_or_reversed(r, s)
    body_r, body_s = r[:-1], s[:-1]
    return _is_rotation(body_r, body_s) or _is_rotation(body_r, body_s[::-1])


def _point(a, b):
    return a.coordinates == b.coordinates


def _multipoint(a, b):
    """Multiset equality of the positions.

    Repeated positions must pair off one-to-one, so ``[a, a, b]`` is not
    equivalent to ``[a, b, b]``. A looser containment check in both
    directions would accept that pair.
    """
    return _match(a.coordinates, b.coordinates, _same)


def _linestring(a, b):
    return _same_or_reversed(a.coordinates, b.coordinates)


def _multilinestring(a, b):
    return _match(a.line_strings, b.line_strings, is_equivalent)


def _polygon(a, b):
    return _match(a.rings, b.rings, ring_equivalent)


def _multipolygon(a, b):
    return _match(a.polygons, b.polygons, is_equivalent)


def _geometrycollection(a, b):
    return _match(a.geometries, b.geometries, is_equivalent)


def _feature(a, b):
    if a.id != b.id or a.properties != b.properties:
        return False
    if a.geometry is None or b.geometry is None:
        return a.geometry is None and b.geometry is None
    return is_equivalent(a.geometry, b.geometry)


def _featurecollection(a, b):
    return _match(a.features, b.features, is_equivalent)


_CHILDREN = {
    MultiPoint: "coordinates",
    LineString: "coordinates",
    MultiLineString: "line_strings",
    Polygon: "rings",
    MultiPolygon: "polygons",
    GeometryCollection: "geometries",
    FeatureCollection: "features",
}

_RULES = {
    Point: _point,
    MultiPoint: _multipoint,
    LineString: _linestring,
    MultiLineString: _multilinestring,
    Polygon: _polygon,
    MultiPolygon: _multipolygon,
    GeometryCollection: _geometrycollection,
    Feature: _feature,
    FeatureCollection: _featurecollection,
}
