import enum
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Tuple, Union

import msgspec
from msgspec.structs import force_setattr

__all__ = (
    "GeoJSONType",
    "Position",
    "LinearRing",
    "GeoJSON",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
)


class GeoJSONType(str, enum.Enum):
    """The canonical GeoJSON ``type`` names."""

    POINT = "Point"
    MULTIPOINT = "MultiPoint"
    LINESTRING = "LineString"
    MULTILINESTRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURECOLLECTION = "FeatureCollection"

    @property
    def is_geometry(self) -> bool:
        return self not in (GeoJSONType.FEATURE, GeoJSONType.FEATURECOLLECTION)

    def __str__(self):
        return self.value


class Position(msgspec.Struct, frozen=True, array_like=True):
    """A longitude, latitude, and optional altitude.

    Parameters
    ----------
    lon : float
    lat : float
    alt : float, optional
    """

    lon: float
    lat: float
    alt: Union[float, None] = None

    @property
    def coordinates(self) -> Tuple[float, ...]:
        """The components as a 2- or 3-tuple."""
        if self.alt is None:
            return (self.lon, self.lat)
        return (self.lon, self.lat, self.alt)


# A closed sequence of positions bounding a polygon face or hole.
LinearRing = Tuple[Position, ...]


def _as_position(obj):
    if isinstance(obj, (list, tuple)) and 2 <= len(obj) <= 3:
        return Position(*obj)
    return obj


def _as_positions(seq):
    return tuple(_as_position(p) for p in seq)


def _as_rings(seq):
    return tuple(
        _as_positions(r) if isinstance(r, (list, tuple)) else r for r in seq
    )


def _as_children(seq, cls):
    # Plain sequences stand in for the child kind's positional argument
    return tuple(cls(c) if isinstance(c, (list, tuple)) else c for c in seq)


class GeoJSON(msgspec.Struct, frozen=True):
    """Base class of every GeoJSON object.

    Instances are immutable. Constructing one never validates it; use
    `is_valid` to check structural well-formedness.
    """

    @property
    def kind(self) -> GeoJSONType:
        """The GeoJSON type of this object."""
        return GeoJSONType(type(self).__struct_config__.tag)

    def is_valid(self) -> bool:
        """Whether this object and everything nested in it is well formed."""
        return _is_valid(self)

    def is_equivalent_to(self, other: Any) -> bool:
        """Whether ``other`` describes the same object, ignoring ordering.

        Warning: this may be very costly for large geometries.
        """
        return _is_equivalent(self, other)


class Geometry(GeoJSON, frozen=True):
    """Base class of the seven GeoJSON geometry kinds."""


class Point(Geometry, frozen=True, tag=True):
    coordinates: Position

    def __post_init__(self):
        force_setattr(self, "coordinates", _as_position(self.coordinates))


class MultiPoint(Geometry, frozen=True, tag=True):
    """A valid MultiPoint holds two or more positions."""

    coordinates: Tuple[Position, ...] = ()

    def __post_init__(self):
        force_setattr(self, "coordinates", _as_positions(self.coordinates))


class LineString(Geometry, frozen=True, tag=True):
    """A valid LineString holds two or more positions."""

    coordinates: Tuple[Position, ...] = ()

    def __post_init__(self):
        force_setattr(self, "coordinates", _as_positions(self.coordinates))


class MultiLineString(Geometry, frozen=True, tag=True):
    line_strings: Tuple[LineString, ...] = ()

    def __post_init__(self):
        force_setattr(
            self, "line_strings", _as_children(self.line_strings, LineString)
        )


class Polygon(Geometry, frozen=True, tag=True):
    """A sequence of linear rings.

    The first ring is the exterior boundary, any others are holes. Each ring
    must be closed (first position equals last) and hold at least 4 positions
    to be valid.
    """

    rings: Tuple[LinearRing, ...] = ()

    def __post_init__(self):
        force_setattr(self, "rings", _as_rings(self.rings))


class MultiPolygon(Geometry, frozen=True, tag=True):
    polygons: Tuple[Polygon, ...] = ()

    def __post_init__(self):
        force_setattr(self, "polygons", _as_children(self.polygons, Polygon))


class GeometryCollection(Geometry, frozen=True, tag=True):
    geometries: Tuple[Geometry, ...] = ()

    def __post_init__(self):
        force_setattr(self, "geometries", tuple(self.geometries))


class Feature(GeoJSON, frozen=True, tag=True):
    """A geometry with an opaque property mapping and an optional id.

    Parameters
    ----------
    geometry : Geometry or None, optional
    properties : dict, optional
        Copied into a read-only mapping; its contents are never interpreted.
        Only the top level is frozen, and since the mapping is unhashable so
        are features.
    id : str, int, float, or None, optional
    bbox : tuple of float, optional
        Carried through decoding and encoding untouched.
    """

    geometry: Union[Geometry, None] = None
    properties: Mapping[str, Any] = msgspec.field(default_factory=dict)
    id: Union[str, int, float, None] = None
    bbox: Union[Tuple[float, ...], None] = None

    def __post_init__(self):
        if self.properties is None:
            force_setattr(self, "properties", MappingProxyType({}))
        elif isinstance(self.properties, Mapping):
            force_setattr(self, "properties", MappingProxyType(dict(self.properties)))
        if self.bbox is not None:
            force_setattr(self, "bbox", tuple(self.bbox))


class FeatureCollection(GeoJSON, frozen=True, tag=True):
    features: Tuple[Feature, ...] = ()
    bbox: Union[Tuple[float, ...], None] = None

    def __post_init__(self):
        force_setattr(self, "features", tuple(self.features))
        if self.bbox is not None:
            force_setattr(self, "bbox", tuple(self.bbox))


from ._equivalence import is_equivalent as _is_equivalent  # noqa: E402
from ._validate import is_valid as _is_valid  # noqa: E402
