import logging

from ._errors import (
    GeoJSONError,
    DecodeError,
    EmptyInputError,
    MalformedJSONError,
    NotAnObjectError,
    NotAnArrayError,
    UnknownTypeError,
    TypeMismatchError,
    MissingKeyError,
    NonNumericCoordinateError,
    TooFewElementsError,
    TooManyElementsError,
    ValidationError,
)
from ._model import (
    GeoJSONType,
    Position,
    LinearRing,
    GeoJSON,
    Geometry,
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    Feature,
    FeatureCollection,
)
from ._decode import convert
from ._encode import to_builtins
from ._equivalence import is_equivalent
from ._validate import is_valid

from . import json
from ._version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())
