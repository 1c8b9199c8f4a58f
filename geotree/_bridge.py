"""The generic JSON tree that the decoder and encoder work against.

Parsed nodes are plain Python values: ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict``. Only the functions below touch ``msgspec.json``.
"""
import math
from typing import Any, List, Union

import msgspec

from ._errors import MalformedJSONError

NOT_VALID_JSON = "not valid JSON"

_decoder = msgspec.json.Decoder()
_encoder = msgspec.json.Encoder()


def parse(buf: Union[bytes, str], prefix: str = "") -> Any:
    """Parse JSON text into a generic node."""
    try:
        return _decoder.decode(buf)
    except msgspec.DecodeError:
        raise MalformedJSONError(prefix, NOT_VALID_JSON) from None


def parse_lines(buf: Union[bytes, str], prefix: str = "") -> List[Any]:
    """Parse newline-delimited JSON text into a list of generic nodes."""
    try:
        return _decoder.decode_lines(buf)
    except msgspec.DecodeError:
        raise MalformedJSONError(prefix, NOT_VALID_JSON) from None


def serialize(node: Any) -> str:
    """Serialize a generic node as compact JSON text."""
    return _encoder.encode(node).decode("utf-8")


def serialize_lines(nodes: List[Any]) -> str:
    return _encoder.encode_lines(nodes).decode("utf-8")


def pretty(buf: str, indent: int = 2) -> str:
    return msgspec.json.format(buf, indent=indent)


def is_null(node) -> bool:
    return node is None


def is_object(node) -> bool:
    return isinstance(node, dict)


def is_array(node) -> bool:
    return isinstance(node, list)


def is_string(node) -> bool:
    return isinstance(node, str)


def is_number(node) -> bool:
    # bool is a subclass of int, but `true` is not a number
    return isinstance(node, (int, float)) and not isinstance(node, bool)


def is_finite_number(node) -> bool:
    if not is_number(node):
        return False
    try:
        return math.isfinite(node)
    except OverflowError:
        # an integer too large to represent as a float
        return False
