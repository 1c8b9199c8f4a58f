import logging
from typing import Any, Iterable, List, Optional, Type, Union

from . import _bridge
from ._decode import (
    check_target as _check_target,
    convert as _convert,
    default_prefix as _default_prefix,
)
from ._encode import to_builtins as _to_builtins
from ._errors import DecodeError, EmptyInputError, ValidationError
from ._model import GeoJSON
from ._validate import is_valid as _is_valid

__all__ = ("Encoder", "Decoder", "encode", "decode", "format")

logger = logging.getLogger(__name__)

JSON_STRING_EMPTY = "JSON string is empty"
NOT_VALID = "decoded value is not valid"


def __dir__():
    return __all__


def _is_empty(buf):
    if buf is None:
        return True
    if isinstance(buf, str):
        return not buf.strip()
    # call `memoryview` first, since `bytes(1)` is actually valid
    return not bytes(memoryview(buf)).strip()


class Encoder:
    """A GeoJSON encoder.

    Output is compact, with ``type`` as the first key of every object.
    Encoding never validates the tree being encoded.
    """

    def encode(self, obj: GeoJSON) -> str:
        """Serialize a GeoJSON object as canonical GeoJSON text."""
        return _bridge.serialize(_to_builtins(obj))

    def encode_lines(self, items: Iterable[GeoJSON]) -> str:
        """Serialize an iterable of GeoJSON objects as newline-delimited text."""
        return _bridge.serialize_lines([_to_builtins(obj) for obj in items])


class Decoder:
    """A GeoJSON decoder.

    Parameters
    ----------
    type : type, optional
        The kind to decode. Either `GeoJSON` (the default, any kind),
        `Geometry` (any geometry kind), or a concrete kind like `MultiPoint`.
        A message whose ``type`` doesn't fit raises `TypeMismatchError`.
    prefix : str, optional
        Context prepended to every error message. Defaults to
        ``"Error while decoding <type>: "``.
    validate : bool, optional
        If ``True``, decoded values are also checked with `is_valid`, and a
        `ValidationError` raised if they fail. Defaults to ``False``, in which
        case structurally decodable but invalid values (e.g. an unclosed
        polygon ring) are returned as-is.
    """

    def __init__(
        self,
        type: Type[GeoJSON] = GeoJSON,
        *,
        prefix: Optional[str] = None,
        validate: bool = False,
    ):
        _check_target(type)
        self.type = type
        self.prefix = _default_prefix(type) if prefix is None else prefix
        self.validate = validate

    def __repr__(self):
        return f"Decoder({self.type.__name__}, validate={self.validate})"

    def _finish(self, node):
        obj = _convert(node, self.type, self.prefix)
        if self.validate and not _is_valid(obj):
            raise ValidationError(self.prefix, NOT_VALID)
        return obj

    def decode(self, buf: Union[bytes, str]) -> GeoJSON:
        """Deserialize a GeoJSON object from text.

        Parameters
        ----------
        buf : bytes-like or str
            The message to decode.

        Returns
        -------
        obj : GeoJSON
            The decoded object.

        Raises
        ------
        DecodeError
            A subclass naming the first problem found.
        """
        try:
            if _is_empty(buf):
                raise EmptyInputError(self.prefix, JSON_STRING_EMPTY)
            return self._finish(_bridge.parse(buf, self.prefix))
        except DecodeError as exc:
            logger.debug("Failed to decode %s: %s", self.type.__name__, exc)
            raise

    def decode_lines(self, buf: Union[bytes, str]) -> List[GeoJSON]:
        """Deserialize newline-delimited GeoJSON text into a list of objects."""
        try:
            if _is_empty(buf):
                raise EmptyInputError(self.prefix, JSON_STRING_EMPTY)
            nodes = _bridge.parse_lines(buf, self.prefix)
            return [self._finish(node) for node in nodes]
        except DecodeError as exc:
            logger.debug("Failed to decode %s lines: %s", self.type.__name__, exc)
            raise


_encoder = Encoder()


def encode(obj: GeoJSON) -> str:
    """Serialize a GeoJSON object as canonical GeoJSON text.

    Parameters
    ----------
    obj : GeoJSON
        The object to serialize.

    Returns
    -------
    data : str
        The serialized object.

    See Also
    --------
    decode
    """
    return _encoder.encode(obj)


def decode(
    buf: Union[bytes, str],
    *,
    type: Type[GeoJSON] = GeoJSON,
    prefix: Optional[str] = None,
    validate: bool = False,
) -> Any:
    """Deserialize a GeoJSON object from text.

    Parameters
    ----------
    buf : bytes-like or str
        The message to decode.
    type : type, optional
        The kind to decode. Defaults to `GeoJSON`, accepting any kind.
    prefix : str, optional
        Context prepended to every error message.
    validate : bool, optional
        Whether to also check the decoded value with `is_valid`.

    Returns
    -------
    obj : GeoJSON
        The deserialized object.

    See Also
    --------
    encode
    """
    return Decoder(type, prefix=prefix, validate=validate).decode(buf)


def format(buf: str, *, indent: int = 2) -> str:
    """Reformat encoded GeoJSON text for human readability.

    Parameters
    ----------
    buf : str
        The text to format, as produced by `encode`.
    indent : int, optional
        The number of spaces to use for indentation. If 0, all whitespace is
        stripped back to the compact form.

    Returns
    -------
    out : str
    """
    return _bridge.pretty(buf, indent)
