__all__ = (
    "GeoJSONError",
    "DecodeError",
    "EmptyInputError",
    "MalformedJSONError",
    "NotAnObjectError",
    "NotAnArrayError",
    "UnknownTypeError",
    "TypeMismatchError",
    "MissingKeyError",
    "NonNumericCoordinateError",
    "TooFewElementsError",
    "TooManyElementsError",
    "ValidationError",
)


def format_path(path):
    """Render a decode path as ``$.key[0].other``."""
    out = ["$"]
    for part in path:
        if isinstance(part, int):
            out.append(f"[{part}]")
        else:
            out.append(f".{part}")
    return "".join(out)


class GeoJSONError(Exception):
    """Base class for all geotree errors."""


class DecodeError(GeoJSONError, ValueError):
    """An error raised while decoding GeoJSON.

    Parameters
    ----------
    prefix : str
        Caller-supplied context, prepended to the message.
    detail : str
        What went wrong.
    path : tuple, optional
        The keys and indices leading from the root to the failing node.
    """

    def __init__(self, prefix: str, detail: str, path: tuple = ()):
        self.prefix = prefix
        self.detail = detail
        self.path = tuple(path)
        msg = f"{prefix}{detail}"
        if self.path:
            msg = f"{msg} - at `{format_path(self.path)}`"
        super().__init__(msg)


class EmptyInputError(DecodeError):
    """The input text was empty."""


class MalformedJSONError(DecodeError):
    """The input text could not be parsed as JSON.

    This includes number literals too large for a float (such as ``1e400``),
    which the parser rejects before any coordinate is examined.
    """


class NotAnObjectError(DecodeError):
    """A node expected to be a JSON object was something else."""


class NotAnArrayError(DecodeError):
    """A node expected to be a JSON array was something else."""


class UnknownTypeError(DecodeError):
    """The ``type`` discriminator was missing or unrecognized."""


class TypeMismatchError(DecodeError):
    """The ``type`` discriminator named a kind other than the one requested."""


class MissingKeyError(DecodeError):
    """A required key was absent."""


class NonNumericCoordinateError(DecodeError):
    """A coordinate value was not a finite number.

    Raised for strings, booleans, nulls and nested values. Float literals
    too large to represent fail earlier, with `MalformedJSONError`.
    """


class TooFewElementsError(DecodeError):
    """An array held fewer elements than its kind requires."""


class TooManyElementsError(DecodeError):
    """A position held more than three values."""


class ValidationError(DecodeError):
    """A decoded value failed validation (only raised when requested)."""
