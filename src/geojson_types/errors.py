"""Error taxonomy for decoding, encoding and constructing GeoJSON objects.

``GeoJsonError`` does not derive from ``ValueError``: errors raised inside
pydantic validators must reach the caller with their own type instead of
being folded into ``pydantic.ValidationError``.
"""


class GeoJsonError(Exception):
    """Base class for every error raised by this package."""


class MalformedJsonError(GeoJsonError):
    """The input text is not valid JSON."""


class MissingPropertyError(GeoJsonError):
    """A required member is absent."""

    def __init__(self, name: str):
        super().__init__(f"GeoJSON object expected to have '{name}' property.")
        self.name = name


class InvalidFormatError(GeoJsonError):
    """A member has the wrong JSON kind or the wrong array length."""


class UnsupportedTypeError(GeoJsonError):
    """Unknown ``type`` discriminator, or an object kind outside the closed set."""

    def __init__(self, type_name: str, message: str | None = None):
        super().__init__(message or f"Unsupported geometry type: '{type_name}'")
        self.type_name = type_name


class UnsupportedValueError(GeoJsonError):
    """A property value cannot be written as GeoJSON."""


class GeometryValidationError(GeoJsonError):
    """An object was constructed with arguments that break its invariants."""


class TypeMismatchError(GeoJsonError):
    """The decoded object is not of the requested kind."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"The provided JSON does not represent a {expected} object (got {actual}).")
        self.expected = expected
        self.actual = actual


class NestingDepthError(GeoJsonError):
    """Input nests deeper than the configured limit."""
