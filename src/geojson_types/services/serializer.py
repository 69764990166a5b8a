"""Parse and serialize GeoJSON text.

Parsing accepts text, UTF-8 bytes or a file object. Whether decode errors
raise or are suppressed is decided per call through ``DecodeOptions``; a
suppressed error is logged and ``None`` is returned in place of the object.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, TypeVar

from geojson_types import config
from geojson_types.errors import (
    GeoJsonError,
    MalformedJsonError,
    NestingDepthError,
    TypeMismatchError,
    UnsupportedValueError,
)
from geojson_types.models.geometry import GeoObject
from geojson_types.models.options import DEFAULT_OPTIONS, DecodeOptions
from geojson_types.services.converter import read_geo_object, write_geo_object

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=GeoObject)

Source = str | bytes | bytearray | memoryview | IO[str] | IO[bytes]


def parse(source: Source, options: DecodeOptions | None = None) -> GeoObject | None:
    """Parse a GeoJSON document into a GeoObject.

    Args:
        source: JSON text, UTF-8 encoded bytes, or a file object to read.
        options: Decoding options; defaults to ``DEFAULT_OPTIONS``.

    Returns:
        The decoded object, or ``None`` if decoding failed and
        ``options.raise_on_error`` is false.
    """
    options = options or DEFAULT_OPTIONS
    try:
        return from_mapping(_load_json(source), options)
    except GeoJsonError as e:
        return _suppress_or_raise(e, options)


def parse_as(cls: type[T], source: Source, options: DecodeOptions | None = None) -> T | None:
    """Parse a GeoJSON document that must decode to ``cls``.

    Raises:
        TypeMismatchError: The document decodes, but not to a ``cls``.
    """
    options = options or DEFAULT_OPTIONS
    try:
        obj = from_mapping(_load_json(source), options)
        if not isinstance(obj, cls):
            raise TypeMismatchError(cls.__name__, obj.type.value)
        return obj
    except GeoJsonError as e:
        return _suppress_or_raise(e, options)


def from_mapping(tree: Any, options: DecodeOptions | None = None) -> GeoObject:
    """Decode an already parsed JSON tree. Always raises on failure."""
    options = options or DEFAULT_OPTIONS
    try:
        obj = read_geo_object(tree, options)
    except RecursionError as e:
        raise NestingDepthError("GeoJSON nests too deeply to decode") from e
    logger.debug("Decoded %s", obj.type.value)
    return obj


def to_mapping(obj: GeoObject) -> dict[str, Any]:
    """Encode ``obj`` into a JSON tree (dicts in canonical member order)."""
    try:
        tree = write_geo_object(obj)
    except RecursionError as e:
        raise NestingDepthError("Object nests too deeply to encode") from e
    logger.debug("Encoded %s", obj.type.value)
    return tree


def dumps(obj: GeoObject) -> str:
    """Serialize ``obj`` to compact canonical GeoJSON text."""
    tree = to_mapping(obj)
    try:
        return json.dumps(
            tree,
            separators=config.JSON_SEPARATORS,
            allow_nan=config.JSON_ALLOW_NAN,
        )
    except RecursionError as e:
        raise NestingDepthError("Object nests too deeply to serialize") from e
    except ValueError as e:
        raise UnsupportedValueError(str(e)) from e


def dump(obj: GeoObject, fp: IO[str]) -> None:
    fp.write(dumps(obj))


def _load_json(source: Source) -> Any:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, (bytearray, memoryview)):
        source = bytes(source)
    if not isinstance(source, (str, bytes)):
        raise TypeError(f"Cannot parse GeoJSON from {type(source).__name__}")

    try:
        return json.loads(source, parse_constant=_reject_constant)
    except RecursionError as e:
        raise NestingDepthError("JSON nests too deeply to parse") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise MalformedJsonError(f"Invalid JSON: {e}") from e


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _suppress_or_raise(error: GeoJsonError, options: DecodeOptions) -> None:
    if options.raise_on_error:
        raise error
    logger.warning("Suppressed GeoJSON decode error: %s", error)
    return None
