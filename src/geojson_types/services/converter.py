"""Recursive GeoJSON converter: JSON tree <-> GeoObject graph.

The tree is what ``json.loads`` produces (dicts in document order, lists,
str, int, float, bool, None). Decoding never consults global state; the
caller passes ``DecodeOptions`` explicitly.

Encoded objects list their members as ``type``, the kind's payload, ``bbox``
(when present) and then every custom property in stored order. Integral
ordinates are written without a fractional part (``1`` rather than ``1.0``).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from geojson_types import config
from geojson_types.errors import (
    InvalidFormatError,
    MissingPropertyError,
    NestingDepthError,
    UnsupportedTypeError,
    UnsupportedValueError,
)
from geojson_types.models.feature import Feature, FeatureCollection
from geojson_types.models.geometry import (
    GeoObject,
    GeoObjectType,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    is_geometry,
)
from geojson_types.models.options import DEFAULT_OPTIONS, DecodeOptions
from geojson_types.models.primitives import BoundingBox, Position, compact_ordinate
from geojson_types.models.properties import PropertyValue, narrow_number

_COORDINATE_TYPES = {
    GeoObjectType.POINT.value,
    GeoObjectType.LINE_STRING.value,
    GeoObjectType.MULTI_POINT.value,
    GeoObjectType.POLYGON.value,
    GeoObjectType.MULTI_LINE_STRING.value,
    GeoObjectType.MULTI_POLYGON.value,
}


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------


def read_geo_object(
    element: Any,
    options: DecodeOptions | None = None,
    depth: int = 1,
) -> GeoObject:
    """Decode one GeoJSON object from a parsed JSON tree.

    Args:
        element: A JSON object (``dict``) as produced by ``json.loads``.
        options: Decoding options; defaults to ``DEFAULT_OPTIONS``.
        depth: Nesting level of ``element``; the root is 1.

    Returns:
        The decoded Geometry, Feature or FeatureCollection.

    Raises:
        MissingPropertyError: A required member is absent.
        InvalidFormatError: A member has the wrong kind or length.
        UnsupportedTypeError: The ``type`` member names an unknown kind.
        GeometryValidationError: A polygon ring is not a closed ring.
        NestingDepthError: ``element`` nests deeper than ``options.max_depth``.
    """
    options = options or DEFAULT_OPTIONS
    _check_depth(depth, options)

    if not isinstance(element, dict):
        raise InvalidFormatError(
            f"GeoJSON object must be a JSON object, got {_kind(element)}"
        )

    type_name = _get_required(element, config.TYPE_PROPERTY)
    if not isinstance(type_name, str):
        raise InvalidFormatError(f"'type' must be a string, got {_kind(type_name)}")

    bounding_box = read_bounding_box(element)

    try:
        return _read_typed(element, type_name, bounding_box, options, depth)
    except ValidationError as e:
        raise InvalidFormatError(f"Invalid {type_name} object: {e}") from e


def _read_typed(
    element: dict,
    type_name: str,
    bounding_box: BoundingBox | None,
    options: DecodeOptions,
    depth: int,
) -> GeoObject:
    match type_name:
        case GeoObjectType.GEOMETRY_COLLECTION:
            geometries = [
                _read_geometry(item, options, depth + 1)
                for item in _get_required_array(element, config.GEOMETRIES_PROPERTY)
            ]
            return GeometryCollection(
                geometries,
                bounding_box=bounding_box,
                custom_properties=_read_custom_properties(
                    element, (config.GEOMETRIES_PROPERTY,), options, depth
                ),
            )

        case GeoObjectType.FEATURE_COLLECTION:
            features = []
            for item in _get_required_array(element, config.FEATURES_PROPERTY):
                feature = read_geo_object(item, options, depth + 1)
                if not isinstance(feature, Feature):
                    raise InvalidFormatError(
                        f"FeatureCollection members must be Feature objects, got {feature.type.value}"
                    )
                features.append(feature)
            return FeatureCollection(
                features,
                bounding_box=bounding_box,
                custom_properties=_read_custom_properties(
                    element, (config.FEATURES_PROPERTY,), options, depth
                ),
            )

        case GeoObjectType.FEATURE:
            return Feature(
                _read_geometry(_get_required(element, config.GEOMETRY_PROPERTY), options, depth + 1),
                _read_feature_properties(element, options, depth),
                id=_read_feature_id(element),
                bounding_box=bounding_box,
                custom_properties=_read_custom_properties(
                    element,
                    (config.ID_PROPERTY, config.GEOMETRY_PROPERTY, config.PROPERTIES_PROPERTY),
                    options,
                    depth,
                ),
            )

    if type_name not in _COORDINATE_TYPES:
        raise UnsupportedTypeError(type_name)

    coordinates = _get_required(element, config.COORDINATES_PROPERTY)
    custom_properties = _read_custom_properties(
        element, (config.COORDINATES_PROPERTY,), options, depth
    )
    extra = {"bounding_box": bounding_box, "custom_properties": custom_properties}

    match type_name:
        case GeoObjectType.POINT:
            return Point(read_position(coordinates), **extra)
        case GeoObjectType.LINE_STRING:
            return LineString(read_positions(coordinates), **extra)
        case GeoObjectType.MULTI_POINT:
            return MultiPoint([Point(p) for p in read_positions(coordinates)], **extra)
        case GeoObjectType.POLYGON:
            return Polygon(_read_rings(coordinates), **extra)
        case GeoObjectType.MULTI_LINE_STRING:
            return MultiLineString(
                [LineString(read_positions(line)) for line in _as_array(coordinates, "coordinates")],
                **extra,
            )
        case GeoObjectType.MULTI_POLYGON:
            return MultiPolygon(
                [Polygon(_read_rings(polygon)) for polygon in _as_array(coordinates, "coordinates")],
                **extra,
            )
        case _:
            raise UnsupportedTypeError(type_name)


def _read_geometry(element: Any, options: DecodeOptions, depth: int) -> GeoObject:
    geometry = read_geo_object(element, options, depth)
    if not is_geometry(geometry):
        raise InvalidFormatError(f"Expected a geometry object, got {geometry.type.value}")
    return geometry


def _read_rings(value: Any) -> list[LinearRing]:
    return [LinearRing(read_positions(ring)) for ring in _as_array(value, "coordinates")]


def read_bounding_box(element: Mapping[str, Any]) -> BoundingBox | None:
    """Read the optional ``bbox`` member.

    GeoJSON order is ``[west, south, east, north]`` or
    ``[west, south, min_altitude, east, north, max_altitude]``.
    """
    value = element.get(config.BBOX_PROPERTY)
    if value is None:
        return None
    if not isinstance(value, list):
        raise InvalidFormatError("Bounding box must be an array")

    values = [_read_number(item, "bbox") for item in value]
    match len(values):
        case 4:
            return BoundingBox(values[0], values[1], values[2], values[3])
        case 6:
            return BoundingBox(values[0], values[1], values[3], values[4], values[2], values[5])
        case _:
            raise InvalidFormatError(
                f"Only 4 or 6 element bounding boxes supported, got {len(values)}"
            )


def read_position(value: Any) -> Position:
    if not isinstance(value, list) or len(value) not in (2, 3):
        raise InvalidFormatError("Only 2 or 3 element coordinates supported")
    longitude = _read_number(value[0], "coordinates")
    latitude = _read_number(value[1], "coordinates")
    altitude = _read_number(value[2], "coordinates") if len(value) == 3 else None
    return Position(longitude, latitude, altitude)


def read_positions(value: Any) -> list[Position]:
    return [read_position(item) for item in _as_array(value, "coordinates")]


def _read_feature_id(element: dict) -> str | None:
    value = element.get(config.ID_PROPERTY)
    if value is None or isinstance(value, str):
        return value
    raise InvalidFormatError(f"Feature 'id' must be a string, got {_kind(value)}")


def _read_feature_properties(
    element: dict, options: DecodeOptions, depth: int
) -> dict[str, PropertyValue]:
    value = element.get(config.PROPERTIES_PROPERTY)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InvalidFormatError(f"Feature 'properties' must be an object, got {_kind(value)}")
    return {name: read_property_value(item, options, depth + 1) for name, item in value.items()}


def _read_custom_properties(
    element: dict,
    known: tuple[str, ...],
    options: DecodeOptions,
    depth: int,
) -> dict[str, PropertyValue]:
    skip = {config.TYPE_PROPERTY, config.BBOX_PROPERTY, *known}
    return {
        name: read_property_value(value, options, depth + 1)
        for name, value in element.items()
        if name not in skip
    }


def read_property_value(
    value: Any,
    options: DecodeOptions | None = None,
    depth: int = 1,
) -> PropertyValue:
    """Decode an arbitrary JSON value into the closed property value set.

    Numbers go through the ladder (Int32, UInt32, Int64, UInt64, then
    Float64); objects keep their member order.
    """
    options = options or DEFAULT_OPTIONS
    _check_depth(depth, options)

    match value:
        case None | bool() | str():
            return value
        case int() | float():
            try:
                return narrow_number(value)
            except OverflowError as e:
                raise InvalidFormatError("Number value does not fit a double") from e
        case dict():
            return {name: read_property_value(item, options, depth + 1) for name, item in value.items()}
        case list() | tuple():
            return [read_property_value(item, options, depth + 1) for item in value]
        case _:
            raise InvalidFormatError(f"Not supported value kind {_kind(value)}")


# ---------------------------------------------------------------------------
# Encode
# ---------------------------------------------------------------------------


def write_geo_object(value: GeoObject) -> dict[str, Any]:
    """Encode a GeoObject into a JSON tree with canonical member order."""
    out: dict[str, Any] = {config.TYPE_PROPERTY: value.type.value}

    match value:
        case Point():
            out[config.COORDINATES_PROPERTY] = write_position(value.coordinates)
        case LineString():
            out[config.COORDINATES_PROPERTY] = _write_positions(value.coordinates)
        case Polygon():
            out[config.COORDINATES_PROPERTY] = [_write_positions(ring) for ring in value.coordinates]
        case MultiPoint():
            out[config.COORDINATES_PROPERTY] = _write_positions(value.coordinates)
        case MultiLineString():
            out[config.COORDINATES_PROPERTY] = [_write_positions(line) for line in value.coordinates]
        case MultiPolygon():
            out[config.COORDINATES_PROPERTY] = [
                [_write_positions(ring) for ring in polygon] for polygon in value.coordinates
            ]
        case GeometryCollection():
            out[config.GEOMETRIES_PROPERTY] = [write_geo_object(g) for g in value.geometries]
        case Feature():
            if value.id is not None:
                out[config.ID_PROPERTY] = value.id
            out[config.GEOMETRY_PROPERTY] = write_geo_object(value.geometry)
            out[config.PROPERTIES_PROPERTY] = {
                name: write_property_value(item) for name, item in value.properties.items()
            }
        case FeatureCollection():
            out[config.FEATURES_PROPERTY] = [write_geo_object(f) for f in value.features]
        case _:
            raise UnsupportedTypeError(
                type(value).__name__, f"Geometry type '{type(value).__name__}' not supported"
            )

    if value.bounding_box is not None:
        out[config.BBOX_PROPERTY] = write_bounding_box(value.bounding_box)

    for name, item in value.custom_properties.items():
        out[name] = write_property_value(item)

    return out


def write_bounding_box(bounding_box: BoundingBox) -> list[int | float]:
    return [compact_ordinate(v) for v in bounding_box.to_list()]


def write_position(position: Position) -> list[int | float]:
    return [compact_ordinate(v) for v in position.to_list()]


def _write_positions(positions) -> list[list[int | float]]:
    return [write_position(p) for p in positions]


def write_property_value(value: Any) -> Any:
    """Encode a property value, rejecting anything outside the closed set."""
    match value:
        case None | bool() | str():
            return value
        case int():
            if not config.INT64_MIN <= value <= config.UINT64_MAX:
                raise UnsupportedValueError(f"Integer {value} is outside the Int64/UInt64 range")
            return value
        case float():
            if not math.isfinite(value):
                raise UnsupportedValueError(f"Not supported number {value!r}")
            return value
        case Mapping():
            encoded = {}
            for name, item in value.items():
                if not isinstance(name, str):
                    raise UnsupportedValueError(f"Not supported property name {name!r}")
                encoded[name] = write_property_value(item)
            return encoded
        case list() | tuple():
            return [write_property_value(item) for item in value]
        case _:
            raise UnsupportedValueError(f"Not supported type {type(value).__name__}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _check_depth(depth: int, options: DecodeOptions) -> None:
    if depth > options.max_depth:
        raise NestingDepthError(f"GeoJSON nesting exceeds the maximum depth of {options.max_depth}")


def _get_required(element: dict, name: str) -> Any:
    if name not in element:
        raise MissingPropertyError(name)
    return element[name]


def _get_required_array(element: dict, name: str) -> list:
    return _as_array(_get_required(element, name), name)


def _as_array(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise InvalidFormatError(f"'{name}' must be an array, got {_kind(value)}")
    return value


def _read_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFormatError(f"'{name}' values must be numbers, got {_kind(value)}")
    try:
        return float(value)
    except OverflowError as e:
        raise InvalidFormatError(f"'{name}' value {value} does not fit a double") from e


def _kind(value: Any) -> str:
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case dict():
            return "object"
        case list():
            return "array"
        case _:
            return type(value).__name__
