"""Typed object model and lossless codec for GeoJSON."""

__version__ = "0.1.0"

from geojson_types.errors import (
    GeoJsonError,
    GeometryValidationError,
    InvalidFormatError,
    MalformedJsonError,
    MissingPropertyError,
    NestingDepthError,
    TypeMismatchError,
    UnsupportedTypeError,
    UnsupportedValueError,
)
from geojson_types.models.feature import Feature, FeatureCollection
from geojson_types.models.geometry import (
    Geometry,
    GeometryCollection,
    GeoObject,
    GeoObjectType,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_types.models.options import DecodeOptions
from geojson_types.models.primitives import BoundingBox, Position
from geojson_types.models.properties import NumberKind, PropertyValue, classify_number
from geojson_types.services.bbox import calculate_bounding_box
from geojson_types.services.serializer import (
    dump,
    dumps,
    from_mapping,
    parse,
    parse_as,
    to_mapping,
)

__all__ = [
    "BoundingBox",
    "DecodeOptions",
    "Feature",
    "FeatureCollection",
    "GeoJsonError",
    "GeoObject",
    "GeoObjectType",
    "Geometry",
    "GeometryCollection",
    "GeometryValidationError",
    "InvalidFormatError",
    "LineString",
    "LinearRing",
    "MalformedJsonError",
    "MissingPropertyError",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NestingDepthError",
    "NumberKind",
    "Point",
    "Polygon",
    "Position",
    "PropertyValue",
    "TypeMismatchError",
    "UnsupportedTypeError",
    "UnsupportedValueError",
    "calculate_bounding_box",
    "classify_number",
    "dump",
    "dumps",
    "from_mapping",
    "parse",
    "parse_as",
    "to_mapping",
]
