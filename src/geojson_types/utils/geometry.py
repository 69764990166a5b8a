"""Shapely interop: bbox polygons, GeoObject <-> shapely geometry."""

from shapely.geometry import box, mapping, shape
from shapely.geometry.base import BaseGeometry

from geojson_types.errors import UnsupportedTypeError
from geojson_types.models.feature import Feature
from geojson_types.models.geometry import GeoObject, is_geometry
from geojson_types.models.primitives import BoundingBox
from geojson_types.services.serializer import from_mapping, to_mapping


def bounding_box_to_polygon(bbox: BoundingBox):
    """Convert a BoundingBox to a 2D Shapely polygon (altitude is dropped)."""
    return box(bbox.west, bbox.south, bbox.east, bbox.north)


def to_shape(obj: GeoObject) -> BaseGeometry:
    """Convert a geometry (or a Feature's geometry) to a Shapely geometry.

    Bounding boxes and custom properties have no Shapely counterpart and
    are not carried over.
    """
    if isinstance(obj, Feature):
        obj = obj.geometry
    if not is_geometry(obj):
        raise UnsupportedTypeError(obj.type.value, f"Cannot convert {obj.type.value} to a shape")
    return shape(to_mapping(obj))


def from_shape(geom: BaseGeometry) -> GeoObject:
    """Convert a Shapely geometry to the matching GeoObject."""
    return from_mapping(_as_lists(mapping(geom)))


def _as_lists(value):
    # shapely.mapping() emits tuples; the decoder reads JSON arrays as lists.
    if isinstance(value, dict):
        return {key: _as_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value
