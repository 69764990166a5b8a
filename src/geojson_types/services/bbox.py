"""Bounding-box aggregation over GeoObjects.

An explicit bounding box always wins: it is returned unchanged even when it
does not match the coordinates. Computed boxes are 2D; altitude is never
aggregated.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from geojson_types.errors import NestingDepthError, UnsupportedTypeError
from geojson_types.models.feature import Feature, FeatureCollection
from geojson_types.models.geometry import (
    GeoObject,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_types.models.primitives import BoundingBox, Position

logger = logging.getLogger(__name__)

# Seeds of the min/max fold; an empty input yields an inverted box.
_MAX = sys.float_info.max
_MIN = -sys.float_info.max


def calculate_bounding_box(obj: GeoObject) -> BoundingBox:
    """Calculate the bounding box of a GeoObject.

    Args:
        obj: Any geometry, Feature or FeatureCollection.

    Returns:
        ``obj.bounding_box`` when set, otherwise a 2D box folded over the
        positions (or, for collections, over the children's boxes).

    Raises:
        UnsupportedTypeError: ``obj`` is not one of the supported kinds.
        NestingDepthError: ``obj`` nests deeper than the interpreter allows.
    """
    try:
        return _calculate(obj)
    except RecursionError as e:
        raise NestingDepthError("Object nests too deeply to aggregate its bounding box") from e


def _calculate(obj: GeoObject) -> BoundingBox:
    if obj is None:
        raise TypeError("obj must not be None")
    if not isinstance(obj, GeoObject):
        raise UnsupportedTypeError(
            type(obj).__name__, f"The type {type(obj).__name__} is not supported."
        )

    if obj.bounding_box is not None:
        return obj.bounding_box

    match obj:
        case Point():
            position = obj.coordinates
            return BoundingBox(
                position.longitude, position.latitude, position.longitude, position.latitude
            )
        case MultiPoint():
            return aggregate_positions(obj.coordinates)
        case LineString():
            return aggregate_positions(obj.coordinates)
        case MultiLineString():
            return aggregate_positions(p for line in obj.coordinates for p in line)
        case Polygon():
            return aggregate_positions(p for ring in obj.coordinates for p in ring)
        case MultiPolygon():
            return aggregate_positions(
                p for polygon in obj.coordinates for ring in polygon for p in ring
            )
        case GeometryCollection():
            return aggregate_boxes(_calculate(g) for g in obj.geometries)
        case Feature():
            return _calculate(obj.geometry)
        case FeatureCollection():
            # features contribute their geometry's box, not their own bbox
            return aggregate_boxes(_calculate(f.geometry) for f in obj.features)
        case _:
            raise UnsupportedTypeError(
                type(obj).__name__, f"The type {type(obj).__name__} is not supported."
            )


def aggregate_positions(positions: Iterable[Position]) -> BoundingBox:
    """Fold positions into their 2D extent."""
    min_longitude = _MAX
    min_latitude = _MAX
    max_longitude = _MIN
    max_latitude = _MIN

    count = 0
    for position in positions:
        min_longitude = min(min_longitude, position.longitude)
        min_latitude = min(min_latitude, position.latitude)
        max_longitude = max(max_longitude, position.longitude)
        max_latitude = max(max_latitude, position.latitude)
        count += 1

    if count == 0:
        logger.debug("Aggregating an empty position set; returning the seed box")

    return BoundingBox(min_longitude, min_latitude, max_longitude, max_latitude)


def aggregate_boxes(boxes: Iterable[BoundingBox]) -> BoundingBox:
    """Fold bounding boxes into the 2D box covering all of them."""
    east = _MIN
    west = _MAX
    north = _MIN
    south = _MAX

    for box in boxes:
        east = max(east, box.east)
        west = min(west, box.west)
        north = max(north, box.north)
        south = min(south, box.south)

    return BoundingBox(west, south, east, north)
