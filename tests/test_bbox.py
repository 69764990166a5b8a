"""Tests for bounding box calculation."""

import sys

import pytest

from geojson_types import (
    BoundingBox,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    UnsupportedTypeError,
    calculate_bounding_box,
    parse,
)
from geojson_types.services.bbox import aggregate_boxes, aggregate_positions

RING = [(1, 2), (3, 4), (5, 6), (1, 2)]


def test_point():
    assert calculate_bounding_box(Point(1, 2)) == BoundingBox(1, 2, 1, 2)


def test_point_altitude_is_ignored():
    box = calculate_bounding_box(Point(1, 2, 3))
    assert box == BoundingBox(1, 2, 1, 2)
    assert not box.has_altitude


def test_multi_point():
    multi_point = MultiPoint([Point(1, 2), Point(3, 4), Point(5, 6)])
    assert calculate_bounding_box(multi_point) == BoundingBox(1, 2, 5, 6)


def test_line_string():
    line = LineString([(3, -4), (1, 2), (5, 6)])
    assert calculate_bounding_box(line) == BoundingBox(1, -4, 5, 6)


def test_multi_line_string():
    lines = MultiLineString([LineString([(1, 2), (3, 4)]), LineString([(-5, 6), (7, 0)])])
    assert calculate_bounding_box(lines) == BoundingBox(-5, 0, 7, 6)


def test_polygon():
    assert calculate_bounding_box(Polygon([RING])) == BoundingBox(1, 2, 5, 6)


def test_polygon_includes_holes():
    hole = [(-1, -1), (0, 0), (1, -3), (-1, -1)]
    assert calculate_bounding_box(Polygon([RING, hole])) == BoundingBox(-1, -3, 5, 6)


def test_multi_polygon():
    other = [(10, 20), (30, 40), (50, 60), (10, 20)]
    multi_polygon = MultiPolygon([Polygon([RING]), Polygon([other])])
    assert calculate_bounding_box(multi_polygon) == BoundingBox(1, 2, 50, 60)


def test_geometry_collection_recurses():
    collection = GeometryCollection([
        Point(-10, 0),
        GeometryCollection([LineString([(0, 0), (5, 15)])]),
        Polygon([RING]),
    ])
    assert calculate_bounding_box(collection) == BoundingBox(-10, 0, 5, 15)


def test_feature_uses_its_geometry():
    assert calculate_bounding_box(Feature(Polygon([RING]))) == BoundingBox(1, 2, 5, 6)


def test_feature_collection():
    collection = FeatureCollection([Feature(Point(1, 2)), Feature(LineString([(-3, 4), (0, 9)]))])
    assert calculate_bounding_box(collection) == BoundingBox(-3, 2, 1, 9)


def test_explicit_bounding_box_wins():
    explicit = BoundingBox(100, 100, 200, 200)
    point = Point(1, 2, bounding_box=explicit)
    assert calculate_bounding_box(point) is explicit
    assert point.calculate_bounding_box() is explicit


def test_explicit_3d_bounding_box_is_returned_unchanged():
    explicit = BoundingBox(0, 0, 1, 1, -5, 5)
    line = LineString([(0, 0), (1, 1)], bounding_box=explicit)
    box = calculate_bounding_box(line)
    assert box == explicit
    assert box.has_altitude


def test_geometry_collection_uses_child_explicit_boxes():
    inner = Point(1, 2, bounding_box=BoundingBox(0, 0, 10, 10))
    collection = GeometryCollection([inner, Point(-1, 5)])
    assert calculate_bounding_box(collection) == BoundingBox(-1, 0, 10, 10)


def test_feature_collection_uses_feature_geometry_boxes():
    features = FeatureCollection([
        Feature(Point(1, 2), bounding_box=BoundingBox(0, 0, 3, 3)),
        Feature(Point(4, 4)),
    ])
    assert calculate_bounding_box(features) == BoundingBox(1, 2, 4, 4)

    # a box on the geometry itself still wins
    features = FeatureCollection([
        Feature(Point(1, 2, bounding_box=BoundingBox(0, 0, 3, 3))),
        Feature(Point(4, 4)),
    ])
    assert calculate_bounding_box(features) == BoundingBox(0, 0, 4, 4)


def test_computed_box_is_2d_for_3d_input():
    line = parse('{"type": "LineString", "coordinates": [[1, 2, 100], [3, 4, -100]]}')
    box = calculate_bounding_box(line)
    assert box == BoundingBox(1, 2, 3, 4)
    assert box.min_altitude is None


def test_empty_input_yields_the_seed_box():
    box = calculate_bounding_box(LineString([]))
    assert box == BoundingBox(sys.float_info.max, sys.float_info.max, -sys.float_info.max, -sys.float_info.max)
    assert aggregate_positions([]) == box
    assert aggregate_boxes([]) == box


def test_empty_collection_yields_the_seed_box():
    box = calculate_bounding_box(FeatureCollection([]))
    assert box.west == sys.float_info.max
    assert box.east == -sys.float_info.max


def test_unknown_object_is_unsupported():
    with pytest.raises(UnsupportedTypeError):
        calculate_bounding_box(object())


def test_none_is_rejected():
    with pytest.raises(TypeError):
        calculate_bounding_box(None)
