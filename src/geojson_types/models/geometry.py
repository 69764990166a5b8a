"""GeoObject base class and the closed set of geometry variants."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from geojson_types import config
from geojson_types.errors import GeometryValidationError
from geojson_types.models.primitives import BoundingBox, Position
from geojson_types.models.properties import EMPTY_PROPERTIES, PropertyMap, PropertyValue


class GeoObjectType(str, Enum):
    """GeoJSON ``type`` tag of a GeoObject."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


class GeoObject(BaseModel):
    """Base type for every GeoJSON object.

    Instances are immutable. ``custom_properties`` holds the members of the
    source object that are not part of its schema, in document order; they
    are written back after the known members on encode.
    """

    model_config = ConfigDict(frozen=True)

    type: ClassVar[GeoObjectType]

    bounding_box: BoundingBox | None = None
    custom_properties: PropertyMap = Field(default_factory=lambda: EMPTY_PROPERTIES)

    @model_validator(mode="after")
    def _check_custom_properties(self) -> GeoObject:
        reserved = {config.TYPE_PROPERTY, config.BBOX_PROPERTY}
        reserved.update(config.RESERVED_MEMBERS[self.type.value])
        clashes = [name for name in self.custom_properties if name in reserved]
        if clashes:
            raise GeometryValidationError(
                f"Custom properties of a {self.type.value} cannot use reserved names: {clashes}"
            )
        return self

    def get_custom_property(self, name: str, default: Any = None) -> PropertyValue:
        return self.custom_properties.get(name, default)

    def calculate_bounding_box(self) -> BoundingBox:
        """Return the explicit bounding box, or one computed from the coordinates."""
        from geojson_types.services.bbox import calculate_bounding_box

        return calculate_bounding_box(self)

    def to_mapping(self) -> dict[str, Any]:
        from geojson_types.services.converter import write_geo_object

        return write_geo_object(self)

    def to_geojson(self) -> str:
        from geojson_types.services.serializer import dumps

        return dumps(self)

    def __str__(self) -> str:
        return self.to_geojson()

    @classmethod
    def parse(cls, source, options=None):
        """Parse GeoJSON text, bytes or a file object.

        Called on a concrete class (``Polygon.parse(...)``) the result must be
        of that class, otherwise ``TypeMismatchError`` is raised.
        """
        from geojson_types.services import serializer

        if cls is GeoObject:
            return serializer.parse(source, options)
        return serializer.parse_as(cls, source, options)


class Point(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.POINT

    coordinates: Position

    def __init__(
        self,
        coordinates: Position | float,
        latitude: float | None = None,
        altitude: float | None = None,
        **data,
    ) -> None:
        if latitude is not None:
            coordinates = Position(coordinates, latitude, altitude)
        super().__init__(coordinates=coordinates, **data)


class LineString(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.LINE_STRING

    coordinates: tuple[Position, ...] = ()

    def __init__(self, coordinates=(), **data) -> None:
        super().__init__(coordinates=coordinates, **data)


class LinearRing(BaseModel):
    """Closed sequence of at least four positions; first equals last.

    Not a GeoObject of its own: rings only exist inside polygons.
    """

    model_config = ConfigDict(frozen=True)

    coordinates: tuple[Position, ...]

    def __init__(self, coordinates, **data) -> None:
        super().__init__(coordinates=coordinates, **data)

    @model_validator(mode="before")
    @classmethod
    def _from_sequence(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            return {"coordinates": data}
        return data

    @model_validator(mode="after")
    def _check_closed(self) -> LinearRing:
        if len(self.coordinates) < 4:
            raise GeometryValidationError("The linear ring is required to have at least 4 coordinates")
        if self.coordinates[0] != self.coordinates[-1]:
            raise GeometryValidationError(
                "The first and last coordinate of the linear ring are required to be equal"
            )
        return self


class Polygon(GeoObject):
    """Outer ring first, holes after it. Winding and containment are not checked."""

    type: ClassVar[GeoObjectType] = GeoObjectType.POLYGON

    rings: tuple[LinearRing, ...] = ()

    def __init__(self, rings=(), **data) -> None:
        super().__init__(rings=rings, **data)

    @property
    def coordinates(self) -> tuple[tuple[Position, ...], ...]:
        return tuple(ring.coordinates for ring in self.rings)


class MultiPoint(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.MULTI_POINT

    points: tuple[Point, ...] = ()

    def __init__(self, points=(), **data) -> None:
        super().__init__(points=points, **data)

    @property
    def coordinates(self) -> tuple[Position, ...]:
        return tuple(point.coordinates for point in self.points)


class MultiLineString(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.MULTI_LINE_STRING

    lines: tuple[LineString, ...] = ()

    def __init__(self, lines=(), **data) -> None:
        super().__init__(lines=lines, **data)

    @property
    def coordinates(self) -> tuple[tuple[Position, ...], ...]:
        return tuple(line.coordinates for line in self.lines)


class MultiPolygon(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.MULTI_POLYGON

    polygons: tuple[Polygon, ...] = ()

    def __init__(self, polygons=(), **data) -> None:
        super().__init__(polygons=polygons, **data)

    @property
    def coordinates(self) -> tuple[tuple[tuple[Position, ...], ...], ...]:
        return tuple(polygon.coordinates for polygon in self.polygons)


class GeometryCollection(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.GEOMETRY_COLLECTION

    geometries: tuple[Geometry, ...] = ()

    def __init__(self, geometries=(), **data) -> None:
        super().__init__(geometries=geometries, **data)


Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

GEOMETRY_TYPES = (
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)

GeometryCollection.model_rebuild()


def is_geometry(value: Any) -> bool:
    return isinstance(value, GEOMETRY_TYPES)
