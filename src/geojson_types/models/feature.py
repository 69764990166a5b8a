"""Feature and FeatureCollection."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from geojson_types.models.geometry import Geometry, GeoObject, GeoObjectType
from geojson_types.models.properties import EMPTY_PROPERTIES, PropertyMap


class Feature(GeoObject):
    """A geometry plus a property map and an optional identifier.

    ``properties`` comes from the ``"properties"`` member; any other unknown
    member of the source object lands in ``custom_properties``.
    """

    type: ClassVar[GeoObjectType] = GeoObjectType.FEATURE

    geometry: Geometry
    properties: PropertyMap = Field(default_factory=lambda: EMPTY_PROPERTIES)
    id: str | None = None

    def __init__(self, geometry, properties=None, **data) -> None:
        super().__init__(geometry=geometry, properties=properties, **data)


class FeatureCollection(GeoObject):
    type: ClassVar[GeoObjectType] = GeoObjectType.FEATURE_COLLECTION

    features: tuple[Feature, ...] = ()

    def __init__(self, features=(), **data) -> None:
        super().__init__(features=features, **data)

    def __len__(self) -> int:
        return len(self.features)

    def __getitem__(self, index: int) -> Feature:
        return self.features[index]
