"""Leaf value types: Position and BoundingBox."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from geojson_types.errors import GeometryValidationError


# Every integral double below this magnitude converts to int exactly.
_EXACT_INT_LIMIT = 2**53


def compact_ordinate(value: float) -> int | float:
    """Return integral ordinates as ``int`` so they print as ``1`` rather than ``1.0``."""
    value = float(value)
    if not value.is_integer() or abs(value) >= _EXACT_INT_LIMIT:
        return value
    if value == 0 and math.copysign(1.0, value) < 0:
        return value
    return int(value)


def _format_ordinate(value: float) -> str:
    return repr(compact_ordinate(value))


class Position(BaseModel):
    """A longitude/latitude pair with an optional altitude.

    Equality is exact per component; there is no tolerance.
    """

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float
    altitude: float | None = None

    def __init__(
        self,
        longitude: float,
        latitude: float,
        altitude: float | None = None,
        **data,
    ) -> None:
        super().__init__(longitude=longitude, latitude=latitude, altitude=altitude, **data)

    @field_validator("longitude", "latitude", "altitude")
    @classmethod
    def _as_float(cls, value: float | None) -> float | None:
        return None if value is None else float(value)

    @model_validator(mode="before")
    @classmethod
    def _from_sequence(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) not in (2, 3):
                raise ValueError("Only 2 or 3 element coordinates supported")
            return dict(zip(("longitude", "latitude", "altitude"), data))
        return data

    def __len__(self) -> int:
        return 2 if self.altitude is None else 3

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.longitude
        if index == 1:
            return self.latitude
        if index == 2 and self.altitude is not None:
            return self.altitude
        raise IndexError(f"position index out of range: {index}")

    def to_list(self) -> list[float]:
        return [self[i] for i in range(len(self))]

    def __str__(self) -> str:
        return "[" + ", ".join(_format_ordinate(v) for v in self.to_list()) + "]"


class BoundingBox(BaseModel):
    """Coordinate range of a GeoJSON object.

    A box is either fully 2D or fully 3D: ``min_altitude`` and
    ``max_altitude`` are both set or both ``None``.

    The flattened view (``box[i]``, ``to_list()``) follows GeoJSON ordering:
    ``[west, south, east, north]`` for 2D boxes and
    ``[west, south, min_altitude, east, north, max_altitude]`` for 3D boxes.
    """

    model_config = ConfigDict(frozen=True)

    west: float
    south: float
    east: float
    north: float
    min_altitude: float | None = None
    max_altitude: float | None = None

    def __init__(
        self,
        west: float,
        south: float,
        east: float,
        north: float,
        min_altitude: float | None = None,
        max_altitude: float | None = None,
        **data,
    ) -> None:
        super().__init__(
            west=west,
            south=south,
            east=east,
            north=north,
            min_altitude=min_altitude,
            max_altitude=max_altitude,
            **data,
        )

    @field_validator("west", "south", "east", "north", "min_altitude", "max_altitude")
    @classmethod
    def _as_float(cls, value: float | None) -> float | None:
        return None if value is None else float(value)

    @model_validator(mode="after")
    def _check_altitudes(self) -> BoundingBox:
        if (self.min_altitude is None) != (self.max_altitude is None):
            raise GeometryValidationError(
                "A bounding box needs both min_altitude and max_altitude, or neither"
            )
        return self

    @property
    def has_altitude(self) -> bool:
        return self.min_altitude is not None and self.max_altitude is not None

    def __len__(self) -> int:
        return 6 if self.has_altitude else 4

    def __getitem__(self, index: int) -> float:
        match (self.has_altitude, index):
            case (_, 0):
                return self.west
            case (_, 1):
                return self.south
            case (True, 2):
                return self.min_altitude
            case (True, 3):
                return self.east
            case (True, 4):
                return self.north
            case (True, 5):
                return self.max_altitude
            case (False, 2):
                return self.east
            case (False, 3):
                return self.north
            case _:
                raise IndexError(f"bounding box index out of range: {index}")

    def to_list(self) -> list[float]:
        return [self[i] for i in range(len(self))]

    def contains(self, position: Position) -> bool:
        """True if ``position`` lies inside the box; altitude is ignored."""
        return self.contains_coordinates(position.latitude, position.longitude)

    def contains_coordinates(self, latitude: float, longitude: float) -> bool:
        if longitude < self.west or longitude > self.east:
            return False
        if latitude < self.south or latitude > self.north:
            return False
        return True

    def __str__(self) -> str:
        return "[" + ", ".join(_format_ordinate(v) for v in self.to_list()) + "]"
