"""Pydantic request models for all endpoints."""

from pydantic import BaseModel, Field

from geojson_types.config import MAX_NESTING_DEPTH


class NormalizeRequest(BaseModel):
    """Request for POST /normalize."""

    geojson: dict = Field(..., description="Any GeoJSON object")
    max_depth: int = Field(default=MAX_NESTING_DEPTH, ge=1, description="Maximum nesting depth")


class BoundingBoxRequest(BaseModel):
    """Request for POST /bbox."""

    geojson: dict = Field(..., description="Any GeoJSON object")
