"""Pydantic response models."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str
    version: str
    libraries: dict[str, str | None]


class BoundingBoxResponse(BaseModel):
    """Response for POST /bbox."""

    type: str
    bbox: list[float]
    explicit: bool
