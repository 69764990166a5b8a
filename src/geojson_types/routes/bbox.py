"""POST /bbox: bounding box of a GeoJSON object."""

import logging

from fastapi import APIRouter, HTTPException

from geojson_types.errors import GeoJsonError
from geojson_types.models.request import BoundingBoxRequest
from geojson_types.models.response import BoundingBoxResponse
from geojson_types.services.bbox import calculate_bounding_box
from geojson_types.services.serializer import from_mapping

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/bbox", response_model=BoundingBoxResponse)
async def bbox(req: BoundingBoxRequest):
    """Return the explicit bounding box, or the one computed from coordinates."""
    try:
        obj = from_mapping(req.geojson)
        box = calculate_bounding_box(obj)
    except GeoJsonError as e:
        logger.info("Rejected GeoJSON: %s", e)
        raise HTTPException(status_code=422, detail=f"{type(e).__name__}: {e}")
    except Exception as e:
        logger.exception("Bounding box computation failed")
        raise HTTPException(status_code=500, detail=str(e))

    return BoundingBoxResponse(
        type=obj.type.value,
        bbox=box.to_list(),
        explicit=obj.bounding_box is not None,
    )
