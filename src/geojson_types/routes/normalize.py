"""POST /normalize: decode a GeoJSON object and re-encode it canonically."""

import logging

from fastapi import APIRouter, HTTPException

from geojson_types.errors import GeoJsonError
from geojson_types.models.options import DecodeOptions
from geojson_types.models.request import NormalizeRequest
from geojson_types.services.serializer import from_mapping, to_mapping

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/normalize")
async def normalize(req: NormalizeRequest):
    """Round-trip GeoJSON through the object model."""
    try:
        obj = from_mapping(req.geojson, DecodeOptions(max_depth=req.max_depth))
        return to_mapping(obj)
    except GeoJsonError as e:
        logger.info("Rejected GeoJSON: %s", e)
        raise HTTPException(status_code=422, detail=f"{type(e).__name__}: {e}")
    except Exception as e:
        logger.exception("Normalization failed")
        raise HTTPException(status_code=500, detail=str(e))
