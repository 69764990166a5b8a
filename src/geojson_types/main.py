"""FastAPI application exposing the GeoJSON codec."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geojson_types import __version__
from geojson_types.models.response import HealthResponse
from geojson_types.routes import bbox, normalize

app = FastAPI(
    title="GeoJSON Types",
    version=__version__,
    description="Lossless GeoJSON decoding, canonical encoding and bounding boxes",
)

# CORS: allow all origins for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(normalize.router, tags=["codec"])
app.include_router(bbox.router, tags=["bbox"])


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    libs = {}
    try:
        import pydantic

        libs["pydantic"] = pydantic.VERSION
    except ImportError:
        libs["pydantic"] = None

    try:
        import shapely

        libs["shapely"] = shapely.__version__
    except ImportError:
        libs["shapely"] = None

    try:
        import geopandas

        libs["geopandas"] = geopandas.__version__
    except ImportError:
        libs["geopandas"] = None

    return {
        "status": "ok",
        "version": __version__,
        "libraries": libs,
    }
