"""I/O utilities: GeoJSON file read/write, GeoDataFrame conversion."""

import json
from pathlib import Path

import geopandas as gpd

from geojson_types.errors import TypeMismatchError
from geojson_types.models.feature import FeatureCollection
from geojson_types.models.geometry import GeoObject
from geojson_types.models.options import DecodeOptions
from geojson_types.services.serializer import dumps, from_mapping, parse, to_mapping


def read_geojson(path: str | Path, options: DecodeOptions | None = None) -> GeoObject | None:
    """Read a GeoJSON file."""
    with open(path, "rb") as f:
        return parse(f, options)


def write_geojson(obj: GeoObject, path: str | Path) -> None:
    """Write a GeoObject as compact GeoJSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps(obj), encoding="utf-8")


def feature_collection_to_gdf(collection: FeatureCollection) -> gpd.GeoDataFrame:
    """Convert a FeatureCollection to a GeoDataFrame (labelled WGS84, not reprojected)."""
    return gpd.GeoDataFrame.from_features(to_mapping(collection)["features"], crs="EPSG:4326")


def gdf_to_feature_collection(gdf: gpd.GeoDataFrame) -> FeatureCollection:
    """Convert a GeoDataFrame to a FeatureCollection."""
    obj = from_mapping(json.loads(gdf.to_json()))
    if not isinstance(obj, FeatureCollection):
        raise TypeMismatchError("FeatureCollection", obj.type.value)
    return obj
