"""Tests for the FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient

from geojson_types import __version__
from geojson_types.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__
    assert set(body["libraries"]) == {"pydantic", "shapely", "geopandas"}


def test_normalize_orders_members(client):
    geojson = {
        "title": "t",
        "properties": {"name": "value"},
        "geometry": {"coordinates": [1, 2], "type": "Point"},
        "type": "Feature",
        "id": "f1",
    }
    response = client.post("/normalize", json={"geojson": geojson})
    assert response.status_code == 200
    body = response.json()
    assert list(body) == ["type", "id", "geometry", "properties", "title"]
    assert body["geometry"] == {"type": "Point", "coordinates": [1, 2]}


def test_normalize_rejects_invalid_geojson(client):
    response = client.post("/normalize", json={"geojson": {"type": "Circle", "coordinates": [1, 2]}})
    assert response.status_code == 422
    assert response.json()["detail"].startswith("UnsupportedTypeError:")


def test_normalize_honours_max_depth(client):
    geojson = {"type": "GeometryCollection", "geometries": [{"type": "Point", "coordinates": [0, 0]}]}
    assert client.post("/normalize", json={"geojson": geojson, "max_depth": 2}).status_code == 200

    response = client.post("/normalize", json={"geojson": geojson, "max_depth": 1})
    assert response.status_code == 422
    assert response.json()["detail"].startswith("NestingDepthError:")


def test_normalize_requires_an_object(client):
    response = client.post("/normalize", json={"geojson": [1, 2]})
    assert response.status_code == 422


def test_bbox_computed(client):
    geojson = {"type": "LineString", "coordinates": [[1, 2], [3, 4], [-1, 0]]}
    response = client.post("/bbox", json={"geojson": geojson})
    assert response.status_code == 200
    assert response.json() == {"type": "LineString", "bbox": [-1.0, 0.0, 3.0, 4.0], "explicit": False}


def test_bbox_explicit(client):
    geojson = {"type": "Point", "coordinates": [1, 2], "bbox": [0, 0, -10, 5, 5, 10]}
    response = client.post("/bbox", json={"geojson": geojson})
    assert response.status_code == 200
    assert response.json() == {
        "type": "Point",
        "bbox": [0.0, 0.0, -10.0, 5.0, 5.0, 10.0],
        "explicit": True,
    }


def test_bbox_rejects_invalid_geojson(client):
    response = client.post("/bbox", json={"geojson": {"type": "Point"}})
    assert response.status_code == 422
    assert response.json()["detail"].startswith("MissingPropertyError:")
