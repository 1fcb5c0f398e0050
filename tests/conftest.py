"""
Pytest configuration and shared fixtures for geocluster tests.

This file provides:
- Sample places around Tokyo and further afield
- Helpers for building points from planar Mercator positions
- GeoJSON fixture files
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List

import numpy as np
import pytest

from geocluster.spatial import GeoCoordinates, SimpleGeoPoint, reverse_mercator_projection


# ==============================================================================
# Sample Points
# ==============================================================================

@pytest.fixture
def sample_places() -> List[Dict[str, Any]]:
    """Sample places: three in central Tokyo, one in Osaka, one in Sydney."""
    return [
        {"id": "place_1", "name": "Tokyo Station", "lat": 35.6812, "lng": 139.7671},
        {"id": "place_2", "name": "Imperial Palace", "lat": 35.6852, "lng": 139.7528},
        {"id": "place_3", "name": "Ginza", "lat": 35.6717, "lng": 139.7650},
        {"id": "place_4", "name": "Osaka Castle", "lat": 34.6873, "lng": 135.5262},
        {"id": "place_5", "name": "Sydney Opera House", "lat": -33.8568, "lng": 151.2153},
    ]


@pytest.fixture
def sample_points(sample_places) -> List[SimpleGeoPoint]:
    """Sample places as cluster inputs."""
    return [SimpleGeoPoint(lon=p["lng"], lat=p["lat"]) for p in sample_places]


@pytest.fixture
def random_points() -> List[SimpleGeoPoint]:
    """Deterministic pseudo-random points over inhabited latitudes."""
    rng = np.random.default_rng(42)
    lons = rng.uniform(-180.0, 180.0, size=300)
    lats = rng.uniform(-70.0, 70.0, size=300)
    return [SimpleGeoPoint(lon=float(lon), lat=float(lat)) for lon, lat in zip(lons, lats)]


@pytest.fixture
def planar_point() -> Callable[[float, float], SimpleGeoPoint]:
    """Build an input point sitting at planar Mercator position ``(x, y)``."""
    def _make(x: float, y: float) -> SimpleGeoPoint:
        coords = reverse_mercator_projection(x, y)
        return SimpleGeoPoint(lon=coords.lon, lat=coords.lat)
    return _make


class CountingPoint:
    """GeoPoint that records how often its coordinates were requested."""

    def __init__(self, lon: float, lat: float):
        self.lon = lon
        self.lat = lat
        self.calls = 0

    def get_coordinates(self) -> GeoCoordinates:
        self.calls += 1
        return GeoCoordinates(lon=self.lon, lat=self.lat)


@pytest.fixture
def counting_points(sample_places) -> List[CountingPoint]:
    return [CountingPoint(p["lng"], p["lat"]) for p in sample_places]


# ==============================================================================
# GeoJSON Fixtures
# ==============================================================================

@pytest.fixture
def places_geojson(tmp_path, sample_places) -> Path:
    """Write sample places as a GeoJSON FeatureCollection file."""
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": p["name"]},
                "geometry": {"type": "Point", "coordinates": [p["lng"], p["lat"]]},
            }
            for p in sample_places
        ],
    }
    path = tmp_path / "places.json"
    path.write_text(json.dumps(collection))
    return path
