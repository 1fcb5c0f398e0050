"""Configuration and GeoJSON helpers."""

from .config_loader import ConfigLoader, get_config, load_cluster_config
from .geojson import (
    FeatureCollection,
    PointFeature,
    clusters_to_geojson,
    load_features,
)

__all__ = [
    "ConfigLoader",
    "get_config",
    "load_cluster_config",
    "FeatureCollection",
    "PointFeature",
    "clusters_to_geojson",
    "load_features",
]
