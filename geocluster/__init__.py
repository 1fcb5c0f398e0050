"""
Map marker clustering for geographic points.

Usage:
    from geocluster import Cluster, SimpleGeoPoint

    engine = Cluster.from_zoom(4)
    clusters = engine.cluster_points([SimpleGeoPoint(lon=10.0, lat=20.0)])
"""

from .spatial import (
    Cluster,
    ClusterConfig,
    ClusterPoint,
    ClusteringError,
    GeoCoordinates,
    GeoPoint,
    IndexUnavailableError,
    InvalidInputError,
    SimpleGeoPoint,
    epsilon_for_zoom,
)

__version__ = "0.1.0"

__all__ = [
    "Cluster",
    "ClusterConfig",
    "ClusterPoint",
    "ClusteringError",
    "GeoCoordinates",
    "GeoPoint",
    "IndexUnavailableError",
    "InvalidInputError",
    "SimpleGeoPoint",
    "epsilon_for_zoom",
]
