"""
geocluster/spatial: Mercator projection, KD-tree index and greedy clustering.

This module clusters geographic points into weighted centroids for map display.
"""

from .clustering import (
    Cluster,
    ClusterConfig,
    cluster_summary,
    clusters_to_dataframe,
    digits_count,
    epsilon_for_zoom,
)
from .errors import ClusteringError, IndexUnavailableError, InvalidInputError
from .index import SpatialIndex
from .points import ClusterPoint, GeoCoordinates, GeoPoint, SimpleGeoPoint
from .projection import mercator_projection, reverse_mercator_projection

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
    "SpatialIndex",
    "cluster_summary",
    "clusters_to_dataframe",
    "digits_count",
    "epsilon_for_zoom",
    "mercator_projection",
    "reverse_mercator_projection",
]
