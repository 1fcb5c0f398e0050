"""
Single-pass greedy clustering of geographic points for map rendering.

Points are projected to spherical Mercator, indexed in a KD-tree and merged
in one pass over the input:

1. Each point not yet consumed becomes a seed and claims every unconsumed
   point within ``epsilon`` of it.
2. A seed with claimed neighbours is replaced by a new cluster placed at the
   ``num_points``-weighted centroid; a lonely seed is emitted unchanged.
3. Results are projected back to longitude/latitude.

Merging is not transitive and depends on input order: earlier points win
contested neighbours, and clusters formed in a pass are never merged again
within that pass.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import ClusteringError, IndexUnavailableError, InvalidInputError
from .index import DEFAULT_NODE_SIZE, SpatialIndex
from .points import ClusterPoint, GeoCoordinates, GeoPoint
from .projection import mercator_projection, reverse_mercator_projection

logger = logging.getLogger(__name__)

MAX_ZOOM = 21


@dataclass
class ClusterConfig:
    """Parameters for a clustering run."""

    zoom: int = 4
    """Map zoom level the clusters are rendered at (0-21)."""

    point_size: int = 60
    """Marker size in pixels; sets the clustering radius."""

    tile_size: int = 256
    """Map tile size in pixels."""

    node_size: int = DEFAULT_NODE_SIZE
    """KD-tree leaf size. Affects speed only."""

    epsilon: Optional[float] = None
    """Explicit planar radius. Overrides the zoom-derived value when set."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClusterConfig":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def resolved_epsilon(self) -> float:
        if self.epsilon is not None:
            return float(self.epsilon)
        return epsilon_for_zoom(self.zoom, self.point_size, self.tile_size)


def epsilon_for_zoom(zoom: int, point_size: int = 60, tile_size: int = 256) -> float:
    """Planar radius covering ``point_size`` pixels at ``zoom``.

    The whole world spans ``tile_size * 2**zoom`` pixels at a zoom level, and
    one unit in projected space.
    """

    if not 0 <= zoom <= MAX_ZOOM:
        raise InvalidInputError(f"Zoom must be between 0 and {MAX_ZOOM}, got {zoom}")
    if tile_size <= 0:
        raise InvalidInputError(f"Tile size must be positive, got {tile_size}")
    return float(point_size) / float(tile_size * (1 << int(zoom)))


def digits_count(n: int) -> int:
    """Number of decimal digits in ``n``, e.g. 123356 -> 6."""

    if n == 0:
        raise InvalidInputError("Digit count of zero is undefined")
    return len(str(abs(int(n))))


def _read_coordinates(points: Sequence[GeoPoint]) -> List[GeoCoordinates]:
    """Call every point's accessor once and reject non-finite positions."""

    coordinates = []
    for i, point in enumerate(points):
        coords = point.get_coordinates()
        if not (math.isfinite(coords.lon) and math.isfinite(coords.lat)):
            logger.warning(f"Rejecting point {i} with coordinates ({coords.lon}, {coords.lat})")
            raise InvalidInputError(
                f"Point {i} has non-finite coordinates "
                f"(lon={coords.lon}, lat={coords.lat})"
            )
        coordinates.append(coords)
    return coordinates


def translate_geo_points_to_cluster_points(points: Sequence[GeoPoint]) -> List[ClusterPoint]:
    """Wrap caller points into projected single-point clusters."""

    result = []
    for i, (point, coords) in enumerate(zip(points, _read_coordinates(points))):
        x, y = mercator_projection(coords)
        result.append(ClusterPoint(x=x, y=y, id=i, num_points=1, included_points=[point]))
    return result


class Cluster:
    """
    Greedy clustering engine.

    Attributes:
        epsilon: Clustering radius in projected units ([0, 1] spans the world)
        node_size: KD-tree leaf size
        result_points: Clusters from the most recent successful run
        cluster_idx_seed: First id handed to a merged cluster in that run

    Usage:
        engine = Cluster.from_zoom(4)
        engine.cluster_points(points)
        for entry in engine.all_clusters():
            print(entry.id, entry.num_points, entry.x, entry.y)
    """

    def __init__(self, epsilon: float, node_size: int = DEFAULT_NODE_SIZE):
        if not math.isfinite(epsilon) or epsilon < 0:
            raise InvalidInputError(f"Epsilon must be finite and non-negative, got {epsilon}")
        if node_size < 1:
            raise InvalidInputError(f"Node size must be positive, got {node_size}")

        self.epsilon = float(epsilon)
        self.node_size = int(node_size)
        self.result_points: List[ClusterPoint] = []
        self.cluster_idx_seed = 0
        self._cluster_id_last = 0

    @classmethod
    def from_zoom(
        cls,
        zoom: int,
        point_size: int = 60,
        tile_size: int = 256,
        node_size: int = DEFAULT_NODE_SIZE,
    ) -> "Cluster":
        return cls(epsilon_for_zoom(zoom, point_size, tile_size), node_size=node_size)

    @classmethod
    def from_config(cls, config: ClusterConfig) -> "Cluster":
        return cls(config.resolved_epsilon(), node_size=config.node_size)

    def cluster_points(self, points: Sequence[GeoPoint]) -> List[ClusterPoint]:
        """
        Cluster ``points`` and store the result.

        Points are referenced, never copied or modified, and each point's
        ``get_coordinates`` is called exactly once.

        Args:
            points: Non-empty sequence of objects implementing ``GeoPoint``

        Returns:
            The new result list, also available from :meth:`all_clusters`

        Raises:
            InvalidInputError: Empty input or non-finite coordinates
            IndexUnavailableError: The KD-tree could not be built
        """
        points = list(points)
        if not points:
            logger.warning("Refusing to cluster an empty point set")
            raise InvalidInputError("Cannot cluster an empty point set")

        # With 78 points cluster ids start at 100, with 986 at 1000
        seed = 10 ** digits_count(len(points))

        clusters = translate_geo_points_to_cluster_points(points)
        index = SpatialIndex.from_points(clusters, node_size=self.node_size)

        self.cluster_idx_seed = seed
        self._cluster_id_last = seed
        clusters = self._clusterize(clusters, index)

        result = []
        for cluster in clusters:
            coords = reverse_mercator_projection(cluster.x, cluster.y)
            result.append(replace(cluster, x=coords.lon, y=coords.lat))
        self.result_points = result

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Clustered {len(points)} points into {len(result)} entries "
                f"(epsilon={self.epsilon:.6g}, id seed={seed})"
            )
        return result

    def all_clusters(self) -> List[ClusterPoint]:
        """Return the clusters from the most recent run."""
        return self.result_points

    def _next_cluster_id(self) -> int:
        cluster_id = self._cluster_id_last
        self._cluster_id_last += 1
        return cluster_id

    def _clusterize(self, points: List[ClusterPoint], index: SpatialIndex) -> List[ClusterPoint]:
        visited = np.zeros(len(points), dtype=bool)
        result: List[ClusterPoint] = []

        for i, p in enumerate(points):
            if visited[i]:
                continue
            visited[i] = True

            num_points = p.num_points
            wx = p.x * p.num_points
            wy = p.y * p.num_points
            included_points = list(p.included_points)
            found_neighbours = 0

            for j in index.within(p.x, p.y, self.epsilon):
                # The seed itself is already visited and drops out here
                if visited[j]:
                    continue
                visited[j] = True
                b = points[j]
                wx += b.x * b.num_points
                wy += b.y * b.num_points
                num_points += b.num_points
                included_points.extend(b.included_points)
                found_neighbours += 1

            if found_neighbours:
                result.append(
                    ClusterPoint(
                        x=wx / num_points,
                        y=wy / num_points,
                        id=self._next_cluster_id(),
                        num_points=num_points,
                        included_points=included_points,
                    )
                )
            else:
                result.append(p)

        return result


def clusters_to_dataframe(clusters: Sequence[ClusterPoint]) -> pd.DataFrame:
    """Tabulate result clusters, one row per entry."""

    columns = ["id", "lng", "lat", "num_points", "is_cluster"]
    if not clusters:
        return pd.DataFrame(columns=columns)

    return pd.DataFrame(
        [
            {
                "id": c.id,
                "lng": c.x,
                "lat": c.y,
                "num_points": c.num_points,
                "is_cluster": c.is_cluster,
            }
            for c in clusters
        ],
        columns=columns,
    )


def cluster_summary(clusters: Sequence[ClusterPoint]) -> Tuple[int, int, int]:
    """Return ``(entries, merged clusters, total points)`` for a result."""

    merged = sum(1 for c in clusters if c.is_cluster)
    total = sum(c.num_points for c in clusters)
    return len(clusters), merged, total


__all__ = [
    "Cluster",
    "ClusterConfig",
    "ClusteringError",
    "IndexUnavailableError",
    "InvalidInputError",
    "MAX_ZOOM",
    "cluster_summary",
    "clusters_to_dataframe",
    "digits_count",
    "epsilon_for_zoom",
    "translate_geo_points_to_cluster_points",
]
