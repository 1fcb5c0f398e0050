"""
KD-tree range queries over planar cluster points.

Thin wrapper around :class:`sklearn.neighbors.KDTree` exposing the two
operations the clustering pass needs: build from planar points and find
every point within a radius of a query position.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from sklearn.neighbors import KDTree

from .errors import IndexUnavailableError
from .points import ClusterPoint

DEFAULT_NODE_SIZE = 64


class SpatialIndex:
    """Static KD-tree over ``(x, y)`` positions.

    ``node_size`` is the tree leaf size. Larger leaves build faster and
    search slower; the query results do not depend on it.
    """

    def __init__(self, xy: np.ndarray, node_size: int = DEFAULT_NODE_SIZE):
        self.node_size = node_size
        try:
            self._xy = np.asarray(xy, dtype=float).reshape(-1, 2)
            self._tree = KDTree(self._xy, leaf_size=node_size)
        except (MemoryError, ValueError) as e:
            raise IndexUnavailableError(f"Could not build spatial index: {e}") from e

    @classmethod
    def from_points(
        cls,
        points: Sequence[ClusterPoint],
        node_size: int = DEFAULT_NODE_SIZE,
    ) -> "SpatialIndex":
        xy = np.array([p.coordinates() for p in points], dtype=float)
        return cls(xy, node_size=node_size)

    def __len__(self) -> int:
        return len(self._xy)

    def within(self, x: float, y: float, radius: float) -> np.ndarray:
        """Return indices of points at Euclidean distance ``<= radius``.

        Indices are sorted ascending so callers see a deterministic order.
        """

        ind = self._tree.query_radius(np.array([[x, y]]), r=radius)[0]
        return np.sort(ind)


__all__ = ["DEFAULT_NODE_SIZE", "SpatialIndex"]
