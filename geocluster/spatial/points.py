"""Point types shared by the projection, index and clustering modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple, runtime_checkable


@dataclass(frozen=True)
class GeoCoordinates:
    """Position on the Earth in decimal degrees."""

    lon: float
    lat: float


@runtime_checkable
class GeoPoint(Protocol):
    """Anything that can be clustered.

    ``get_coordinates`` is called exactly once per point and clustering, so
    implementations are free to compute the position lazily.
    """

    def get_coordinates(self) -> GeoCoordinates:
        ...


@dataclass(frozen=True)
class SimpleGeoPoint:
    """Minimal :class:`GeoPoint` backed by plain lon/lat attributes."""

    lon: float
    lat: float

    def get_coordinates(self) -> GeoCoordinates:
        return GeoCoordinates(lon=self.lon, lat=self.lat)


@dataclass
class ClusterPoint:
    """A single point or a merged cluster of points.

    While a clustering pass is running ``x``/``y`` are planar Mercator
    coordinates. Entries returned by :meth:`Cluster.all_clusters` carry
    longitude in ``x`` and latitude in ``y``.
    """

    x: float
    y: float
    id: int
    """Input index for original points, allocated id for merged clusters."""

    num_points: int = 1
    """Number of original input points represented by this entry."""

    included_points: List[GeoPoint] = field(default_factory=list)
    """Original caller objects, in encounter order."""

    def coordinates(self) -> Tuple[float, float]:
        return self.x, self.y

    def get_coordinates(self) -> GeoCoordinates:
        return GeoCoordinates(lon=self.x, lat=self.y)

    @property
    def is_cluster(self) -> bool:
        return self.num_points > 1


__all__ = [
    "ClusterPoint",
    "GeoCoordinates",
    "GeoPoint",
    "SimpleGeoPoint",
]
