"""GeoJSON input and output for the clustering engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from pydantic import BaseModel, Field, field_validator

from geocluster.spatial.points import ClusterPoint, GeoCoordinates


class PointGeometry(BaseModel):
    """GeoJSON Point geometry; positions are ``[lon, lat, ...]``."""

    type: str = "Point"
    coordinates: List[float]

    @field_validator("coordinates")
    @classmethod
    def _check_position(cls, value: List[float]) -> List[float]:
        if len(value) < 2:
            raise ValueError("a position needs at least longitude and latitude")
        return value


class PointFeature(BaseModel):
    """A GeoJSON Point feature usable directly as a cluster input."""

    type: str = "Feature"
    properties: Dict[str, Any] = Field(default_factory=dict)
    geometry: PointGeometry

    @field_validator("properties", mode="before")
    @classmethod
    def _null_properties(cls, value: Any) -> Any:
        return {} if value is None else value

    def get_coordinates(self) -> GeoCoordinates:
        lon, lat = self.geometry.coordinates[:2]
        return GeoCoordinates(lon=lon, lat=lat)


class FeatureCollection(BaseModel):
    type: str = "FeatureCollection"
    features: List[PointFeature] = Field(default_factory=list)


def load_features(path: Union[str, Path]) -> List[PointFeature]:
    """
    Read Point features from a GeoJSON FeatureCollection file.

    Raises:
        FileNotFoundError: If ``path`` doesn't exist
        pydantic.ValidationError: If a feature is not a valid Point
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"GeoJSON file '{path}' not found")

    with open(path, "r") as f:
        return FeatureCollection.model_validate(json.load(f)).features


def clusters_to_geojson(clusters: Sequence[ClusterPoint]) -> Dict[str, Any]:
    """Render result clusters as a GeoJSON FeatureCollection dict.

    Single points keep the properties of their source feature when the
    source is a :class:`PointFeature`.
    """

    features = []
    for cluster in clusters:
        properties: Dict[str, Any] = {}
        if not cluster.is_cluster and cluster.included_points:
            source = cluster.included_points[0]
            if isinstance(source, PointFeature):
                properties.update(source.properties)
        properties.update(
            id=cluster.id,
            point_count=cluster.num_points,
            cluster=cluster.is_cluster,
        )
        features.append(
            {
                "type": "Feature",
                "properties": properties,
                "geometry": {"type": "Point", "coordinates": [cluster.x, cluster.y]},
            }
        )
    return {"type": "FeatureCollection", "features": features}


__all__ = [
    "FeatureCollection",
    "PointFeature",
    "PointGeometry",
    "clusters_to_geojson",
    "load_features",
]
