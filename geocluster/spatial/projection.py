"""Spherical Mercator projection onto the unit square used by map tiles."""

from __future__ import annotations

import math
from typing import Tuple

from .points import GeoCoordinates


def mercator_projection(coordinates: GeoCoordinates) -> Tuple[float, float]:
    """Project longitude/latitude to ``(x, y)`` in ``[0, 1]``.

    ``y`` grows southwards. Latitudes beyond the Mercator limit (about
    +/-85.0511 degrees) collapse onto the top or bottom edge.
    """

    x = coordinates.lon / 360.0 + 0.5
    sin = math.sin(coordinates.lat * math.pi / 180.0)

    # The log term diverges at the poles
    if sin >= 1.0:
        return x, 0.0
    if sin <= -1.0:
        return x, 1.0

    y = 0.5 - 0.25 * math.log((1 + sin) / (1 - sin)) / math.pi
    return x, min(1.0, max(0.0, y))


def reverse_mercator_projection(x: float, y: float) -> GeoCoordinates:
    """Inverse of :func:`mercator_projection`."""

    lon = (x - 0.5) * 360
    y2 = (180 - y * 360) * math.pi / 180.0
    lat = 360 * math.atan(math.exp(y2)) / math.pi - 90
    return GeoCoordinates(lon=lon, lat=lat)


__all__ = ["mercator_projection", "reverse_mercator_projection"]
