"""Great-circle distance between a check-in position and the office.

The gate is advisory: the recording flow reports in/out of range but never
refuses to record because of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..core.constants import EARTH_RADIUS_METERS


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class ReferenceLocation:
    lat: float
    lng: float
    radius_meters: float

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in meters."""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lng - a.lng)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push h past 1 for near-antipodal points.
    h = min(1.0, h)
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def within_range(distance: float, radius_meters: float) -> bool:
    return distance <= radius_meters


def can_record(distance: Optional[float], radius_meters: float, *, online: bool = True) -> bool:
    """Recording is allowed in range, or whenever the device is offline."""
    if not online:
        return True
    return distance is not None and within_range(distance, radius_meters)
