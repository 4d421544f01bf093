"""
Purpose: Great-circle distance between two coordinates.
What it does:
- Haversine formula on a spherical earth (R = 6371 km)

No range validation here: out of range input gives a number, not an error.
Validation belongs to waypoints.validation.
"""
from __future__ import annotations

import math

from waypoints.models import LatLon

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: LatLon, b: LatLon) -> float:
    """
    Haversine distance between two (lat, lon) points in kilometers.
    """
    lat1, lon1 = a
    lat2, lon2 = b

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # rounding can push h a hair outside [0, 1] for antipodal points
    h = min(max(h, 0.0), 1.0)

    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))
