"""
Purpose: Great-circle distance between two coordinates.
What it does:
Haversine over a spherical earth. Used by the fallback estimator whenever the
routing provider gives us nothing usable.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

#internal coordinate type :(lat,lon)
LatLon = Tuple[float, float]

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: LatLon, b: LatLon) -> float:
    """Return the great-circle distance in kilometers between two (lat, lon) points."""
    lat1, lon1 = a
    lat2, lon2 = b

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def is_usable_coordinate(coord: Optional[LatLon]) -> bool:
    """False for None, a malformed pair, or any missing/non-finite component."""
    if coord is None:
        return False
    try:
        lat, lon = coord
    except (TypeError, ValueError):
        return False
    if lat is None or lon is None:
        return False
    return math.isfinite(lat) and math.isfinite(lon)
