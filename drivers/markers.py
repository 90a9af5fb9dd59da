"""
Purpose: Place catalog drivers on the map around the rider.
What it does:
Each search session scatters the catalog drivers in a small box around the
rider's position. Offsets come from an injected, seedable generator so the
same seed always yields the same layout.
"""

import random
from typing import List, Optional, Tuple

from .models import Driver, DriverMarker, LatLon


class JitterGenerator:
    """
    Seedable source of (lat, lon) offsets.

    Each component is uniform in [-spread / 2, spread / 2); the default spread
    of 0.01 degrees keeps drivers within roughly 500 m of the rider.
    """
    def __init__(self, seed: Optional[int] = None, spread: float = 0.01):
        if spread < 0:
            raise ValueError("spread must be >= 0")
        self.spread = spread
        self._random = random.Random(seed)

    def offset(self) -> Tuple[float, float]:
        lat_offset = (self._random.random() - 0.5) * self.spread
        lon_offset = (self._random.random() - 0.5) * self.spread
        return lat_offset, lon_offset


def generate_markers(
    drivers: List[Driver],
    rider: LatLon,
    jitter: Optional[JitterGenerator] = None,
) -> List[DriverMarker]:
    """
    Build one unannotated marker per catalog driver, in catalog order.
    """
    jitter = jitter or JitterGenerator()
    rider_latitude, rider_longitude = rider

    markers = []
    for driver in drivers:
        lat_offset, lon_offset = jitter.offset()
        markers.append(
            DriverMarker(
                driver=driver,
                location=(rider_latitude + lat_offset, rider_longitude + lon_offset),
            )
        )
    return markers
