"""
Purpose: Map viewport covering the rider and the destination.
What it does:
Pure geometry, three cases evaluated in order:
- rider unknown       -> fixed default region
- destination unknown -> small region centred on the rider
- both known          -> midpoint centre, span padded by 30% on each axis
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from estimation.policy import EstimationPolicy, default_estimation_policy
from routing.distance import is_usable_coordinate

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Region:
    """
    Centre + deltas, the way map widgets describe a viewport.
    Deltas are always > 0.
    """
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    @property
    def bounds(self) -> Tuple[LatLon, LatLon]:
        """(south-west, north-east) corners."""
        half_lat = self.latitude_delta / 2
        half_lon = self.longitude_delta / 2
        return (
            (self.latitude - half_lat, self.longitude - half_lon),
            (self.latitude + half_lat, self.longitude + half_lon),
        )

    def contains(self, point: LatLon) -> bool:
        """Strict containment: points on the edge are outside."""
        (south, west), (north, east) = self.bounds
        lat, lon = point
        return south < lat < north and west < lon < east


def compute_region(
    rider: Optional[LatLon],
    destination: Optional[LatLon] = None,
    policy: Optional[EstimationPolicy] = None,
) -> Region:
    policy = policy or default_estimation_policy()
    delta = policy.default_delta

    # None, (None, lon) and non-finite components all count as unknown
    if not is_usable_coordinate(rider):
        center_lat, center_lon = policy.default_center
        return Region(center_lat, center_lon, delta, delta)

    rider_lat, rider_lon = rider
    if not is_usable_coordinate(destination):
        return Region(rider_lat, rider_lon, delta, delta)

    dest_lat, dest_lon = destination

    latitude_delta = (max(rider_lat, dest_lat) - min(rider_lat, dest_lat)) * policy.region_padding
    longitude_delta = (max(rider_lon, dest_lon) - min(rider_lon, dest_lon)) * policy.region_padding

    # a zero span on one axis (same latitude or same longitude) would collapse the viewport
    if latitude_delta <= 0:
        latitude_delta = delta
    if longitude_delta <= 0:
        longitude_delta = delta

    return Region(
        latitude=(rider_lat + dest_lat) / 2,
        longitude=(rider_lon + dest_lon) / 2,
        latitude_delta=latitude_delta,
        longitude_delta=longitude_delta,
    )
