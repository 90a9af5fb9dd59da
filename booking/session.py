"""
Purpose: Explicit state for one ride search.
What it does:
Holds the rider/destination coordinates, the driver markers for this search
and which driver the user picked. Every transition returns a new session;
nothing here is process-global.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from drivers.models import DriverId, DriverMarker

LatLon = Tuple[float, float]


class SessionError(Exception):
    """Raised when an invalid session transition is attempted."""
    pass


@dataclass(frozen=True)
class RideSearchSession:
    rider: Optional[LatLon] = None
    destination: Optional[LatLon] = None
    markers: Tuple[DriverMarker, ...] = ()
    selected_driver_id: Optional[DriverId] = None

    def with_rider(self, rider: LatLon) -> RideSearchSession:
        return replace(self, rider=rider)

    def with_destination(self, destination: LatLon) -> RideSearchSession:
        return replace(self, destination=destination)

    def with_markers(self, markers: List[DriverMarker]) -> RideSearchSession:
        """
        Replace the marker list (e.g. with the annotated output of estimate_fleet).
        A selection that no longer matches any marker is dropped.
        """
        markers = tuple(markers)
        selected = self.selected_driver_id
        if selected is not None and not any(marker.id == selected for marker in markers):
            selected = None
        return replace(self, markers=markers, selected_driver_id=selected)

    def select_driver(self, driver_id: DriverId) -> RideSearchSession:
        if not any(marker.id == driver_id for marker in self.markers):
            raise SessionError(f"Driver {driver_id} is not part of this search")
        return replace(self, selected_driver_id=driver_id)

    def clear_selection(self) -> RideSearchSession:
        return replace(self, selected_driver_id=None)

    def clear_locations(self) -> RideSearchSession:
        # markers were placed around the old rider position, so they go too
        return RideSearchSession()

    @property
    def has_estimates(self) -> bool:
        return any(marker.has_estimate for marker in self.markers)

    def selected_marker(self) -> Optional[DriverMarker]:
        for marker in self.markers:
            if marker.id == self.selected_driver_id:
                return marker
        return None

    def confirm_selection(self) -> DriverMarker:
        """
        The selected marker, guaranteed to carry both time and price.
        """
        marker = self.selected_marker()
        if marker is None:
            raise SessionError("No driver selected")

        if not marker.has_estimate:
            raise SessionError(
                f"Price data is missing for driver {marker.id}; choose a destination so fares can be estimated"
            )
        return marker
