"""
Purpose: Core data models for the drivers domain.
What it does:
Defines a catalog Driver (who they are, what they drive) and a DriverMarker
(that driver placed on the map for one search session, optionally annotated
with an ETA and a price).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:
    from estimation.models import FareEstimate

LatLon = Tuple[float, float]
DriverId = Union[int, str]


@dataclass(frozen=True)
class Driver:
    """
    A catalog entry. Display fields are opaque to the estimation engine.
    """
    id: DriverId
    first_name: str
    last_name: str
    profile_image_url: str = ""
    car_image_url: str = ""
    car_seats: int = 4
    rating: float = 5.0

    @property
    def title(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class DriverMarker:
    """
    A driver positioned for the current search.

    `time` (minutes) and `price` (e.g. "7.50") are either both None or both
    set; the only way to set them is `with_estimate`.
    """
    driver: Driver
    location: LatLon
    time: Optional[float] = None
    price: Optional[str] = None

    def __post_init__(self):
        if (self.time is None) != (self.price is None):
            raise ValueError(f"Driver marker {self.driver.id} must carry both time and price, or neither")

    @property
    def id(self) -> DriverId:
        return self.driver.id

    @property
    def title(self) -> str:
        return self.driver.title

    @property
    def has_estimate(self) -> bool:
        return self.time is not None and self.price is not None

    def with_estimate(self, estimate: FareEstimate) -> DriverMarker:
        # time and price always come from the same estimate
        # Because DriverMarker is a frozen dataclass, we return a new instance via replace
        return replace(self, time=estimate.time_minutes, price=estimate.price)

    def without_estimate(self) -> DriverMarker:
        return replace(self, time=None, price=None)
