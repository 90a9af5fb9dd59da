"""
Purpose: Central configuration for fare/ETA estimation and the map viewport.
What it does:

Stores all tunable constants for turning travel time into a price:

AVERAGE_SPEED_KMH = 40
RATE_PER_MINUTE = 0.50
MAX_CONCURRENT_REQUESTS = 16

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class EstimationPolicy:
    """
    Central configuration for the estimation engine.
    """

    # --- Fallback speed ---
    # Assumed average road speed when the routing provider has no answer.
    average_speed_kmh: float = 40.0

    # --- Pricing ---
    # Every code path (routed, partial, trip-level fallback) prices with this rate.
    rate_per_minute: float = 0.5

    # --- Fan-out ---
    # Upper bound on simultaneous driver resolutions. Candidate sets are small,
    # so this only matters for unusually large fleets.
    max_concurrent_requests: int = 16

    # --- Map viewport ---
    # Used when the rider location is unknown.
    default_center: Tuple[float, float] = (37.78825, -122.4324)
    default_delta: float = 0.01
    # 1.3 == 30% padding around the rider/destination span
    region_padding: float = 1.3

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.average_speed_kmh <= 0:
            raise ValueError("average_speed_kmh must be > 0")

        if self.rate_per_minute < 0:
            raise ValueError("rate_per_minute must be >= 0")

        if self.max_concurrent_requests < 1:
            raise ValueError("max_concurrent_requests must be >= 1")

        if self.default_delta <= 0:
            raise ValueError("default_delta must be > 0")

        if self.region_padding <= 1:
            raise ValueError("region_padding must be > 1 so both points stay inside the viewport")


def default_estimation_policy() -> EstimationPolicy:
    """
    Convenience factory for the default policy.
    """
    p = EstimationPolicy()
    p.validate()
    return p
