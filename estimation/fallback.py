"""
Purpose: Local fallback estimator and the single pricing formula.
What it does:
- Turns great-circle distance into travel time at an assumed average speed.
- Turns any travel time (routed or not) into a price at a fixed per-minute rate.

Every code path prices through `price_for_minutes`, so routed and fallback
prices stay comparable.
"""

from __future__ import annotations

from typing import Optional

from routing.distance import LatLon, haversine_km
from .models import EstimateSource, FareEstimate
from .policy import EstimationPolicy, default_estimation_policy


def fallback_minutes(distance_km: float, policy: Optional[EstimationPolicy] = None) -> float:
    """Minutes needed to cover `distance_km` at the policy's average speed."""
    policy = policy or default_estimation_policy()
    return (distance_km / policy.average_speed_kmh) * 60


def fallback_leg_seconds(origin: LatLon, destination: LatLon, policy: Optional[EstimationPolicy] = None) -> float:
    """Stand-in for a routing leg: great-circle distance at average speed, in seconds."""
    return fallback_minutes(haversine_km(origin, destination), policy) * 60


def price_for_minutes(minutes: float, policy: Optional[EstimationPolicy] = None) -> str:
    policy = policy or default_estimation_policy()
    return f"{round(minutes * policy.rate_per_minute, 2):.2f}"


def estimate_from_minutes(
    minutes: float,
    source: EstimateSource = EstimateSource.ROUTED,
    policy: Optional[EstimationPolicy] = None,
) -> FareEstimate:
    return FareEstimate(
        time_minutes=minutes,
        price=price_for_minutes(minutes, policy),
        source=source,
    )


def trip_fallback_estimate(rider: LatLon, destination: LatLon, policy: Optional[EstimationPolicy] = None) -> FareEstimate:
    """
    Trip-level fallback: price the rider -> destination great-circle distance only.
    The driver's position is ignored on purpose; this is what a driver gets
    once its own routing attempt has blown up.
    """
    minutes = fallback_minutes(haversine_km(rider, destination), policy)
    return estimate_from_minutes(minutes, EstimateSource.TRIP_FALLBACK, policy)
