"""
Purpose: ETA + fare for a single driver.
What it does:
Asks the routing client for two legs (driver -> rider, rider -> destination),
substitutes the local fallback for any leg the provider could not answer, and
converts the summed time into a price.

Two tiers of degradation:
- per leg: an empty/malformed answer is replaced by the great-circle estimate
  for that same leg.
- per driver: if the network or decoding blows up, all partial leg results are
  dropped and the driver gets the trip-level fallback (rider -> destination
  only, driver position ignored).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from routing.distance import LatLon
from routing.geoapify_client import as_non_negative
from .fallback import estimate_from_minutes, fallback_leg_seconds, trip_fallback_estimate
from .models import EstimateSource, FareEstimate
from .policy import EstimationPolicy, default_estimation_policy

logger = logging.getLogger(__name__)


def leg_seconds(
    routing_client,
    origin: LatLon,
    destination: LatLon,
    policy: EstimationPolicy,
    label: str = "leg",
) -> Tuple[float, bool]:
    """
    Time in seconds for one leg plus whether the provider answered it.

    Transport/decoding exceptions are not caught here; they belong to the
    per-driver boundary in `resolve_driver_estimate`.
    """
    route = routing_client.compute_route(origin, destination)

    # negative, NaN, infinite or non-numeric times count as no result
    seconds = as_non_negative(route.get("time")) if isinstance(route, dict) else None
    if seconds is None:
        logger.warning(f"Routing returned no usable result for {label}; using great-circle fallback")
        return fallback_leg_seconds(origin, destination, policy), False

    return seconds, True


def resolve_driver_estimate(
    routing_client,
    driver_location: LatLon,
    rider: LatLon,
    destination: LatLon,
    policy: Optional[EstimationPolicy] = None,
    driver_id: Optional[object] = None,
) -> FareEstimate:
    """
    Resolve (time, price) for one driver. Never raises.

    Args:
        routing_client: anything with compute_route(origin, destination)
        driver_location: (lat, lon) of the driver marker
        rider: (lat, lon) pickup point
        destination: (lat, lon) dropoff point
        policy: estimation constants (speed, rate)
        driver_id: only used for log lines

    Returns:
        FareEstimate with time in minutes and a two-decimal price string.
    """
    policy = policy or default_estimation_policy()

    try:
        # leg A: driver -> rider
        to_rider_s, to_rider_routed = leg_seconds(
            routing_client, driver_location, rider, policy, label=f"driver {driver_id} -> rider"
        )
        # leg B is issued even when leg A fell back; the legs are independent calls
        to_destination_s, to_destination_routed = leg_seconds(
            routing_client, rider, destination, policy, label=f"driver {driver_id} rider -> destination"
        )
    except Exception as e:
        logger.error(f"Error calculating time for driver {driver_id}: {e}")
        return trip_fallback_estimate(rider, destination, policy)

    total_minutes = (to_rider_s + to_destination_s) / 60
    source = EstimateSource.ROUTED if (to_rider_routed and to_destination_routed) else EstimateSource.PARTIAL

    estimate = estimate_from_minutes(total_minutes, source, policy)
    logger.debug(f"Driver {driver_id}: {estimate.time_minutes:.1f} min, ${estimate.price} ({source.value})")
    return estimate
