"""
Purpose: Orchestrator for a whole fleet (the "glue").
What it does:
Takes the markers of one search session, fans the single-driver resolver out
over a thread pool, and reassembles annotated markers in the caller's order.

Early exit (returns None, caller keeps markers unannotated):
- rider or destination missing
- routing credential missing

If the fan-out itself fails, every driver gets the trip-level fallback so the
caller is never left without prices.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from drivers.models import DriverId, DriverMarker
from routing.distance import LatLon, is_usable_coordinate
from routing.geoapify_client import GeoapifyClient
from .fallback import trip_fallback_estimate
from .models import FareEstimate
from .policy import EstimationPolicy, default_estimation_policy
from .resolver import resolve_driver_estimate

logger = logging.getLogger(__name__)


def estimate_fleet(
    markers: List[DriverMarker],
    rider: Optional[LatLon],
    destination: Optional[LatLon],
    routing_client=None,
    policy: Optional[EstimationPolicy] = None,
) -> Optional[List[DriverMarker]]:
    """
    Annotate every marker with time (minutes) and price.

    Args:
        markers: driver markers for this search, in display order
        rider: (lat, lon) pickup point, or None if not known yet
        destination: (lat, lon) dropoff point, or None if not chosen yet
        routing_client: anything exposing `api_key` and
            compute_route(origin, destination); defaults to a GeoapifyClient
            configured from the environment
        policy: estimation constants

    Returns:
        None when estimation cannot run yet, otherwise a new list with the same
        drivers in the same order, each carrying both time and price.
    """
    if not is_usable_coordinate(rider) or not is_usable_coordinate(destination):
        logger.info("Rider or destination location missing; skipping fare estimation")
        return None

    routing_client = routing_client if routing_client is not None else GeoapifyClient()
    if not getattr(routing_client, "api_key", None):
        logger.error("GEOAPIFY_API_KEY is not set; skipping fare estimation")
        return None

    policy = policy or default_estimation_policy()

    if not markers:
        return []

    try:
        estimates = _resolve_concurrently(markers, routing_client, rider, destination, policy)
        annotated = [
            marker.with_estimate(estimates[marker.id])
            for marker in markers
        ]
    except Exception as e:
        logger.error(f"Error calculating driver times, pricing the whole batch from trip distance: {e}")
        return _trip_fallback_for_all(markers, rider, destination, policy)

    logger.info(f"Calculated times for {len(annotated)} drivers")
    return annotated


def _resolve_concurrently(
    markers: List[DriverMarker],
    routing_client,
    rider: LatLon,
    destination: LatLon,
    policy: EstimationPolicy,
) -> Dict[DriverId, FareEstimate]:
    """
    One task per driver; results are keyed by driver id, not by completion order.
    """
    max_workers = min(len(markers), policy.max_concurrent_requests)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fare-estimate") as executor:
        futures = {
            marker.id: executor.submit(
                resolve_driver_estimate,
                routing_client,
                marker.location,
                rider,
                destination,
                policy,
                marker.id,
            )
            for marker in markers
        }
        if len(futures) < len(markers):
            logger.warning(
                f"{len(markers) - len(futures)} marker(s) share a driver id; markers with the same id get the same estimate"
            )
        # waits for every driver; total latency is the slowest one
        return {driver_id: future.result() for driver_id, future in futures.items()}


def _trip_fallback_for_all(
    markers: List[DriverMarker],
    rider: LatLon,
    destination: LatLon,
    policy: EstimationPolicy,
) -> List[DriverMarker]:
    estimate = trip_fallback_estimate(rider, destination, policy)
    return [marker.with_estimate(estimate) for marker in markers]
