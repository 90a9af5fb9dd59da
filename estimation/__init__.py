#Expose the estimation pipeline pieces:
#Fallback estimator + pricing formula
#Single-driver resolver
#Fleet orchestrator (the “one call” entry point)

from .policy import EstimationPolicy, default_estimation_policy
from .models import EstimateSource, FareEstimate
from .fallback import fallback_minutes, fallback_leg_seconds, price_for_minutes, trip_fallback_estimate
from .resolver import resolve_driver_estimate
from .fleet import estimate_fleet #the main function to call to price every driver

__all__ = [
    "EstimationPolicy",
    "default_estimation_policy",
    "EstimateSource",
    "FareEstimate",
    "fallback_minutes",
    "fallback_leg_seconds",
    "price_for_minutes",
    "trip_fallback_estimate",
    "resolve_driver_estimate",
    "estimate_fleet",
]
