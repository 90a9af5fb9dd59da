"""
Purpose: Result types for the estimation engine.

Rule: No routing calls, no pricing math. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EstimateSource(str, Enum):
    """
    Which code path produced a driver's timing data.
    Informational only: the price formula is the same for all of them.
    """
    ROUTED = "routed"               # both legs came from the provider
    PARTIAL = "partial"             # at least one leg was substituted locally
    TRIP_FALLBACK = "trip_fallback" # rider -> destination great-circle only


@dataclass(frozen=True)
class FareEstimate:
    """
    Time and price for one driver.
    """
    time_minutes: float
    price: str  # two-decimal fixed point, e.g. "7.50"
    source: EstimateSource = EstimateSource.ROUTED
