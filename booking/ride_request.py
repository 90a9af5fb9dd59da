"""
Purpose: Payload for the ride-creation collaborator.
What it does:
Turns a confirmed search session into the record the storage/payment side
expects. Money goes out in cents, ride time in whole minutes.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict

from .session import RideSearchSession, SessionError


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def price_to_cents(price: str) -> int:
    return _round_half_up(Decimal(price) * 100)


def build_ride_request(
    session: RideSearchSession,
    user_id: str,
    origin_address: str,
    destination_address: str,
) -> Dict[str, Any]:
    if session.rider is None or session.destination is None:
        raise SessionError("Both pickup and destination are required to book a ride")

    marker = session.confirm_selection()

    origin_latitude, origin_longitude = session.rider
    destination_latitude, destination_longitude = session.destination

    return {
        "origin_address": origin_address,
        "destination_address": destination_address,
        "origin_latitude": origin_latitude,
        "origin_longitude": origin_longitude,
        "destination_latitude": destination_latitude,
        "destination_longitude": destination_longitude,
        "ride_time": _round_half_up(Decimal(str(marker.time))),
        "fare_price": price_to_cents(marker.price),
        "payment_status": "pending",
        "driver_id": marker.id,
        "user_id": user_id,
    }
