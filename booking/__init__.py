from .session import RideSearchSession, SessionError
from .ride_request import build_ride_request, price_to_cents

__all__ = [
    "RideSearchSession",
    "SessionError",
    "build_ride_request",
    "price_to_cents",
]
