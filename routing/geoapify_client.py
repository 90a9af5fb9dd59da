#Purpose: The Geoapify routing “adapter/client”.
#Sole responsibility: talk to the Geoapify routing API via HTTP and return normalized outputs.
#Encapsulates provider-specific details:
#waypoint formatting (lat,lon|lat,lon)
#URL construction (/v1/routing)
#credential + timeout handling
#parsing the GeoJSON feature collection into our internal shape
#It should not contain fallback rules or pricing.


from dotenv import load_dotenv
import os
from typing import Any, Dict, List, Optional, Tuple
import math
import requests

# Read routing settings from environment
# Example in .env:
# GEOAPIFY_API_KEY=xxxxxxxx
# GEOAPIFY_BASE_URL=https://api.geoapify.com
# ROUTING_TIMEOUT_SECONDS=5
load_dotenv()
API_KEY = os.getenv("GEOAPIFY_API_KEY")
BASE_URL = os.getenv("GEOAPIFY_BASE_URL", "https://api.geoapify.com")
TIMEOUT_SECONDS = float(os.getenv("ROUTING_TIMEOUT_SECONDS", "5"))

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class RoutingError(Exception):
    """Raised when the routing provider answers with something we cannot decode."""
    pass


class GeoapifyClient:
    """
    Geoapify Adapter / Client

    Sole responsibility:
    - Talk to Geoapify via HTTP
    - Convert internal (lat, lon) pairs into a waypoint string
    - Return normalized outputs ({"time", "distance"}) or None when the
      provider has no usable route

    A missing api key is not an error here; the estimation layer checks
    `api_key` and skips the network entirely.
    """
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        mode: str = "drive",
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key or API_KEY
        self.base_url = (base_url or BASE_URL).rstrip("/")
        self.mode = mode #the mode of transportation (drive, walk, bicycle...)
        self.timeout = timeout if timeout is not None else TIMEOUT_SECONDS #seconds to wait before giving up

    #----------------
    # Internal helpers
    #----------------
    def format_waypoints(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to Geoapify format 'lat,lon|lat,lon|...'"""
        return "|".join(f"{lat},{lon}" for lat, lon in coords)

    #----------------
    # Public methods
    #----------------
    def compute_route(self, origin: LatLon, destination: LatLon) -> Optional[Dict[str, float]]:
        """
        Calls the Geoapify /v1/routing endpoint for a single leg.

        Returns:
            {
                "time": float,      # in seconds
                "distance": float,  # in meters
            }
            or None when the response carries no usable route feature
            (empty feature list, error body, non-object JSON, missing/negative time).

        Raises:
            requests.RequestException on transport failures (timeouts included)
            RoutingError when the body cannot be decoded as JSON
        """
        url = f"{self.base_url}/v1/routing"

        response = requests.get(
            url,
            params={
                "waypoints": self.format_waypoints([origin, destination]),
                "mode": self.mode,
                "apiKey": self.api_key,
            },
            timeout=self.timeout,
        )

        try:
            data = response.json()
        except ValueError as e:
            raise RoutingError(f"Geoapify returned a non-JSON body (HTTP {response.status_code})") from e

        # decodable but not a feature collection (list, null...): no usable route
        if not isinstance(data, dict):
            return None

        return parse_route_feature(data)


def parse_route_feature(data: Dict[str, Any]) -> Optional[Dict[str, float]]:
    """
    Normalize a Geoapify feature collection into {"time", "distance"}.

    HTTP success with zero features is treated exactly like a failure: None,
    never a zero time.
    """
    features = data.get("features")
    if not features or not isinstance(features, list):
        return None

    properties = features[0].get("properties") if isinstance(features[0], dict) else None
    if not isinstance(properties, dict):
        return None

    time_s = as_non_negative(properties.get("time"))
    if time_s is None:
        return None

    return {
        "time": time_s,
        "distance": as_non_negative(properties.get("distance")) or 0.0,
    }


def as_non_negative(value: Any) -> Optional[float]:
    # bool is an int subclass; a True "time" is garbage, not one second
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return None
    return value
