#Marks routing as a package.
#Re-exports the public API (GeoapifyClient, haversine_km) so other modules
#import from routing without knowing internal file names.
#No business logic.

from .distance import LatLon, haversine_km, is_usable_coordinate
from .geoapify_client import GeoapifyClient, RoutingError, as_non_negative, parse_route_feature

__all__ = [
    "LatLon",
    "haversine_km",
    "is_usable_coordinate",
    "GeoapifyClient",
    "RoutingError",
    "parse_route_feature",
    "as_non_negative",
]
