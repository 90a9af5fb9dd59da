import logging
import os
import time

from booking.session import RideSearchSession
from drivers.catalog import load_driver_catalog
from drivers.markers import JitterGenerator, generate_markers
from estimation.fleet import estimate_fleet
from mapview.region import compute_region
from routing.geoapify_client import GeoapifyClient
from scripts.generate_mock_drivers import generate_mock_drivers

# San Francisco -> San Jose
RIDER = (37.7749, -122.4194)
DESTINATION = (37.3382, -121.8863)
CATALOG_PATH = "mock_drivers.csv"


def run_estimation(catalog_path=CATALOG_PATH, seed=42):
    print("=== STARTING FARE ESTIMATION RUN ===")

    # 1. Load Data
    if not os.path.exists(catalog_path):
        generate_mock_drivers(catalog_path, count=10, seed=seed)
    drivers = load_driver_catalog(catalog_path)
    print(f"Loaded {len(drivers)} Drivers.\n")

    # 2. Build the search session
    session = RideSearchSession().with_rider(RIDER).with_destination(DESTINATION)
    session = session.with_markers(generate_markers(drivers, RIDER, JitterGenerator(seed=seed)))

    region = compute_region(session.rider, session.destination)
    print(f"Viewport centre ({region.latitude:.4f}, {region.longitude:.4f}), "
          f"deltas {region.latitude_delta:.4f} x {region.longitude_delta:.4f}\n")

    # 3. Estimate
    start_time = time.time()
    annotated = estimate_fleet(list(session.markers), session.rider, session.destination, GeoapifyClient())
    if annotated is None:
        print("Estimation skipped (missing location or GEOAPIFY_API_KEY).")
        return session

    session = session.with_markers(annotated)
    print(f"Priced {len(annotated)} drivers in {time.time() - start_time:.2f}s.\n")

    for marker in session.markers:
        print(f"  {marker.title:<20} {marker.time:6.1f} min   ${marker.price}")

    print("\n=== RUN COMPLETE ===")
    return session


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_estimation()
