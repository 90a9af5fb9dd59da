import pandas as pd
import numpy as np

FIRST_NAMES = ["James", "David", "Michael", "Sarah", "Grace", "Tendai", "Nomsa", "Luis", "Amara", "Kenji"]
LAST_NAMES = ["Wilson", "Brown", "Johnson", "Moyo", "Garcia", "Okafor", "Tanaka", "Smith", "Ndlovu", "Rossi"]


def generate_mock_drivers(filename="mock_drivers.csv", count=10, seed=None):
    """
    Generates a driver catalog CSV in the shape `drivers.catalog.load_driver_catalog` reads.
    Positions are not part of the catalog; markers are scattered around the rider per search.
    """
    rng = np.random.default_rng(seed)

    data = []
    for i in range(count):
        driver_id = i + 1
        data.append({
            "driver_id": driver_id,
            "first_name": rng.choice(FIRST_NAMES),
            "last_name": rng.choice(LAST_NAMES),
            "profile_image_url": f"https://example.com/drivers/{driver_id}/profile.jpg",
            "car_image_url": f"https://example.com/drivers/{driver_id}/car.png",
            # Most cars seat 4, some vans seat 6
            "car_seats": int(rng.choice([4, 6], p=[0.8, 0.2])),
            "rating": float(np.round(rng.uniform(4.0, 5.0), 1)),
        })

    df = pd.DataFrame(data)
    df.to_csv(filename, index=False)
    print(f"Successfully generated {count} mock drivers into '{filename}'.")
    return df


if __name__ == "__main__":
    generate_mock_drivers()
