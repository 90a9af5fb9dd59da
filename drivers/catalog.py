"""
Purpose: Load the driver catalog.
What it does:
Reads a CSV export of the drivers table into Driver models. Optional columns
missing from the file fall back to the model defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pandas as pd

from .models import Driver

REQUIRED_COLUMNS = ["driver_id", "first_name", "last_name"]


def load_driver_catalog(path: Union[str, Path]) -> List[Driver]:
    df = pd.read_csv(path)

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Driver catalog {path} is missing columns: {', '.join(missing)}")

    # blank cells come back as NaN; drop them so the dataclass defaults apply
    df = df.astype(object).where(pd.notna(df), None)

    drivers = []
    for _, row in df.iterrows():
        optional = {}
        if row.get("profile_image_url") is not None:
            optional["profile_image_url"] = str(row["profile_image_url"])
        if row.get("car_image_url") is not None:
            optional["car_image_url"] = str(row["car_image_url"])
        if row.get("car_seats") is not None:
            optional["car_seats"] = int(row["car_seats"])
        if row.get("rating") is not None:
            optional["rating"] = float(row["rating"])

        drivers.append(
            Driver(
                id=_driver_id(row["driver_id"]),
                first_name=str(row["first_name"]),
                last_name=str(row["last_name"]),
                **optional,
            )
        )
    return drivers


def _driver_id(value) -> Union[int, str]:
    # numeric ids stay ints so they match the ids the storage layer hands out
    try:
        return int(value)
    except (TypeError, ValueError):
        return str(value)
