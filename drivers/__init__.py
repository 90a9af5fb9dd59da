"""
Drivers domain package.

Public API:
- Domain models: Driver, DriverMarker
- Marker placement: JitterGenerator, generate_markers
- Catalog loading: load_driver_catalog
"""
from .models import Driver, DriverMarker
from .markers import JitterGenerator, generate_markers
from .catalog import load_driver_catalog

__all__ = ["Driver",
           "DriverMarker",
             "JitterGenerator",
               "generate_markers",
               "load_driver_catalog",
               ]
