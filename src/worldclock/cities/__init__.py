"""
City catalog and world-clock snapshots.
"""

from .catalog import CityCatalog
from .defaults import DEFAULT_CITIES, POPULAR_CITY_NAMES
from .models import City, CityTime
from .snapshot import cities_snapshot, city_time

__all__ = [
    "City",
    "CityCatalog",
    "CityTime",
    "DEFAULT_CITIES",
    "POPULAR_CITY_NAMES",
    "cities_snapshot",
    "city_time",
]
