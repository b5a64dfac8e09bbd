"""
City reference data and the derived per-city time projection.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class City:
    """
    A catalog city.

    ``base_offset_minutes`` is the catalog's nominal standard offset. It is
    informational only; live offsets are always derived from ``timezone_id``.
    """

    name: str
    country: str
    timezone_id: str
    base_offset_minutes: int = 0


@dataclass(frozen=True)
class CityTime:
    """A city's wall clock at one instant. Derived, never persisted."""

    city: City
    current_instant: datetime
    offset_minutes: int
    formatted_time: str
    formatted_date: str
    offset_label: str
    is_dst: bool = False
