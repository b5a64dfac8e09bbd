"""
World-clock snapshot of a set of cities.
"""

from collections.abc import Sequence
from datetime import datetime

from ..utils.time import (
    Granularity,
    ensure_utc,
    format_instant,
    format_offset_label,
    is_daylight_saving_time,
    now_in_timezone,
    offset_minutes,
    utc_now,
)
from .models import City, CityTime


def city_time(city: City, at_instant: datetime, hour12: bool = True) -> CityTime:
    """Project one city's wall clock at an instant."""
    offset = offset_minutes(city.timezone_id, at_instant)
    return CityTime(
        city=city,
        current_instant=now_in_timezone(city.timezone_id, at_instant),
        offset_minutes=offset,
        formatted_time=format_instant(
            at_instant, city.timezone_id, Granularity.TIME, hour12=hour12
        ),
        formatted_date=format_instant(at_instant, city.timezone_id, Granularity.DATE),
        offset_label=format_offset_label(offset),
        is_dst=is_daylight_saving_time(city.timezone_id, at_instant),
    )


def cities_snapshot(
    cities: Sequence[City],
    at_instant: datetime | None = None,
    hour12: bool = True,
) -> list[CityTime]:
    """
    Compute the current time for each city.

    The instant is sampled once so every entry reflects the same moment.
    The result preserves input order and is recomputed on every call; the
    refresh cadence belongs to the caller.

    Args:
        cities: Cities to render
        at_instant: Reference instant; defaults to now. Naive values are UTC.
        hour12: Use a 12-hour clock for ``formatted_time``

    Returns:
        One CityTime per input city, in input order

    Raises:
        InvalidTimezoneError: If any city's timezone is unknown
    """
    instant = ensure_utc(at_instant) if at_instant is not None else utc_now()
    return [city_time(city, instant, hour12=hour12) for city in cities]
