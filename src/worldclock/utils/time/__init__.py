"""
Unified time management utilities for WorldClock.

This package provides timezone resolution, offset computation, instant
conversion and presentation helpers across the entire application.
"""

from .conversion import ConversionResult, convert
from .formatting import (
    Granularity,
    format_delta,
    format_duration,
    format_instant,
    format_offset_label,
)
from .timezone import (
    TimestampStyle,
    ensure_utc,
    format_for_discord,
    get_system_now,
    get_system_timezone,
    is_daylight_saving_time,
    is_valid_timezone,
    localize,
    now_in_timezone,
    observes_daylight_saving,
    offset_minutes,
    resolve_timezone,
    standard_offset_minutes,
    utc_now,
)

__all__ = [
    "ConversionResult",
    "convert",
    "Granularity",
    "format_delta",
    "format_duration",
    "format_instant",
    "format_offset_label",
    "TimestampStyle",
    "ensure_utc",
    "format_for_discord",
    "get_system_now",
    "get_system_timezone",
    "is_daylight_saving_time",
    "is_valid_timezone",
    "localize",
    "now_in_timezone",
    "observes_daylight_saving",
    "offset_minutes",
    "resolve_timezone",
    "standard_offset_minutes",
    "utc_now",
]
