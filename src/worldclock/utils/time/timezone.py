"""
Unified timezone handling utilities for WorldClock.

This module resolves IANA timezone identifiers against the host zone database
and derives UTC offsets and DST state for a given instant. Offsets are always
re-derived from the instant, never cached.
"""

import logging
from datetime import UTC, datetime
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import discord

from ..core.exceptions import InvalidTimezoneError


logger = logging.getLogger(__name__)

# Type alias for Discord timestamp styles
TimestampStyle = Literal["t", "T", "d", "D", "f", "F", "R"]


def resolve_timezone(timezone_id: str) -> ZoneInfo:
    """
    Resolve an IANA timezone identifier to a ZoneInfo object.

    Args:
        timezone_id: IANA identifier such as "America/New_York"

    Returns:
        ZoneInfo for the identifier

    Raises:
        InvalidTimezoneError: If the host zone database does not know the identifier

    Examples:
        >>> resolve_timezone("Asia/Kolkata").key
        'Asia/Kolkata'
    """
    if not isinstance(timezone_id, str) or not timezone_id.strip():
        raise InvalidTimezoneError(timezone_id)

    try:
        return ZoneInfo(timezone_id)
    except ZoneInfoNotFoundError as e:
        raise InvalidTimezoneError(timezone_id) from e
    except (ValueError, OSError) as e:
        # Malformed keys (absolute paths, "..", directories) fail before lookup
        raise InvalidTimezoneError(timezone_id) from e


def is_valid_timezone(timezone_id: str) -> bool:
    """
    Check whether an identifier resolves in the host zone database.

    Examples:
        >>> is_valid_timezone("Europe/London")
        True
        >>> is_valid_timezone("Mars/Olympus_Mons")
        False
    """
    try:
        _ = resolve_timezone(timezone_id)
    except InvalidTimezoneError:
        return False
    return True


def get_system_timezone() -> ZoneInfo:
    """
    Get the system's local timezone.

    Returns:
        ZoneInfo object representing the local timezone
    """
    try:
        # "localtime" works on Linux/WSL
        return ZoneInfo("localtime")
    except ZoneInfoNotFoundError:
        local_tz = datetime.now().astimezone().tzinfo
        if hasattr(local_tz, "key"):
            key = getattr(local_tz, "key")  # pyright: ignore[reportAny] # timezone key from system
            if isinstance(key, str):
                return ZoneInfo(key)
        return ZoneInfo("UTC")


def get_system_now() -> datetime:
    """
    Get the current datetime in the system's local timezone.

    Returns:
        Current datetime in the system's local timezone (timezone-aware)
    """
    return datetime.now(get_system_timezone())


def utc_now() -> datetime:
    """Get the current instant as a UTC-aware datetime."""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to a UTC-aware instant.

    Naive datetimes are interpreted as UTC; aware datetimes are converted.

    Args:
        dt: Datetime object that may be naive or timezone-aware

    Returns:
        Timezone-aware datetime in UTC

    Examples:
        >>> ensure_utc(datetime(2024, 1, 15, 12, 0)).isoformat()
        '2024-01-15T12:00:00+00:00'
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def now_in_timezone(timezone_id: str, at_instant: datetime | None = None) -> datetime:
    """
    Express an instant (default: now) in the given timezone.

    The returned datetime denotes the same absolute instant; only its wall
    clock fields reflect the target zone.

    Raises:
        InvalidTimezoneError: If the identifier is unknown
    """
    tz = resolve_timezone(timezone_id)
    instant = ensure_utc(at_instant) if at_instant is not None else utc_now()
    return instant.astimezone(tz)


def localize(wall_time: datetime, timezone_id: str) -> datetime:
    """
    Attach a timezone to a naive wall-clock time, producing an instant.

    Aware datetimes are converted to the zone instead. Ambiguous wall times
    during a DST fall-back resolve to the earlier occurrence (fold=0).

    Args:
        wall_time: Wall-clock time as read in the zone
        timezone_id: IANA identifier of the zone

    Returns:
        Timezone-aware datetime in the given zone

    Raises:
        InvalidTimezoneError: If the identifier is unknown

    Examples:
        >>> localize(datetime(2024, 1, 15, 9, 0), "America/New_York").isoformat()
        '2024-01-15T09:00:00-05:00'
    """
    tz = resolve_timezone(timezone_id)
    if wall_time.tzinfo is None:
        return wall_time.replace(tzinfo=tz)
    return wall_time.astimezone(tz)


def offset_minutes(timezone_id: str, at_instant: datetime | None = None) -> int:
    """
    Compute the signed UTC offset in minutes observed by a zone at an instant.

    Any daylight-saving adjustment in effect at that instant is included.

    Args:
        timezone_id: IANA timezone identifier
        at_instant: Reference instant; defaults to now. Naive values are UTC.

    Returns:
        Offset from UTC in minutes (east of UTC is positive)

    Raises:
        InvalidTimezoneError: If the identifier is unknown

    Examples:
        >>> offset_minutes("Asia/Kolkata", datetime(2024, 1, 15, 12, 0, tzinfo=UTC))
        330
        >>> offset_minutes("America/New_York", datetime(2024, 1, 15, 12, 0, tzinfo=UTC))
        -300
    """
    local = now_in_timezone(timezone_id, at_instant)
    offset = local.utcoffset()
    if offset is None:
        return 0
    # Historical LMT offsets carry seconds; truncate toward zero
    return int(offset.total_seconds() / 60)


def is_daylight_saving_time(timezone_id: str, at_instant: datetime | None = None) -> bool:
    """
    Check whether a zone is observing daylight-saving time at an instant.

    Raises:
        InvalidTimezoneError: If the identifier is unknown
    """
    local = now_in_timezone(timezone_id, at_instant)
    dst = local.dst()
    return bool(dst)


def _seasonal_offsets(timezone_id: str, year: int | None) -> tuple[int, int]:
    if year is None:
        year = utc_now().year
    january = offset_minutes(timezone_id, datetime(year, 1, 1, 12, 0, tzinfo=UTC))
    july = offset_minutes(timezone_id, datetime(year, 7, 1, 12, 0, tzinfo=UTC))
    logger.debug(
        f"Seasonal offsets for {timezone_id} in {year}: January {january}, July {july}"
    )
    return january, july


def observes_daylight_saving(timezone_id: str, year: int | None = None) -> bool:
    """
    Check whether a zone changes its offset seasonally within a year.

    The offsets at 1 January and 1 July of the year are compared, each
    evaluated at its own instant, which covers both hemispheres.

    Args:
        timezone_id: IANA timezone identifier
        year: Calendar year to examine; defaults to the current UTC year

    Returns:
        True if the January and July offsets differ

    Raises:
        InvalidTimezoneError: If the identifier is unknown

    Examples:
        >>> observes_daylight_saving("Europe/Berlin", 2024)
        True
        >>> observes_daylight_saving("Asia/Tokyo", 2024)
        False
    """
    january, july = _seasonal_offsets(timezone_id, year)
    return january != july


def standard_offset_minutes(timezone_id: str, year: int | None = None) -> int:
    """
    Get the standard (non-daylight-saving) UTC offset of a zone in minutes.

    The smaller of the 1 January and 1 July offsets is the standard one in
    either hemisphere.

    Raises:
        InvalidTimezoneError: If the identifier is unknown

    Examples:
        >>> standard_offset_minutes("America/Los_Angeles", 2024)
        -480
        >>> standard_offset_minutes("Australia/Sydney", 2024)
        600
    """
    return min(_seasonal_offsets(timezone_id, year))


def format_for_discord(dt: datetime, style: TimestampStyle = "F") -> str:
    """
    Format an instant as a Discord timestamp.

    Discord renders the markup in each reader's own timezone, which makes it
    a convenient way to share a meeting time across cities.

    Args:
        dt: The instant to format (naive values are UTC)
        style: Discord timestamp style (default: 'F' for full date/time)

    Returns:
        Formatted Discord timestamp string

    Examples:
        >>> format_for_discord(datetime(2024, 1, 15, 12, 0, tzinfo=UTC))
        '<t:1705320000:F>'
    """
    return discord.utils.format_dt(ensure_utc(dt), style=style)
