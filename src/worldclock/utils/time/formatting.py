"""
Presentation helpers for instants, offsets and offset differences.

Rendering follows the en-US conventions used by the world-clock views,
independent of the process locale.
"""

from datetime import datetime
from enum import Enum

from .timezone import now_in_timezone


_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class Granularity(Enum):
    """How much of an instant to render."""

    TIME = "time"
    DATE = "date"
    DATETIME = "datetime"


def _format_time(local: datetime, hour12: bool) -> str:
    if not hour12:
        return f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour:02d}:{local.minute:02d}:{local.second:02d} {meridiem}"


def _format_date(local: datetime) -> str:
    weekday = _WEEKDAYS[local.weekday()]
    month = _MONTHS[local.month - 1]
    return f"{weekday}, {month} {local.day}, {local.year}"


def format_instant(
    instant: datetime,
    timezone_id: str,
    granularity: Granularity = Granularity.DATETIME,
    hour12: bool = True,
) -> str:
    """
    Render an instant as wall-clock text in the given timezone.

    Args:
        instant: Absolute point in time (naive values are UTC)
        timezone_id: IANA identifier of the zone to render in
        granularity: Time only, date only, or both
        hour12: Use a 12-hour clock with AM/PM

    Returns:
        Formatted string, e.g. "Mon, Jan 15, 2024, 05:30:00 PM"

    Raises:
        InvalidTimezoneError: If the identifier is unknown

    Examples:
        >>> from datetime import UTC
        >>> t = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
        >>> format_instant(t, "Asia/Kolkata", Granularity.TIME)
        '05:30:00 PM'
        >>> format_instant(t, "Asia/Kolkata", Granularity.DATE)
        'Mon, Jan 15, 2024'
    """
    local = now_in_timezone(timezone_id, instant)

    match granularity:
        case Granularity.TIME:
            return _format_time(local, hour12)
        case Granularity.DATE:
            return _format_date(local)
        case Granularity.DATETIME:
            return f"{_format_date(local)}, {_format_time(local, hour12)}"


def format_offset_label(offset_minutes: int) -> str:
    """
    Format an offset in minutes as a UTC label.

    Examples:
        >>> format_offset_label(0)
        'UTC+0'
        >>> format_offset_label(330)
        'UTC+5:30'
        >>> format_offset_label(-480)
        'UTC-8'
    """
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_delta(delta_minutes: int) -> str:
    """
    Render a signed minute difference in human readable form.

    Zero is treated as non-negative and renders as "0 minutes ahead".

    Examples:
        >>> format_delta(90)
        '1 hour 30 minutes ahead'
        >>> format_delta(-60)
        '1 hour behind'
        >>> format_delta(0)
        '0 minutes ahead'
    """
    direction = "ahead" if delta_minutes >= 0 else "behind"
    hours, minutes = divmod(abs(delta_minutes), 60)

    if hours == 0:
        return f"{_plural(minutes, 'minute')} {direction}"
    if minutes == 0:
        return f"{_plural(hours, 'hour')} {direction}"
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')} {direction}"


def format_duration(minutes: int) -> str:
    """
    Format a non-negative duration compactly as "Xh Ym".

    Examples:
        >>> format_duration(150)
        '2h 30m'
    """
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
