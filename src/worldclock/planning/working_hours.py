"""
Working-hours windows and their overlap between two cities.

Each city works the same local hours every day. The first city's window on
the requested date is compared, as absolute instants, with the second city's
windows on the neighbouring local dates, so overlaps across the date line are
found.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta

from ..cities.models import City
from ..utils.core.exceptions import ValidationError
from ..utils.time import ensure_utc, format_duration, localize, now_in_timezone


logger = logging.getLogger(__name__)

_CLOCK_TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")

# Overlaps shorter than this are flagged as limited
LIMITED_OVERLAP_MINUTES = 120


def parse_clock_time(time_str: str) -> time:
    """
    Parse an HH:MM string into a time object.

    Raises:
        ValidationError: If the string is not a valid 24-hour clock time

    Examples:
        >>> parse_clock_time("09:30")
        datetime.time(9, 30)
    """
    match = _CLOCK_TIME_PATTERN.match(time_str.strip())
    if match is None:
        raise ValidationError(
            f"Invalid clock time: {time_str!r}",
            user_message=f"'{time_str}' is not a valid time. Use HH:MM (24-hour).",
        )
    return time(int(match.group(1)), int(match.group(2)))


def _minutes_to_clock(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


@dataclass(frozen=True)
class WorkingHours:
    """Daily local working window, start inclusive and end inclusive."""

    start: time = time(9, 0)
    end: time = time(17, 0)

    def __post_init__(self) -> None:
        """Validate the window."""
        if self.end <= self.start:
            raise ValidationError(
                f"Working hours end {self.end} must be after start {self.start}",
                user_message="Working hours must end after they start.",
            )

    @classmethod
    def from_strings(cls, start: str, end: str) -> "WorkingHours":
        """Build working hours from HH:MM strings."""
        return cls(parse_clock_time(start), parse_clock_time(end))

    @property
    def duration_minutes(self) -> int:
        """Length of the window in minutes."""
        return (self.end.hour * 60 + self.end.minute) - (
            self.start.hour * 60 + self.start.minute
        )

    def window(self, on_date: date, timezone_id: str) -> tuple[datetime, datetime]:
        """
        Get the window on a local date as UTC instants.

        Raises:
            InvalidTimezoneError: If the identifier is unknown
        """
        start = localize(datetime.combine(on_date, self.start), timezone_id)
        end = localize(datetime.combine(on_date, self.end), timezone_id)
        return ensure_utc(start), ensure_utc(end)

    def contains(self, local_start: datetime, local_end: datetime) -> bool:
        """Check whether a local interval lies within the window on one day."""
        if local_start.date() != local_end.date():
            return False
        return self.start <= local_start.time() and local_end.time() <= self.end


@dataclass(frozen=True)
class OverlapResult:
    """
    Shared working time between two cities on one date.

    ``window_b`` is the second city's window, on whichever neighbouring local
    date overlaps ``window_a`` most, or lies nearest to it when none do.
    """

    city_a: City
    city_b: City
    on_date: date
    window_a: tuple[datetime, datetime]
    window_b: tuple[datetime, datetime]
    overlap_start: datetime | None
    overlap_end: datetime | None
    duration_minutes: int
    recommendations: list[str] = field(default_factory=list)

    @property
    def has_overlap(self) -> bool:
        """Whether the windows share any time."""
        return self.duration_minutes > 0


def _overlap_minutes(
    window_a: tuple[datetime, datetime], window_b: tuple[datetime, datetime]
) -> int:
    start = max(window_a[0], window_b[0])
    end = min(window_a[1], window_b[1])
    return max(0, int((end - start).total_seconds() // 60))


def _gap_minutes(
    window_a: tuple[datetime, datetime], window_b: tuple[datetime, datetime]
) -> int:
    if window_a[1] <= window_b[0]:
        return int((window_b[0] - window_a[1]).total_seconds() // 60)
    return int((window_a[0] - window_b[1]).total_seconds() // 60)


def _recommendations(
    city_a: City,
    city_b: City,
    window_a: tuple[datetime, datetime],
    window_b: tuple[datetime, datetime],
    duration: int,
) -> list[str]:
    if duration <= 0:
        first, second = (city_a, city_b) if window_a[1] <= window_b[0] else (city_b, city_a)
        gap = _gap_minutes(window_a, window_b)
        return [
            "No overlapping working hours between these time zones.",
            f"{first.name} ends {_minutes_to_clock(gap)} before {second.name} starts.",
            "Consider flexible working hours or asynchronous communication.",
        ]

    recommendations = [f"Found {format_duration(duration)} of overlapping working hours."]
    if duration < LIMITED_OVERLAP_MINUTES:
        recommendations.append(
            "Limited overlap time. Consider scheduling important meetings during this window."
        )
    else:
        recommendations.append("Good overlap for collaboration and meetings.")
    return recommendations


def working_hours_overlap(
    city_a: City,
    city_b: City,
    hours: WorkingHours | None = None,
    on_date: date | None = None,
) -> OverlapResult:
    """
    Compute the overlap of two cities' working hours on a local date.

    Args:
        city_a: First city
        city_b: Second city
        hours: Local working hours applied to both cities (default 09:00-17:00)
        on_date: Local calendar date; defaults to today in ``city_a``

    Returns:
        OverlapResult with both windows, the overlap and recommendations

    Raises:
        InvalidTimezoneError: If either city's timezone is unknown
    """
    hours = hours or WorkingHours()
    if on_date is None:
        on_date = now_in_timezone(city_a.timezone_id).date()

    window_a = hours.window(on_date, city_a.timezone_id)
    # Same date first so it wins ties
    candidates = [
        hours.window(on_date + timedelta(days=shift), city_b.timezone_id)
        for shift in (0, -1, 1)
    ]

    window_b = max(candidates, key=lambda window: _overlap_minutes(window_a, window))
    duration = _overlap_minutes(window_a, window_b)
    if duration == 0:
        window_b = min(candidates, key=lambda window: _gap_minutes(window_a, window))

    start = max(window_a[0], window_b[0])
    end = min(window_a[1], window_b[1])

    logger.debug(
        f"Working hours overlap {city_a.name}/{city_b.name} on {on_date}: {duration} minutes"
    )

    return OverlapResult(
        city_a=city_a,
        city_b=city_b,
        on_date=on_date,
        window_a=window_a,
        window_b=window_b,
        overlap_start=start if duration > 0 else None,
        overlap_end=end if duration > 0 else None,
        duration_minutes=duration,
        recommendations=_recommendations(city_a, city_b, window_a, window_b, duration),
    )
