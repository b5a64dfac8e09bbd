"""
Meeting-time suggestions across several cities.

Candidate start times are scanned across one UTC day. A slot is suggested
when the whole meeting falls inside every city's local working hours. Only
absolute instants are produced; storing a chosen slot is the caller's job.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from ..cities.models import City
from ..utils.core.exceptions import ValidationError
from ..utils.time import (
    Granularity,
    TimestampStyle,
    format_for_discord,
    format_instant,
    now_in_timezone,
)
from .working_hours import WorkingHours


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CityLocalTime:
    """A meeting slot as seen from one city."""

    city: City
    local_start: datetime
    local_end: datetime
    within_hours: bool

    def formatted(self, hour12: bool = True) -> str:
        """Render the local start time."""
        return format_instant(
            self.local_start, self.city.timezone_id, Granularity.TIME, hour12=hour12
        )


@dataclass(frozen=True)
class MeetingSlot:
    """A candidate meeting, identified by its UTC start and end instants."""

    start: datetime
    end: datetime
    local_times: tuple[CityLocalTime, ...]

    @property
    def works_for_everyone(self) -> bool:
        """Whether the slot is inside working hours for every city."""
        return all(local.within_hours for local in self.local_times)

    def discord_timestamp(self, style: TimestampStyle = "F") -> str:
        """Discord markup for the start, rendered in each reader's zone."""
        return format_for_discord(self.start, style)


def _validate_request(
    cities: Sequence[City], duration_minutes: int, step_minutes: int
) -> None:
    if len(cities) < 2:
        raise ValidationError(
            f"Meeting suggestions need at least 2 cities, got {len(cities)}",
            user_message="Please select at least 2 cities for meeting scheduling.",
        )
    if duration_minutes <= 0:
        raise ValidationError(
            f"Meeting duration must be positive, got {duration_minutes}",
            user_message="Meeting duration must be greater than zero.",
        )
    if step_minutes <= 0:
        raise ValidationError(
            f"Slot step must be positive, got {step_minutes}",
            user_message="Slot step must be greater than zero.",
        )


def generate_meeting_slots(
    cities: Sequence[City],
    on_date: date,
    hours: WorkingHours | None = None,
    duration_minutes: int = 60,
    step_minutes: int = 30,
) -> list[MeetingSlot]:
    """
    Build every candidate slot starting within the UTC day of ``on_date``.

    Raises:
        ValidationError: If fewer than two cities are given or a length is not positive
        InvalidTimezoneError: If a city's timezone is unknown
    """
    _validate_request(cities, duration_minutes, step_minutes)
    hours = hours or WorkingHours()

    day_start = datetime.combine(on_date, datetime.min.time(), tzinfo=UTC)
    day_end = day_start + timedelta(days=1)
    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=step_minutes)

    slots: list[MeetingSlot] = []
    start = day_start
    while start < day_end:
        end = start + duration
        local_times: list[CityLocalTime] = []
        for city in cities:
            local_start = now_in_timezone(city.timezone_id, start)
            local_end = now_in_timezone(city.timezone_id, end)
            local_times.append(
                CityLocalTime(
                    city=city,
                    local_start=local_start,
                    local_end=local_end,
                    within_hours=hours.contains(local_start, local_end),
                )
            )
        slots.append(MeetingSlot(start=start, end=end, local_times=tuple(local_times)))
        start += step

    return slots


def suggest_meeting_times(
    cities: Sequence[City],
    on_date: date | None = None,
    hours: WorkingHours | None = None,
    duration_minutes: int = 60,
    step_minutes: int = 30,
    limit: int = 10,
) -> list[MeetingSlot]:
    """
    Suggest meeting slots that fit every city's working hours.

    Args:
        cities: Participating cities (at least two)
        on_date: UTC calendar date to scan; defaults to today (UTC)
        hours: Local working hours applied to every city (default 09:00-17:00)
        duration_minutes: Meeting length
        step_minutes: Spacing between candidate start times
        limit: Maximum number of suggestions

    Returns:
        Up to ``limit`` slots in chronological order

    Raises:
        ValidationError: If fewer than two cities are given or a length is not positive
        InvalidTimezoneError: If a city's timezone is unknown
    """
    if on_date is None:
        on_date = now_in_timezone("UTC").date()

    slots = generate_meeting_slots(
        cities,
        on_date,
        hours=hours,
        duration_minutes=duration_minutes,
        step_minutes=step_minutes,
    )
    suggestions = [slot for slot in slots if slot.works_for_everyone][: max(limit, 0)]

    logger.debug(
        f"Found {len(suggestions)} meeting slots for {len(cities)} cities on {on_date}"
    )
    return suggestions
