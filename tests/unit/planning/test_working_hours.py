"""
Tests for working-hours windows and overlap.
"""

from datetime import UTC, date, datetime, time

import pytest

from src.worldclock.cities import City
from src.worldclock.planning.meetings import suggest_meeting_times
from src.worldclock.planning.working_hours import (
    WorkingHours,
    parse_clock_time,
    working_hours_overlap,
)
from src.worldclock.utils.core.exceptions import ValidationError


MONDAY = date(2024, 1, 15)


class TestParseClockTime:
    """Test HH:MM parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("09:00", time(9, 0)), ("9:05", time(9, 5)), ("23:59", time(23, 59)), (" 17:30 ", time(17, 30))],
    )
    def test_valid_times(self, value: str, expected: time) -> None:
        """Test accepted formats."""
        assert parse_clock_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", "9"])
    def test_invalid_times(self, value: str) -> None:
        """Test rejected formats."""
        with pytest.raises(ValidationError):
            _ = parse_clock_time(value)


class TestWorkingHours:
    """Test the WorkingHours value object."""

    def test_defaults(self) -> None:
        """Test the default 09:00-17:00 window."""
        hours = WorkingHours()
        assert hours.start == time(9, 0)
        assert hours.end == time(17, 0)
        assert hours.duration_minutes == 480

    def test_end_must_follow_start(self) -> None:
        """Test that inverted or empty windows are rejected."""
        with pytest.raises(ValidationError):
            _ = WorkingHours(time(17, 0), time(9, 0))
        with pytest.raises(ValidationError):
            _ = WorkingHours(time(9, 0), time(9, 0))

    def test_from_strings(self) -> None:
        """Test construction from HH:MM strings."""
        hours = WorkingHours.from_strings("08:30", "16:45")
        assert hours.duration_minutes == 495

    def test_window_as_utc_instants(self, new_york: City) -> None:
        """Test a local window expressed in UTC."""
        start, end = WorkingHours().window(MONDAY, new_york.timezone_id)
        assert start == datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
        assert end == datetime(2024, 1, 15, 22, 0, tzinfo=UTC)

    def test_contains(self) -> None:
        """Test interval containment on a single local day."""
        hours = WorkingHours()
        assert hours.contains(datetime(2024, 1, 15, 9, 0), datetime(2024, 1, 15, 10, 0))
        assert hours.contains(datetime(2024, 1, 15, 16, 0), datetime(2024, 1, 15, 17, 0))
        assert not hours.contains(datetime(2024, 1, 15, 8, 30), datetime(2024, 1, 15, 9, 30))
        assert not hours.contains(datetime(2024, 1, 15, 16, 30), datetime(2024, 1, 15, 17, 30))
        assert not hours.contains(datetime(2024, 1, 15, 23, 30), datetime(2024, 1, 16, 0, 30))


class TestWorkingHoursOverlap:
    """Test overlap between two cities."""

    def test_good_overlap(self, new_york: City, london: City) -> None:
        """Test New York and London sharing three hours."""
        result = working_hours_overlap(new_york, london, on_date=MONDAY)

        assert result.has_overlap is True
        assert result.duration_minutes == 180
        assert result.overlap_start == datetime(2024, 1, 15, 14, 0, tzinfo=UTC)
        assert result.overlap_end == datetime(2024, 1, 15, 17, 0, tzinfo=UTC)
        assert result.recommendations == [
            "Found 3h 0m of overlapping working hours.",
            "Good overlap for collaboration and meetings.",
        ]

    def test_limited_overlap(self, london: City) -> None:
        """Test an overlap shorter than two hours."""
        bangkok = City("Bangkok", "Thailand", "Asia/Bangkok", 420)
        result = working_hours_overlap(london, bangkok, on_date=MONDAY)

        assert result.duration_minutes == 60
        assert result.recommendations == [
            "Found 1h 0m of overlapping working hours.",
            "Limited overlap time. Consider scheduling important meetings during this window.",
        ]

    def test_no_overlap(self, tokyo: City, new_york: City) -> None:
        """Test cities whose working days do not meet."""
        result = working_hours_overlap(tokyo, new_york, on_date=MONDAY)

        assert result.has_overlap is False
        assert result.duration_minutes == 0
        assert result.overlap_start is None
        assert result.overlap_end is None
        assert result.recommendations == [
            "No overlapping working hours between these time zones.",
            "New York ends 02:00 before Tokyo starts.",
            "Consider flexible working hours or asynchronous communication.",
        ]

    def test_no_overlap_gap_is_symmetric(self, new_york: City, tokyo: City) -> None:
        """Test that the nearest gap is reported whichever city comes first."""
        result = working_hours_overlap(new_york, tokyo, on_date=MONDAY)
        assert result.recommendations[1] == "New York ends 02:00 before Tokyo starts."
        assert result.window_b == (
            datetime(2024, 1, 16, 0, 0, tzinfo=UTC),
            datetime(2024, 1, 16, 8, 0, tzinfo=UTC),
        )

    def test_overlap_across_the_date_line(self, tokyo: City) -> None:
        """Test that the next local day of an eastern city is considered."""
        los_angeles = City("Los Angeles", "United States", "America/Los_Angeles", -480)
        tuesday = date(2024, 1, 16)

        result = working_hours_overlap(los_angeles, tokyo, on_date=tuesday)
        # Los Angeles 16:00-17:00 on Tuesday is Tokyo 09:00-10:00 on Wednesday
        assert result.duration_minutes == 60
        assert result.overlap_start == datetime(2024, 1, 17, 0, 0, tzinfo=UTC)
        assert result.overlap_end == datetime(2024, 1, 17, 1, 0, tzinfo=UTC)
        assert result.recommendations[1].startswith("Limited overlap time.")

        backward = working_hours_overlap(tokyo, los_angeles, on_date=tuesday)
        assert backward.duration_minutes == 60
        assert backward.overlap_start == datetime(2024, 1, 16, 0, 0, tzinfo=UTC)

    def test_agrees_with_meeting_suggestions(self, tokyo: City) -> None:
        """Test that cities with meeting slots also report shared hours."""
        los_angeles = City("Los Angeles", "United States", "America/Los_Angeles", -480)
        tuesday = date(2024, 1, 16)

        slots = suggest_meeting_times([los_angeles, tokyo], tuesday)
        overlap = working_hours_overlap(los_angeles, tokyo, on_date=tuesday)

        assert slots
        assert overlap.has_overlap is bool(slots)

    def test_custom_hours(self, new_york: City, london: City) -> None:
        """Test overlap with a custom working day."""
        hours = WorkingHours.from_strings("08:00", "18:00")
        result = working_hours_overlap(new_york, london, hours, MONDAY)
        # New York 13:00-23:00Z, London 08:00-18:00Z
        assert result.duration_minutes == 300

    def test_overlap_is_symmetric(self, london: City, mumbai: City) -> None:
        """Test that swapping cities keeps the overlap window."""
        forward = working_hours_overlap(london, mumbai, on_date=MONDAY)
        backward = working_hours_overlap(mumbai, london, on_date=MONDAY)

        assert forward.duration_minutes == backward.duration_minutes == 150
        assert forward.overlap_start == backward.overlap_start
        assert forward.window_a == backward.window_b

    def test_defaults_to_today(self, london: City) -> None:
        """Test that the date defaults to today in the first city."""
        result = working_hours_overlap(london, london)
        assert result.duration_minutes == 480
