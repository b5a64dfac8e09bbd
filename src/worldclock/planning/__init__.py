"""
Planning calculators built on the timezone utilities.

Working-hours overlap, travel/jet-lag planning and meeting-time suggestions.
"""

from .meetings import (
    CityLocalTime,
    MeetingSlot,
    generate_meeting_slots,
    suggest_meeting_times,
)
from .travel import (
    JetLagImpact,
    TravelPlan,
    assess_jet_lag,
    parse_flight_duration,
    plan_trip,
)
from .working_hours import (
    OverlapResult,
    WorkingHours,
    parse_clock_time,
    working_hours_overlap,
)

__all__ = [
    "CityLocalTime",
    "MeetingSlot",
    "generate_meeting_slots",
    "suggest_meeting_times",
    "JetLagImpact",
    "TravelPlan",
    "assess_jet_lag",
    "parse_flight_duration",
    "plan_trip",
    "OverlapResult",
    "WorkingHours",
    "parse_clock_time",
    "working_hours_overlap",
]
