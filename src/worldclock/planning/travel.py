"""
Travel-time planning: arrival time, zone shift and jet-lag assessment.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

from ..cities.models import City
from ..utils.core.exceptions import ValidationError
from ..utils.time import convert, ensure_utc, format_delta, localize, now_in_timezone


logger = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(r"^(?:(\d+)\s*h)?\s*(?:(\d+)\s*m)?$", re.IGNORECASE)

LONG_FLIGHT_MINUTES = 360


class JetLagImpact(Enum):
    """Expected jet-lag severity by absolute zone shift."""

    MINIMAL = "minimal"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


def assess_jet_lag(delta_minutes: int) -> JetLagImpact:
    """
    Classify the jet-lag impact of a zone shift.

    Examples:
        >>> assess_jet_lag(-180)
        <JetLagImpact.MINIMAL: 'minimal'>
        >>> assess_jet_lag(630)
        <JetLagImpact.SEVERE: 'severe'>
    """
    shift = abs(delta_minutes)
    if shift <= 180:
        return JetLagImpact.MINIMAL
    if shift <= 360:
        return JetLagImpact.MILD
    if shift <= 540:
        return JetLagImpact.MODERATE
    return JetLagImpact.SEVERE


def parse_flight_duration(value: str) -> int:
    """
    Parse a flight duration such as "2h 30m", "45m" or "150" into minutes.

    Raises:
        ValidationError: If the value is malformed or not positive

    Examples:
        >>> parse_flight_duration("2h 30m")
        150
        >>> parse_flight_duration("150")
        150
    """
    text = value.strip()
    if text.isdecimal():
        minutes = int(text)
    else:
        match = _DURATION_PATTERN.match(text)
        if match is None or not text:
            raise ValidationError(
                f"Invalid flight duration: {value!r}",
                user_message=f"'{value}' is not a valid duration. Use e.g. '2h 30m' or '150'.",
            )
        minutes = int(match.group(1) or 0) * 60 + int(match.group(2) or 0)

    if minutes <= 0:
        raise ValidationError(
            f"Flight duration must be positive: {value!r}",
            user_message="Flight duration must be greater than zero.",
        )
    return minutes


def _is_night_hour(hour: int) -> bool:
    return hour >= 22 or hour <= 6


@dataclass(frozen=True)
class TravelPlan:
    """Departure and arrival of a flight between two cities."""

    departure_city: City
    arrival_city: City
    departure_instant: datetime
    arrival_instant: datetime
    departure_local: datetime
    arrival_local: datetime
    flight_minutes: int
    delta_minutes: int
    formatted_delta: str
    jet_lag: JetLagImpact
    recommendations: list[str] = field(default_factory=list)


def _travel_recommendations(
    delta_minutes: int,
    departure_local: datetime,
    arrival_local: datetime,
    flight_minutes: int,
) -> list[str]:
    recommendations: list[str] = []

    match assess_jet_lag(delta_minutes):
        case JetLagImpact.MINIMAL:
            recommendations.append("Minimal jet lag expected. You should adjust quickly.")
        case JetLagImpact.MILD:
            recommendations.append(
                "Mild jet lag expected. Consider adjusting your sleep schedule a few days before travel."
            )
        case JetLagImpact.MODERATE:
            recommendations.append(
                "Moderate jet lag expected. Start adjusting your sleep schedule 3-4 days before travel."
            )
            recommendations.append("Stay hydrated and avoid alcohol during the flight.")
        case JetLagImpact.SEVERE:
            recommendations.append(
                "Severe jet lag expected. Start adjusting your sleep schedule a week before travel."
            )
            recommendations.append("Consider breaking up the journey if possible.")
            recommendations.append(
                "Stay hydrated, avoid alcohol and caffeine, and get sunlight at appropriate times."
            )

    if _is_night_hour(departure_local.hour):
        recommendations.append(
            "Red-eye flight detected. Try to sleep during the flight and adjust to local time immediately upon arrival."
        )
    if _is_night_hour(arrival_local.hour):
        recommendations.append(
            "Late night/early morning arrival. Consider booking accommodation for immediate rest."
        )

    if flight_minutes > LONG_FLIGHT_MINUTES:
        recommendations.append(
            "Long flight detected. Move around periodically and do in-seat exercises."
        )
        recommendations.append(
            "Bring entertainment and stay hydrated throughout the flight."
        )

    if delta_minutes > 0:
        recommendations.append(
            "Traveling eastward. Jet lag may be more severe - be extra diligent with sleep schedule adjustments."
        )
    elif delta_minutes < 0:
        recommendations.append(
            "Traveling westward. Jet lag may be milder, but still maintain good sleep habits."
        )

    return recommendations


def plan_trip(
    departure: City,
    arrival: City,
    departure_time: datetime,
    flight_minutes: int,
) -> TravelPlan:
    """
    Plan a flight from one city to another.

    Args:
        departure: Departure city
        arrival: Arrival city
        departure_time: Naive wall-clock time in the departure city, or an aware instant
        flight_minutes: Flight duration in minutes

    Returns:
        TravelPlan with both instants, local renderings and recommendations

    Raises:
        ValidationError: If the flight duration is not positive
        InvalidTimezoneError: If either city's timezone is unknown
    """
    if flight_minutes <= 0:
        raise ValidationError(
            f"Flight duration must be positive, got {flight_minutes}",
            user_message="Flight duration must be greater than zero.",
        )

    departure_instant = ensure_utc(localize(departure_time, departure.timezone_id))
    arrival_instant = departure_instant + timedelta(minutes=flight_minutes)

    conversion = convert(departure_instant, departure.timezone_id, arrival.timezone_id)
    departure_local = now_in_timezone(departure.timezone_id, departure_instant)
    arrival_local = now_in_timezone(arrival.timezone_id, arrival_instant)

    logger.debug(
        f"Trip {departure.name} -> {arrival.name}: departs {departure_instant.isoformat()}, "
        f"arrives {arrival_instant.isoformat()}, shift {conversion.delta_minutes} minutes"
    )

    return TravelPlan(
        departure_city=departure,
        arrival_city=arrival,
        departure_instant=departure_instant,
        arrival_instant=arrival_instant,
        departure_local=departure_local,
        arrival_local=arrival_local,
        flight_minutes=flight_minutes,
        delta_minutes=conversion.delta_minutes,
        formatted_delta=format_delta(conversion.delta_minutes),
        jet_lag=assess_jet_lag(conversion.delta_minutes),
        recommendations=_travel_recommendations(
            conversion.delta_minutes, departure_local, arrival_local, flight_minutes
        ),
    )
