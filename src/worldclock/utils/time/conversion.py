"""
Instant-to-instant conversion between named timezones.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from .formatting import format_offset_label
from .timezone import ensure_utc, offset_minutes


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting an instant from one zone's clock to another's."""

    source_instant: datetime
    target_instant: datetime
    source_offset_label: str
    target_offset_label: str
    delta_minutes: int
    source_offset_minutes: int
    target_offset_minutes: int


def convert(
    instant: datetime, source_timezone_id: str, target_timezone_id: str
) -> ConversionResult:
    """
    Shift an instant by the offset difference between two zones.

    Both offsets are evaluated at ``instant``, so the delta always equals
    ``target_offset_minutes - source_offset_minutes`` for that instant.
    Converting the result back with the zones swapped returns the original
    instant unless the shift itself crosses a DST boundary in either zone.

    Args:
        instant: Reference instant (naive values are UTC)
        source_timezone_id: IANA identifier of the source zone
        target_timezone_id: IANA identifier of the target zone

    Returns:
        ConversionResult with UTC-aware source and target instants

    Raises:
        InvalidTimezoneError: If either identifier is unknown
    """
    source_instant = ensure_utc(instant)
    source_offset = offset_minutes(source_timezone_id, source_instant)
    target_offset = offset_minutes(target_timezone_id, source_instant)
    delta = target_offset - source_offset

    logger.debug(
        f"Converting {source_instant.isoformat()} from {source_timezone_id} "
        f"({source_offset}) to {target_timezone_id} ({target_offset}): delta {delta}"
    )

    return ConversionResult(
        source_instant=source_instant,
        target_instant=source_instant + timedelta(minutes=delta),
        source_offset_label=format_offset_label(source_offset),
        target_offset_label=format_offset_label(target_offset),
        delta_minutes=delta,
        source_offset_minutes=source_offset,
        target_offset_minutes=target_offset,
    )
