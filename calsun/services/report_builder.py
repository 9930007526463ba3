# calsun/services/report_builder.py
"""
Human-readable text for a single sunrise/sunset event.

The wording here ends up verbatim in calendar event descriptions and titles.
"""
import math
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from calsun.models.sun_events import Coordinate, DaySunTimes, Solstice, SunEvent
from calsun.services.astronomy_service import nearest_solstice


def _wall_clock_seconds(instant: datetime, tz: tzinfo) -> int:
    local = instant.astimezone(tz)
    return local.hour * 3600 + local.minute * 60 + local.second


def format_day_length(length: timedelta) -> str:
    """Format as "17h34m", truncated to whole minutes."""
    hours, minutes = divmod(int(length.total_seconds() // 60), 60)
    return f"{hours}h{minutes}m"


def format_delta(event: SunEvent, previous: SunEvent, tz: tzinfo) -> str:
    """
    Compare local wall-clock times of two same-kind events, e.g. "3m earlier".

    Only hour/minute/second in tz are compared, so a DST change shows up as
    the size of the clock shift.
    """
    delta_seconds = _wall_clock_seconds(event.instant, tz) - _wall_clock_seconds(previous.instant, tz)
    # Round half away from zero
    minutes = int(math.copysign(math.floor(abs(delta_seconds) / 60 + 0.5), delta_seconds))

    if minutes > 0:
        return f"{minutes}m later"
    if minutes < 0:
        return f"{-minutes}m earlier"
    return "same time"


def format_solstice(days_until: int, which: Solstice) -> str:
    if days_until == 0:
        return f"Today is the {which.value} solstice!"
    return f"Next solstice: {days_until} days ({which.value})"


def event_title(event: SunEvent, tz: tzinfo) -> str:
    """Calendar title, e.g. "Sunrise 04:25" in local time."""
    return f"{event.kind.label} {event.instant.astimezone(tz):%H:%M}"


def describe(
    event: SunEvent,
    day: DaySunTimes,
    previous_day: Optional[DaySunTimes],
    coordinate: Coordinate,
    location_label: str,
    tz: tzinfo,
) -> str:
    """
    Description block for one event:

        Time: 04:25:13
        Location: Copenhagen
        Coordinates: 55.6761, 12.5683
        Azimuth: 43.2°

        Day length: 17h34m
        Yesterday: 1m earlier
        Next solstice: 12 days (summer)

    "Day length" needs both events of the day; "Yesterday" needs a same-kind
    event on previous_day. Either line is left out otherwise.
    """
    local_time = event.instant.astimezone(tz)
    lines = [
        f"Time: {local_time:%H:%M:%S}",
        f"Location: {location_label}",
        f"Coordinates: {coordinate.latitude:.4f}, {coordinate.longitude:.4f}",
        f"Azimuth: {event.azimuth:.1f}°",
        "",
    ]

    day_length = day.day_length
    if day_length is not None:
        lines.append(f"Day length: {format_day_length(day_length)}")

    previous_event = previous_day.event(event.kind) if previous_day is not None else None
    if previous_event is not None:
        lines.append(f"Yesterday: {format_delta(event, previous_event, tz)}")

    lines.append(format_solstice(*nearest_solstice(day.date)))
    return "\n".join(lines)
