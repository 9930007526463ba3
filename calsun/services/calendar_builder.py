# calsun/services/calendar_builder.py
import hashlib
import logging
from datetime import timezone, tzinfo
from typing import List, Optional

from ics import Calendar, Event
from ics.grammar.parse import ContentLine

from calsun.core.calendar_config import (
    CALENDAR_BASE_NAME, CALENDAR_METHOD, EVENT_DURATION, PRODUCT_ID, UID_DOMAIN)
from calsun.models.calendar_request import CalendarRequest
from calsun.models.sun_events import Coordinate, DaySunTimes, SunEvent
from calsun.services.report_builder import describe, event_title

logger = logging.getLogger(__name__)


def calendar_name(name: str, include_sunrise: bool, include_sunset: bool) -> str:
    base = f"{CALENDAR_BASE_NAME} - {name}" if name else CALENDAR_BASE_NAME

    if not include_sunrise:
        return f"{base} (Sunset only)"
    if not include_sunset:
        return f"{base} (Sunrise only)"
    return base


def generate_uid(event: SunEvent, coordinate: Coordinate) -> str:
    """
    Stable event UID: first 8 bytes of SHA-256 over UTC date, coordinates and
    event kind, so re-fetching the feed updates events instead of duplicating
    them.
    """
    utc_date = event.instant.astimezone(timezone.utc).strftime("%Y-%m-%d")
    data = f"{utc_date}-{coordinate.latitude:.4f}-{coordinate.longitude:.4f}-{event.kind.value}"
    digest = hashlib.sha256(data.encode("utf-8")).digest()
    return f"{digest[:8].hex()}@{UID_DOMAIN}"


def _build_event(
    event: SunEvent,
    day: DaySunTimes,
    previous_day: Optional[DaySunTimes],
    request: CalendarRequest,
    tz: tzinfo,
) -> Event:
    location = request.location_label
    return Event(
        name=event_title(event, tz),
        begin=event.instant,
        end=event.instant + EVENT_DURATION,
        uid=generate_uid(event, request.coordinate),
        description=describe(event, day, previous_day, request.coordinate, location, tz),
        location=location,
    )


def build_calendar(request: CalendarRequest, days: List[DaySunTimes], tz: tzinfo) -> str:
    """
    Serialize a range of sun times to iCalendar text. Days missing an event
    (polar day/night) simply contribute no entry for it.
    """
    name = calendar_name(request.name, request.include_sunrise, request.include_sunset)

    cal = Calendar(creator=PRODUCT_ID)
    cal.method = CALENDAR_METHOD
    cal.extra.append(ContentLine(name="NAME", value=name))
    cal.extra.append(ContentLine(name="X-WR-CALNAME", value=name))

    previous_day: Optional[DaySunTimes] = None
    for day in days:
        for kind in request.kinds:
            event = day.event(kind)
            if event is not None:
                cal.events.add(_build_event(event, day, previous_day, request, tz))
        previous_day = day

    logger.info(f"Built calendar '{name}' with {len(cal.events)} events over {len(days)} days.")
    return cal.serialize()
