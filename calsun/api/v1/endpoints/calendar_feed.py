# calsun/api/v1/endpoints/calendar_feed.py
import logging
import math
import re
from datetime import datetime, timezone
from typing import Mapping

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from calsun.core.calendar_config import CALENDAR_FILENAME, CALENDAR_MEDIA_TYPE
from calsun.core.config import settings
from calsun.models.calendar_request import CalendarRequest
from calsun.models.sun_events import Coordinate
from calsun.services.astronomy_service import AstronomyService
from calsun.services.calendar_builder import build_calendar
from calsun.services.timezone_service import timezone_for

logger = logging.getLogger(__name__)

# Plain ASCII decimal notation: no underscores, no surrounding whitespace
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)

router = APIRouter()
astronomy_service = AstronomyService()


def _bad_request(message: str) -> HTTPException:
    logger.info(f"Rejected calendar request: {message}")
    return HTTPException(status_code=400, detail=message)


def _parse_float(raw: str, low: float, high: float, field: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise _bad_request(f"invalid {field} parameter")
    value = float(raw)
    if not math.isfinite(value) or value < low or value > high:
        raise _bad_request(f"invalid {field} parameter")
    return value


def parse_calendar_params(params: Mapping[str, str]) -> CalendarRequest:
    """
    Validate the query string of a calendar request.
    Raises HTTPException(400) with a short message on the first problem found.
    """
    lat_str = params.get("lat", "")
    lng_str = params.get("lng", "")
    if not lat_str or not lng_str:
        raise _bad_request("lat and lng parameters are required")

    lat = _parse_float(lat_str, -90, 90, "lat")
    lng = _parse_float(lng_str, -180, 180, "lng")

    days = settings.DEFAULT_DAYS
    days_str = params.get("days", "")
    if days_str:
        days = int(days_str) if _INT_RE.fullmatch(days_str) else 0
        if days < 1 or days > settings.MAX_DAYS:
            raise _bad_request(f"days must be between 1 and {settings.MAX_DAYS}")

    exclude = params.get("exclude", "")
    if exclude not in ("", "sunrise", "sunset"):
        raise _bad_request("exclude must be 'sunrise' or 'sunset'")

    return CalendarRequest(
        coordinate=Coordinate(latitude=lat, longitude=lng),
        days=days,
        name=params.get("name", ""),
        include_sunrise=exclude != "sunrise",
        include_sunset=exclude != "sunset",
    )


@router.get(
    "/calendar.ics",
    summary="Sunrise/sunset calendar subscription",
    response_class=Response,
)
def get_calendar(request: Request):
    """
    Generate an iCalendar feed of sunrise and sunset events starting today (UTC).

    Query parameters:
    - **lat**, **lng**: coordinates in degrees (required)
    - **name**: location name shown in event descriptions
    - **days**: number of days, 1 to 90 (default 30)
    - **exclude**: `sunrise` or `sunset` to leave that event out
    """
    calendar_request = parse_calendar_params(request.query_params)
    coordinate = calendar_request.coordinate

    tz = timezone_for(coordinate)
    start_date = datetime.now(timezone.utc).date()
    logger.info(
        f"Calendar request for ({coordinate}), {calendar_request.days} days from {start_date}, timezone {tz.key}."
    )

    sun_times = astronomy_service.compute_range(coordinate, start_date, calendar_request.days)
    body = build_calendar(calendar_request, sun_times, tz)

    return Response(
        content=body,
        media_type=CALENDAR_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={CALENDAR_FILENAME}"},
    )
