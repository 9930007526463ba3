# calsun/api/v1/endpoints/sun_times.py
from datetime import date, datetime, timezone, tzinfo
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from calsun.core.config import settings
from calsun.models.sun_events import (
    Coordinate, DaySunTimes, DaySunTimesModel, SunEvent, SunEventModel, SunTimesResponse)
from calsun.services.astronomy_service import AstronomyService
from calsun.services.timezone_service import timezone_for

router = APIRouter()
astronomy_service = AstronomyService()


def _event_model(event: Optional[SunEvent], tz: tzinfo) -> Optional[SunEventModel]:
    if event is None:
        return None
    return SunEventModel(
        kind=event.kind,
        time_utc=event.instant,
        time_local=event.instant.astimezone(tz),
        azimuth=round(event.azimuth, 1),
        elevation=round(event.elevation, 3),
    )


def _day_model(day: DaySunTimes, tz: tzinfo) -> DaySunTimesModel:
    day_length = day.day_length
    return DaySunTimesModel(
        date=day.date.isoformat(),
        sunrise=_event_model(day.sunrise, tz),
        sunset=_event_model(day.sunset, tz),
        day_length_minutes=int(day_length.total_seconds() // 60) if day_length is not None else None,
    )


@router.get(
    "/times",
    summary="Sunrise and sunset times for a location",
    response_model=SunTimesResponse
)
def get_sun_times(
    lat: float = Query(..., description="Latitude", ge=-90, le=90),
    lng: float = Query(..., description="Longitude", ge=-180, le=180),
    target_date_str: Optional[str] = Query(
        None,
        description="First day, YYYY-MM-DD (default: today, UTC)",
        alias="date"
    ),
    days: int = Query(1, description="Number of days", ge=1, le=settings.MAX_DAYS),
):
    """
    Sunrise and sunset for each day of the range, with the sun's azimuth and
    elevation at each event. Local times use the time zone at the coordinates.
    Days in polar day or polar night have null events.
    """
    if target_date_str:
        try:
            start_date = date.fromisoformat(target_date_str)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid date, expected 'YYYY-MM-DD'.")
    else:
        start_date = datetime.now(timezone.utc).date()

    coordinate = Coordinate(latitude=lat, longitude=lng)
    tz = timezone_for(coordinate)
    sun_times = astronomy_service.compute_range(coordinate, start_date, days)

    return SunTimesResponse(
        location={"lat": lat, "lng": lng},
        timezone=tz.key,
        start=start_date.isoformat(),
        days=days,
        results=[_day_model(day, tz) for day in sun_times],
    )
