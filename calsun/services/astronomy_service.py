# calsun/services/astronomy_service.py
import ephem
import logging
import math
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Tuple, Union

from calsun.core.calendar_config import SUMMER_SOLSTICE, SUNRISE_SUNSET_HORIZON, WINTER_SOLSTICE
from calsun.models.sun_events import Coordinate, DaySunTimes, Solstice, SunEvent, SunEventKind

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def _utc_date(value: DateLike) -> date:
    """Calendar date of value in UTC; aware datetimes are converted first."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def _to_ephem_date(instant: datetime) -> ephem.Date:
    # ephem works in naive UTC
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc).replace(tzinfo=None)
    return ephem.Date(instant)


def _to_utc_datetime(ephem_date) -> datetime:
    return ephem_date.datetime().replace(tzinfo=timezone.utc)


class AstronomyService:
    """
    Sunrise/sunset calculator for arbitrary geographic coordinates.
    No state is kept between calls, so one instance serves all requests.
    """

    def _observer(self, coordinate: Coordinate) -> ephem.Observer:
        observer = ephem.Observer()
        observer.lat = str(coordinate.latitude)
        observer.lon = str(coordinate.longitude)
        observer.elevation = 0
        # The horizon angle already includes refraction
        observer.pressure = 0
        observer.horizon = SUNRISE_SUNSET_HORIZON
        return observer

    def _transit(self, observer: ephem.Observer, sun: ephem.Sun, day: date, longitude: float) -> ephem.Date:
        """Solar transit falling on the given UTC date (mean solar noon at that longitude, +/- a few minutes)."""
        approx_noon = datetime.combine(day, time(12, 0)) - timedelta(hours=longitude / 15)
        observer.date = ephem.Date(approx_noon - timedelta(hours=6))
        return observer.next_transit(sun)

    def compute_day(self, coordinate: Coordinate, target_date: DateLike) -> DaySunTimes:
        """
        Sunrise and sunset around the solar transit of one civil day (the
        transit on that UTC date). Both events are None when the sun stays
        above or below the horizon all day.
        """
        day = _utc_date(target_date)
        observer = self._observer(coordinate)
        sun = ephem.Sun()

        transit = self._transit(observer, sun, day, coordinate.longitude)
        try:
            observer.date = transit
            sunrise = _to_utc_datetime(observer.previous_rising(sun, use_center=True))
            observer.date = transit
            sunset = _to_utc_datetime(observer.next_setting(sun, use_center=True))
        except ephem.AlwaysUpError:
            logger.debug(f"({coordinate}) on {day}: sun never sets (polar day).")
            return DaySunTimes(date=day)
        except ephem.NeverUpError:
            logger.debug(f"({coordinate}) on {day}: sun never rises (polar night).")
            return DaySunTimes(date=day)

        return DaySunTimes(
            date=day,
            sunrise=self._make_event(SunEventKind.sunrise, sunrise, observer, sun),
            sunset=self._make_event(SunEventKind.sunset, sunset, observer, sun),
        )

    def compute_range(self, coordinate: Coordinate, start_date: DateLike, days: int) -> List[DaySunTimes]:
        """One DaySunTimes per day for start_date .. start_date + days - 1."""
        start = _utc_date(start_date)
        return [self.compute_day(coordinate, start + timedelta(days=offset)) for offset in range(days)]

    def _make_event(
        self,
        kind: SunEventKind,
        instant: datetime,
        observer: ephem.Observer,
        sun: ephem.Sun,
    ) -> SunEvent:
        observer.date = _to_ephem_date(instant)
        sun.compute(observer)
        # ephem azimuth is already a compass bearing, clockwise from north
        azimuth = math.degrees(sun.az) % 360
        return SunEvent(
            kind=kind,
            instant=instant,
            azimuth=azimuth,
            elevation=math.degrees(sun.alt),
        )


def _days_until(day: date, month: int, day_of_month: int) -> int:
    target = date(day.year, month, day_of_month)
    # Already passed this year: count to next year's
    if target < day:
        target = date(day.year + 1, month, day_of_month)
    return (target - day).days


def nearest_solstice(value: DateLike) -> Tuple[int, Solstice]:
    """
    Days until the next solstice and which one it is.

    Solstices are taken as June 21 and December 21 (UTC). Ties favour the
    summer solstice; on the solstice itself the count is 0.
    """
    day = _utc_date(value)
    days_to_summer = _days_until(day, *SUMMER_SOLSTICE)
    days_to_winter = _days_until(day, *WINTER_SOLSTICE)

    if days_to_summer <= days_to_winter:
        return days_to_summer, Solstice.summer
    return days_to_winter, Solstice.winter
