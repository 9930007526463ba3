from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from calsun.models.sun_events import Solstice, SunEventKind
from calsun.services.astronomy_service import nearest_solstice
from conftest import COPENHAGEN, NEW_YORK, SYDNEY, TROMSO


def test_compute_day_copenhagen_summer_solstice(service):
    result = service.compute_day(COPENHAGEN, date(2024, 6, 21))

    assert result.date == date(2024, 6, 21)
    assert result.sunrise is not None
    assert result.sunset is not None

    # About 02:25 UTC (04:25 CEST) and 19:58 UTC (21:58 CEST)
    assert 2 <= result.sunrise.instant.hour <= 5
    assert 19 <= result.sunset.instant.hour <= 22
    assert result.sunrise.instant < result.sunset.instant

    assert result.sunrise.kind is SunEventKind.sunrise
    assert result.sunset.kind is SunEventKind.sunset

    # Midsummer at 55.7N: the sun rises in the north-east and sets in the north-west
    assert 20 < result.sunrise.azimuth < 70
    assert 290 < result.sunset.azimuth < 340


def test_compute_day_equinox_azimuth(service):
    result = service.compute_day(COPENHAGEN, date(2024, 3, 20))

    assert 70 <= result.sunrise.azimuth <= 110
    assert 250 <= result.sunset.azimuth <= 290


def test_compute_day_elevation_near_horizon(service):
    result = service.compute_day(NEW_YORK, date(2024, 3, 20))
    assert result.sunrise.elevation == pytest.approx(-0.833, abs=0.5)
    assert result.sunset.elevation == pytest.approx(-0.833, abs=0.5)


def test_compute_day_accepts_datetime(service):
    # 23:00 in New York on June 21 is already June 22 in UTC
    evening = datetime(2024, 6, 21, 23, 0, tzinfo=ZoneInfo("America/New_York"))
    assert service.compute_day(NEW_YORK, evening) == service.compute_day(NEW_YORK, date(2024, 6, 22))


def test_compute_day_polar_night_and_midnight_sun(service):
    winter = service.compute_day(TROMSO, date(2024, 12, 21))
    assert winter.sunrise is None
    assert winter.sunset is None
    assert winter.day_length is None

    summer = service.compute_day(TROMSO, date(2024, 6, 21))
    assert summer.sunrise is None
    assert summer.sunset is None


@pytest.mark.parametrize("coordinate", [COPENHAGEN, NEW_YORK, SYDNEY, TROMSO])
def test_sunrise_precedes_sunset_all_year(service, coordinate):
    for day in service.compute_range(coordinate, date(2024, 1, 1), 366):
        if day.sunrise is not None and day.sunset is not None:
            assert day.sunrise.instant < day.sunset.instant
            assert 0 <= day.sunrise.azimuth < 360
            assert 0 <= day.sunset.azimuth < 360


def test_compute_range(service):
    start = date(2024, 1, 1)
    results = service.compute_range(COPENHAGEN, start, 7)

    assert len(results) == 7
    for offset, day in enumerate(results):
        assert day.date == start + timedelta(days=offset)
        assert day.sunrise is not None, f"day {offset}: expected sunrise"
        assert day.sunset is not None, f"day {offset}: expected sunset"


def test_compute_range_is_not_limited_to_calendar_window(service):
    results = service.compute_range(COPENHAGEN, date(2024, 1, 1), 120)
    assert len(results) == 120
    assert results[-1].date == date(2024, 4, 29)


def test_compute_range_empty(service):
    assert service.compute_range(COPENHAGEN, date(2024, 1, 1), 0) == []


def test_day_length(service):
    result = service.compute_day(COPENHAGEN, date(2024, 6, 21))
    # Roughly 17.5 hours of daylight at midsummer
    assert timedelta(hours=17) < result.day_length < timedelta(hours=18)


@pytest.mark.parametrize(
    "day, expected_days, expected_solstice",
    [
        (date(2024, 1, 1), 172, Solstice.summer),
        (date(2024, 3, 21), 92, Solstice.summer),
        (date(2024, 7, 1), 173, Solstice.winter),
        (date(2024, 10, 1), 81, Solstice.winter),
        (date(2024, 6, 21), 0, Solstice.summer),
        (date(2024, 12, 21), 0, Solstice.winter),
        (date(2024, 12, 22), 181, Solstice.summer),
    ],
)
def test_nearest_solstice(day, expected_days, expected_solstice):
    assert nearest_solstice(day) == (expected_days, expected_solstice)


def test_nearest_solstice_normalizes_to_utc_date():
    # Still June 20 in Los Angeles, already June 21 in UTC
    late_evening = datetime(2024, 6, 20, 20, 0, tzinfo=ZoneInfo("America/Los_Angeles"))
    assert nearest_solstice(late_evening) == (0, Solstice.summer)
    assert nearest_solstice(datetime(2024, 6, 21, 23, 59, tzinfo=timezone.utc)) == (0, Solstice.summer)
