# calsun/services/timezone_service.py
import logging
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

from calsun.models.sun_events import Coordinate

logger = logging.getLogger(__name__)

UTC_ZONE = ZoneInfo("UTC")


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    # Loading the boundary index is slow; it is shared read-only afterwards
    return TimezoneFinder()


def timezone_for(coordinate: Coordinate) -> ZoneInfo:
    """
    IANA time zone at the coordinate. Falls back to UTC when no zone is found
    or the zone cannot be loaded.
    """
    try:
        zone_name = _timezone_finder().timezone_at(lng=coordinate.longitude, lat=coordinate.latitude)
    except ValueError as e:
        logger.warning(f"Timezone lookup failed for ({coordinate}): {e}. Using UTC.")
        return UTC_ZONE

    if not zone_name:
        logger.warning(f"No timezone found for ({coordinate}). Using UTC.")
        return UTC_ZONE

    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.warning(f"Timezone '{zone_name}' could not be loaded: {e}. Using UTC.")
        return UTC_ZONE
