# calsun/core/calendar_config.py
from datetime import timedelta

# --- Astronomy ---
# Altitude of the sun's centre at sunrise/sunset (atmospheric refraction plus solar radius),
# in the degree string form ephem parses
SUNRISE_SUNSET_HORIZON = "-0.833"

# Solstices are approximated as fixed calendar dates (month, day) in UTC
SUMMER_SOLSTICE = (6, 21)
WINTER_SOLSTICE = (12, 21)

# --- iCalendar feed ---
PRODUCT_ID = "-//CalSun//Sunrise Sunset Calendar//EN"
CALENDAR_METHOD = "PUBLISH"
CALENDAR_BASE_NAME = "Sun Times"
EVENT_DURATION = timedelta(minutes=1)
UID_DOMAIN = "calsun"

CALENDAR_FILENAME = "calsun.ics"
CALENDAR_MEDIA_TYPE = "text/calendar; charset=utf-8"
