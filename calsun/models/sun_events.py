# calsun/models/sun_events.py
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel


class SunEventKind(str, Enum):
    sunrise = "sunrise"
    sunset = "sunset"

    @property
    def label(self) -> str:
        """Capitalised name used in calendar titles, e.g. "Sunrise"."""
        return self.value.capitalize()


class Solstice(str, Enum):
    summer = "summer"
    winter = "winter"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


@dataclass(frozen=True)
class SunEvent:
    """
    A sunrise or sunset at a given place.
    instant is an aware UTC datetime; azimuth is measured clockwise from
    north in [0, 360).
    """
    kind: SunEventKind
    instant: datetime
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class DaySunTimes:
    """
    Sunrise and sunset for one civil day. A missing event (polar day or
    polar night) is None.
    """
    date: date
    sunrise: Optional[SunEvent] = None
    sunset: Optional[SunEvent] = None

    def event(self, kind: SunEventKind) -> Optional[SunEvent]:
        if kind is SunEventKind.sunrise:
            return self.sunrise
        return self.sunset

    @property
    def day_length(self) -> Optional[timedelta]:
        if self.sunrise is None or self.sunset is None:
            return None
        return self.sunset.instant - self.sunrise.instant


# --- API response models ---

class SunEventModel(BaseModel):
    kind: SunEventKind
    time_utc: datetime
    time_local: datetime
    azimuth: float
    elevation: float


class DaySunTimesModel(BaseModel):
    date: str
    sunrise: Optional[SunEventModel] = None
    sunset: Optional[SunEventModel] = None
    day_length_minutes: Optional[int] = None


class SunTimesResponse(BaseModel):
    """
    Response model for the JSON sun-times endpoint. Times are ISO 8601; a day
    without sunrise or sunset (polar day/night) carries null for that event.
    """
    location: Dict[str, float]
    timezone: str
    start: str
    days: int
    results: List[DaySunTimesModel]
