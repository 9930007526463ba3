# calsun/models/calendar_request.py
from dataclasses import dataclass
from typing import List

from calsun.models.sun_events import Coordinate, SunEventKind


@dataclass(frozen=True)
class CalendarRequest:
    """Validated parameters of a calendar subscription."""
    coordinate: Coordinate
    days: int
    name: str = ""
    include_sunrise: bool = True
    include_sunset: bool = True

    @property
    def location_label(self) -> str:
        # Fall back to the coordinates when no name was given
        return self.name or str(self.coordinate)

    @property
    def kinds(self) -> List[SunEventKind]:
        kinds = []
        if self.include_sunrise:
            kinds.append(SunEventKind.sunrise)
        if self.include_sunset:
            kinds.append(SunEventKind.sunset)
        return kinds
