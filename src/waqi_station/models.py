#  Provides a python client for retrieving and classifying
#  air quality readings of a single AQICN/WAQI station.
#  Copyright (C) 2025 chickendrop89

#  This library is free software; you can redistribute it and/or modify it
#  under the terms of the GNU Lesser General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.

#  This library is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Lesser General Public License for more details.


"""
Data containers passed between the fetch, classify and locate steps
"""

from dataclasses import dataclass, field, fields
from datetime import datetime


@dataclass(frozen=True)
class LevelAttributes:
    """
    One tier of the AQI severity table with its display colors.

    Colors are hex strings without the leading ``#``; the ``dark_*``
    variants are used when the host renders in dark mode.
    """

    threshold: float
    label: str
    start_color: str
    end_color: str
    text_color: str
    dark_start_color: str
    dark_end_color: str
    dark_text_color: str


@dataclass(frozen=True)
class Level(LevelAttributes):
    """Matched tier attributes together with the coerced index value."""

    level: float = 0

    @classmethod
    def from_attributes(cls, attributes: LevelAttributes, level: float) -> "Level":
        values = {f.name: getattr(attributes, f.name) for f in fields(LevelAttributes)}
        return cls(level=level, **values)


@dataclass(frozen=True)
class Reading:
    """
    Normalized station reading.

    :ivar aqi: Air quality index, or None when the station reports it as unavailable
    :ivar station_name: Station name supplied by the API, if any
    :ivar latitude: Station latitude
    :ivar longitude: Station longitude
    :ivar time_stamp: ISO 8601 time the sensor collected the data
    :ivar pollutants: Pollutant code to sub-index, only for reported pollutants
    """

    aqi: float | None
    station_name: str | None
    latitude: float
    longitude: float
    time_stamp: str
    pollutants: dict[str, float] = field(default_factory=dict)

    @property
    def aqi_text(self) -> str:
        """Index formatted for display, "-" when unavailable."""
        if self.aqi is None:
            return "-"
        return str(self.aqi)

    @property
    def collected_at(self) -> datetime | None:
        """Collection time parsed from ``time_stamp``, None if unparseable."""
        try:
            return datetime.fromisoformat(self.time_stamp)
        except (TypeError, ValueError):
            return None


@dataclass(frozen=True)
class Snapshot:
    """A confirmed-good API payload and the epoch milliseconds it was captured at."""

    payload: dict
    updated_at: int

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.updated_at


@dataclass(frozen=True)
class GeoData:
    """Reverse geocoding result. Any field may be missing in sparse areas."""

    neighborhood: str | None = None
    city: str | None = None
    administrative_area: str | None = None
