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
Provides a python client for retrieving and classifying
air quality readings of a single AQICN/WAQI station.
"""

__version__ = "1.0.1"

from .airquality import (
    AirQuality,
    AirQualityReport,
    AirQualityResult,
    ResultKind,
)
from .config import StationConfig
from .data_manager import (
    DataManager,
    FileSnapshotStore,
    MemorySnapshotStore,
    SnapshotStore,
    fetch_station_feed,
)
from .exceptions import (
    AirQualityError,
    ConfigurationError,
    ConnectivityError,
    MalformedResponseError,
    NoDataAvailable,
    StaleCacheError,
)
from .levels import calculate_level
from .location import LocationResolver, NominatimGeocoder
from .models import GeoData, Level, LevelAttributes, Reading, Snapshot

__all__ = [
    "AirQuality",
    "AirQualityReport",
    "AirQualityResult",
    "ResultKind",
    "StationConfig",
    "DataManager",
    "FileSnapshotStore",
    "MemorySnapshotStore",
    "SnapshotStore",
    "fetch_station_feed",
    "AirQualityError",
    "ConfigurationError",
    "ConnectivityError",
    "MalformedResponseError",
    "NoDataAvailable",
    "StaleCacheError",
    "calculate_level",
    "LocationResolver",
    "NominatimGeocoder",
    "GeoData",
    "Level",
    "LevelAttributes",
    "Reading",
    "Snapshot",
    "__version__",
]
