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
Exception hierarchy of the library
"""


class AirQualityError(Exception):
    """Base exception for the waqi-station library."""


class ConfigurationError(AirQualityError):
    """Raised when the station configuration is missing or invalid."""


class ConnectivityError(AirQualityError):
    """Raised when no trustworthy reading can be determined for the station."""


class NoDataAvailable(ConnectivityError):
    """Raised when the live fetch failed and no cached snapshot exists."""


class StaleCacheError(ConnectivityError):
    """Raised when the live fetch failed and the cached snapshot is too old."""

    def __init__(self, message: str, age_ms: int, updated_at: int):
        super().__init__(message)
        self.age_ms = age_ms
        self.updated_at = updated_at


class MalformedResponseError(AirQualityError):
    """Raised when the feed payload does not have the expected shape."""
