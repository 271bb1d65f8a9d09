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
Constants shared across the library
"""

import os
import tempfile

from .models import LevelAttributes

API_URL = "https://api.waqi.info/feed/"
DETAIL_URL = "https://aqicn.org/city/{station}/"
USER_AGENT = "waqi-station-python-client"

# Seconds
REQUEST_TIMEOUT = 60
NOMINATIM_TIMEOUT = 10

CACHE_DIR = os.path.join(tempfile.gettempdir(), "aqicn")
CACHE_FILE_TEMPLATE = "{station}-data.json"
CACHE_JSON_KEY = "json"
CACHE_UPDATED_AT_KEY = "updatedAt"

# Cached snapshots older than this are refused
MAX_CACHE_AGE_MS = 2 * 60 * 60 * 1000

ENV_STATION = "WAQI_STATION"
ENV_TOKEN = "WAQI_TOKEN"
ENV_TIMEOUT = "WAQI_TIMEOUT"
ENV_CACHE_DIR = "WAQI_CACHE_DIR"

# Feed "iaqi" key -> pollutant code
POLLUTANT_CODES = {
    "pm25": "PM25",
    "pm10": "PM10",
    "o3": "O3",
    "no2": "NO2",
    "so2": "SO2",
    "co": "CO",
}

# US EPA AQI tiers, sorted by threshold descending.
# A tier matches when the index is strictly greater than its threshold.
LEVEL_ATTRIBUTES = (
    LevelAttributes(
        threshold=300,
        label="Hazardous",
        start_color="76205d",
        end_color="521541",
        text_color="f0f0f0",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="ce4ec5",
    ),
    LevelAttributes(
        threshold=200,
        label="Very Unhealthy",
        start_color="9c2424",
        end_color="661414",
        text_color="f0f0f0",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="f33939",
    ),
    LevelAttributes(
        threshold=150,
        label="Unhealthy",
        start_color="da5340",
        end_color="bc2f26",
        text_color="eaeaea",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="f16745",
    ),
    LevelAttributes(
        threshold=100,
        label="Unhealthy for Sensitive Groups",
        start_color="f5ba2a",
        end_color="d3781c",
        text_color="1f1f1f",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="f7a021",
    ),
    LevelAttributes(
        threshold=50,
        label="Moderate",
        start_color="f2e269",
        end_color="dfb743",
        text_color="1f1f1f",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="f2e269",
    ),
    LevelAttributes(
        threshold=-20,
        label="Good",
        start_color="8fec74",
        end_color="77c853",
        text_color="1f1f1f",
        dark_start_color="333333",
        dark_end_color="000000",
        dark_text_color="6de46d",
    ),
)

# Returned when no tier matches
WEIRD_LEVEL = LevelAttributes(
    threshold=float("-inf"),
    label="Weird",
    start_color="white",
    end_color="white",
    text_color="black",
    dark_start_color="009900",
    dark_end_color="007700",
    dark_text_color="000000",
)
