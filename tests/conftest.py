"""
Pytest configuration for waqi-station tests.

Provides shared feed payloads and stores.
"""

import copy

import pytest

from waqi_station.data_manager import MemorySnapshotStore

OK_PAYLOAD = {
    "status": "ok",
    "data": {
        "aqi": 87,
        "idx": 5724,
        "city": {
            "geo": [51.5073509, -0.1277583],
            "name": "London",
            "url": "https://aqicn.org/city/london",
        },
        "dominentpol": "pm25",
        "iaqi": {
            "co": {"v": 0},
            "no2": {"v": 18.4},
            "pm25": {"v": 87},
            "t": {"v": 12.5},
        },
        "time": {
            "s": "2025-03-01 14:00:00",
            "tz": "+00:00",
            "iso": "2025-03-01T14:00:00+00:00",
        },
    },
}

ERROR_PAYLOAD = {"status": "error", "data": "Unknown station"}


@pytest.fixture
def ok_payload():
    """A feed payload with status "ok"."""
    return copy.deepcopy(OK_PAYLOAD)


@pytest.fixture
def error_payload():
    """A feed payload reporting an API error."""
    return copy.deepcopy(ERROR_PAYLOAD)


@pytest.fixture
def memory_store():
    return MemorySnapshotStore()
