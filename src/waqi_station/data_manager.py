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
Feed download, snapshot caching, and cache fallback
"""

from datetime import datetime, timezone
import json
import logging
import os

import requests

from . import const
from .exceptions import MalformedResponseError, NoDataAvailable, StaleCacheError
from .models import Reading, Snapshot


_LOGGER = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def _format_ms(epoch_ms: int) -> str:
    try:
        return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return f"{epoch_ms} ms"


class SnapshotStore:
    """
    Key-value store of one cached snapshot per station.

    Subclasses implement :meth:`load` and :meth:`save`.
    """

    def load(self, station: str) -> Snapshot | None:
        """
        Load the snapshot cached for a station.

        :param station: Station identifier
        :type station: str
        :return: Cached snapshot, or None if there is none
        :rtype: Snapshot | None
        """
        raise NotImplementedError

    def save(self, station: str, snapshot: Snapshot) -> None:
        """
        Store a snapshot, replacing whatever was cached for the station.

        :param station: Station identifier
        :type station: str
        :param snapshot: Snapshot to persist
        :type snapshot: Snapshot
        """
        raise NotImplementedError


class MemorySnapshotStore(SnapshotStore):
    """Snapshot store kept in a dictionary, nothing touches the disk."""

    def __init__(self):
        self._snapshots: dict[str, Snapshot] = {}

    def load(self, station: str) -> Snapshot | None:
        return self._snapshots.get(station)

    def save(self, station: str, snapshot: Snapshot) -> None:
        self._snapshots[station] = snapshot


class FileSnapshotStore(SnapshotStore):
    """
    Snapshot store writing one JSON file per station into a cache directory.

    Each file holds ``{"json": <feed payload>, "updatedAt": <epoch ms>}``.
    """

    def __init__(self, cache_dir: str = const.CACHE_DIR):
        """
        :param cache_dir: Directory for the snapshot files, created on first save
        :type cache_dir: str
        """
        self._cache_dir = cache_dir

    @property
    def cache_dir(self) -> str:
        return self._cache_dir

    def path_for(self, station: str) -> str:
        """Get the snapshot file path of a station."""
        safe_name = station.replace(os.sep, "_").replace("/", "_")
        return os.path.join(
            self._cache_dir,
            const.CACHE_FILE_TEMPLATE.format(station=safe_name)
        )

    def load(self, station: str) -> Snapshot | None:
        cache_file = self.path_for(station)
        if not os.path.exists(cache_file):
            return None

        try:
            with open(cache_file, "r", encoding="utf-8") as file:
                cache_data = json.load(file)

            updated_at = int(cache_data[const.CACHE_UPDATED_AT_KEY])
            # Rejects timestamps the platform cannot represent
            datetime.fromtimestamp(updated_at / 1000, tz=timezone.utc)

            return Snapshot(
                payload=cache_data[const.CACHE_JSON_KEY],
                updated_at=updated_at,
            )
        except (OSError, OverflowError, json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            _LOGGER.debug("Cache load failed for %s: %s", cache_file, exc)
            return None

    def save(self, station: str, snapshot: Snapshot) -> None:
        """Write the snapshot file. Write failures are logged, not raised."""
        cache_data = {
            const.CACHE_JSON_KEY: snapshot.payload,
            const.CACHE_UPDATED_AT_KEY: snapshot.updated_at,
        }

        try:
            os.makedirs(self._cache_dir, exist_ok=True)

            with open(self.path_for(station), "w", encoding="utf-8") as file:
                json.dump(cache_data, file, ensure_ascii=False)

            _LOGGER.debug("Snapshot for %s saved to %s.", station, self._cache_dir)
        except (OSError, TypeError, ValueError) as exc:
            _LOGGER.warning("Could not save data to cache file: %s", exc)


def fetch_station_feed(station: str, token: str, timeout: float = const.REQUEST_TIMEOUT) -> dict:
    """
    Request the current feed of a station.

    Network failures are not raised. A failed or timed out request
    returns an empty dict, so callers can tell "nothing arrived" from
    "something unexpected arrived" by the payload alone.

    :param station: Station name or id
    :type station: str
    :param token: AQICN API token
    :type token: str
    :param timeout: Request timeout in seconds
    :type timeout: float
    :return: Parsed JSON payload, or ``{}`` if the request failed
    :rtype: dict
    """
    url = f"{const.API_URL}{station}/"

    try:
        response = requests.get(
            url,
            params={"token": token},
            headers={"User-Agent": const.USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
        )
        response.raise_for_status()
        return response.json()

    except requests.exceptions.Timeout:
        _LOGGER.warning(
            "Request timed out while timeout set to %s seconds, returning empty result.",
            timeout,
        )
    except requests.exceptions.RequestException as exc:
        _LOGGER.warning("Request for station %s failed: %s", station, exc)
    except ValueError as exc:
        _LOGGER.warning("Response for station %s is not valid JSON: %s", station, exc)

    return {}


class DataManager:
    """
    Decides which data source is authoritative for a station.

    A live response with status "ok" is trusted and cached. Anything else
    falls back to the cached snapshot, as long as it is not older than
    ``max_cache_age_ms``.
    """

    def __init__(
        self,
        store: SnapshotStore,
        fetcher=fetch_station_feed,
        max_cache_age_ms: int = const.MAX_CACHE_AGE_MS,
    ):
        """
        Initialize the DataManager.

        :param store: Snapshot store used for caching and fallback
        :type store: SnapshotStore
        :param fetcher: Callable ``(station, token, timeout) -> dict``
        :param max_cache_age_ms: Oldest snapshot age accepted as fallback
        :type max_cache_age_ms: int
        """
        self._store = store
        self._fetcher = fetcher
        self._max_cache_age_ms = max_cache_age_ms
        self._last_download_status = "Not yet run"
        self._used_cache = False

    @property
    def last_download_status(self) -> str:
        """Get status message from last fetch attempt."""
        return self._last_download_status

    @property
    def used_cache(self) -> bool:
        """Whether the last reading came from the cached snapshot."""
        return self._used_cache

    def get_reading(self, station: str, token: str, timeout: float = const.REQUEST_TIMEOUT) -> Reading:
        """
        Fetch, validate, and normalize the current reading of a station.

        :param station: Station name or id
        :type station: str
        :param token: AQICN API token
        :type token: str
        :param timeout: Request timeout in seconds
        :type timeout: float
        :return: Normalized reading
        :rtype: Reading
        :raises NoDataAvailable: If the fetch failed and nothing is cached
        :raises StaleCacheError: If the fetch failed and the cache is too old
        :raises MalformedResponseError: If the payload cannot be normalized
        """
        payload = self._fetcher(station, token, timeout)
        self._used_cache = False

        if isinstance(payload, dict) and payload.get("status") == "ok":
            _LOGGER.info("Response data looks good, will cache.")
            self._store.save(station, Snapshot(payload=payload, updated_at=_now_ms()))
            self._last_download_status = "Success. Live data cached."
        else:
            if payload:
                _LOGGER.warning("Response shows error: %s", payload)
            payload = self._use_cached_data(station)

        return self.normalize(payload)

    def _use_cached_data(self, station: str) -> dict:
        snapshot = self._store.load(station)

        if snapshot is None:
            self._last_download_status = "Download failed and no cache is available."
            raise NoDataAvailable(
                f"No data could be fetched for '{station}' and no cached data is available."
            )

        age_ms = snapshot.age_ms(_now_ms())
        cache_time = _format_ms(snapshot.updated_at)

        if age_ms > self._max_cache_age_ms:
            self._last_download_status = f"Download failed and cache is too old ({cache_time})."
            raise StaleCacheError(
                f"Our cache is too old: {cache_time}",
                age_ms=age_ms,
                updated_at=snapshot.updated_at,
            )

        _LOGGER.info("Using cached data, cache time: %s", cache_time)
        self._last_download_status = f"Download failed. Using cached data from {cache_time}."
        self._used_cache = True
        return snapshot.payload

    @staticmethod
    def normalize(payload: dict) -> Reading:
        """
        Convert a feed payload with status "ok" into a Reading.

        Pollutants are included only when their value is truthy, so a
        reported value of exactly 0 is dropped.

        :param payload: Feed payload
        :type payload: dict
        :return: Normalized reading
        :rtype: Reading
        :raises MalformedResponseError: If required fields are missing or mistyped
        """
        try:
            data = payload["data"]
            city = data["city"]
            iaqi = data.get("iaqi") or {}

            pollutants = {}
            for key, code in const.POLLUTANT_CODES.items():
                entry = iaqi.get(key)
                if entry and entry.get("v"):
                    pollutants[code] = entry["v"]

            reading = Reading(
                aqi=_parse_index(data.get("aqi")),
                station_name=_parse_name(city.get("name")),
                latitude=float(city["geo"][0]),
                longitude=float(city["geo"][1]),
                time_stamp=data["time"]["iso"],
                pollutants=pollutants,
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            _LOGGER.error("Could not parse JSON: %s", exc)
            raise MalformedResponseError(f"Unexpected feed payload: {exc!r}") from exc

        _LOGGER.info("Using data collected by sensor at: %s", reading.time_stamp)
        return reading


def _parse_name(value) -> str | None:
    if value is None:
        return None
    return str(value)


def _parse_index(value) -> float | None:
    """Return the index as a number, or None when the station reports it as "-"."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
