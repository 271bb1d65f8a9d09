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
Air Quality pipeline: fetch, fall back, classify, locate
"""

from dataclasses import dataclass
from enum import Enum
import logging

from .config import StationConfig
from .data_manager import DataManager, FileSnapshotStore, SnapshotStore
from .exceptions import AirQualityError, ConnectivityError, MalformedResponseError
from .levels import calculate_level
from .location import LocationResolver, NominatimGeocoder
from .models import Level, Reading

_LOGGER = logging.getLogger(__name__)


class ResultKind(Enum):
    """Outcome of a pipeline run, matched on by the presentation layer."""

    OK = "ok"
    CONNECTIVITY_FAILURE = "connectivity_failure"
    PARSE_FAILURE = "parse_failure"


@dataclass(frozen=True)
class AirQualityReport:
    """Everything needed to render the current air quality of a station."""

    reading: Reading
    level: Level
    location: str
    detail_url: str
    from_cache: bool = False


@dataclass(frozen=True)
class AirQualityResult:
    """
    Tagged result of a pipeline run.

    ``report`` is set only when ``kind`` is OK; otherwise ``error`` holds
    the exception that ended the run, for diagnostics.
    """

    kind: ResultKind
    report: AirQualityReport | None = None
    error: AirQualityError | None = None

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.OK

    @property
    def message(self) -> str:
        """Short human readable summary of a failed run."""
        if self.kind is ResultKind.PARSE_FAILURE:
            return "Couldn't connect to the server."
        if self.error is not None:
            return str(self.error)
        return ""


class AirQuality:
    """
    A client for the current air quality of one AQICN/WAQI station.

    Live data is cached per station; when the API errors out or cannot be
    reached, a cached snapshot younger than two hours is used instead.
    """

    def __init__(
        self,
        config: StationConfig,
        store: SnapshotStore | None = None,
        resolver: LocationResolver | None = None,
        data_manager: DataManager | None = None,
    ):
        """
        Initialize the Air Quality client.

        :param config: Station configuration, read-only for the client's lifetime
        :type config: StationConfig
        :param store: Snapshot store; defaults to files under ``config.cache_dir``
        :type store: SnapshotStore, optional
        :param resolver: Location resolver; defaults to Nominatim if enabled in config
        :type resolver: LocationResolver, optional
        :param data_manager: Fallback coordinator; built from ``store`` if omitted
        :type data_manager: DataManager, optional
        """
        self._config = config

        if data_manager is None:
            data_manager = DataManager(store or FileSnapshotStore(config.cache_dir))
        self._data_manager = data_manager

        if resolver is None:
            geocoder = (
                NominatimGeocoder(timeout=config.nominatim_timeout)
                if config.use_nominatim else None
            )
            resolver = LocationResolver(geocoder)
        self._resolver = resolver

    @property
    def config(self) -> StationConfig:
        return self._config

    @property
    def last_download_status(self) -> str:
        """
        Status message from the last fetch attempt.

        :rtype: str
        """
        return self._data_manager.last_download_status

    def get_report(self) -> AirQualityReport:
        """
        Run the pipeline and return the report, raising on failure.

        :return: Report of the configured station
        :rtype: AirQualityReport
        :raises ConnectivityError: If no trustworthy reading is available
        :raises MalformedResponseError: If the payload could not be parsed
        """
        station = self._config.station
        _LOGGER.info("Using station: %s", station)

        reading = self._data_manager.get_reading(
            station,
            self._config.token,
            self._config.request_timeout,
        )
        level = calculate_level(reading.aqi)
        location = self._resolver.resolve(reading)

        return AirQualityReport(
            reading=reading,
            level=level,
            location=location,
            detail_url=self._config.detail_url,
            from_cache=self._data_manager.used_cache,
        )

    def run(self) -> AirQualityResult:
        """
        Run the pipeline once, reporting failures as a tagged result.

        :return: Result with the report, or the failure kind and its error
        :rtype: AirQualityResult
        """
        try:
            report = self.get_report()
        except MalformedResponseError as exc:
            _LOGGER.error("Could not parse station data: %s", exc)
            return AirQualityResult(kind=ResultKind.PARSE_FAILURE, error=exc)
        except ConnectivityError as exc:
            _LOGGER.error("Could not determine current reading: %s", exc)
            return AirQualityResult(kind=ResultKind.CONNECTIVITY_FAILURE, error=exc)

        return AirQualityResult(kind=ResultKind.OK, report=report)
