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
Caller-owned configuration for a single pipeline run
"""

import math
import os
from dataclasses import dataclass

from . import const
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class StationConfig:
    """
    Settings for one station.

    :param station: Station name or id (e.g. ``"london"`` or ``"@5724"``)
    :type station: str
    :param token: AQICN API token
    :type token: str
    :param request_timeout: Feed request timeout in seconds
    :type request_timeout: float
    :param cache_dir: Directory holding the cached snapshots
    :type cache_dir: str
    :param use_nominatim: Reverse geocode stations the API leaves unnamed
    :type use_nominatim: bool
    :param nominatim_timeout: Geocoding timeout in seconds
    :type nominatim_timeout: float
    :raises ConfigurationError: If station or token is empty, or the timeout is not positive
    """

    station: str
    token: str
    request_timeout: float = const.REQUEST_TIMEOUT
    cache_dir: str = const.CACHE_DIR
    use_nominatim: bool = True
    nominatim_timeout: float = const.NOMINATIM_TIMEOUT

    def __post_init__(self):
        if not self.station:
            raise ConfigurationError("Please specify a station for this widget.")
        if not self.token:
            raise ConfigurationError("Please specify an AQICN API token.")
        try:
            request_timeout = float(self.request_timeout)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"Request timeout must be a number, got {self.request_timeout!r}"
            ) from exc
        if math.isnan(request_timeout) or request_timeout <= 0:
            raise ConfigurationError(
                f"Request timeout must be positive, got {self.request_timeout}"
            )
        object.__setattr__(self, "request_timeout", request_timeout)

    @property
    def detail_url(self) -> str:
        return const.DETAIL_URL.format(station=self.station)

    @classmethod
    def from_env(cls, environ=None) -> "StationConfig":
        """
        Build a configuration from ``WAQI_*`` environment variables.

        :param environ: Mapping to read instead of ``os.environ``
        :return: Station configuration
        :rtype: StationConfig
        :raises ConfigurationError: If a variable is missing or invalid
        """
        environ = os.environ if environ is None else environ

        timeout_str = environ.get(const.ENV_TIMEOUT)
        try:
            request_timeout = float(timeout_str) if timeout_str else const.REQUEST_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(
                f"{const.ENV_TIMEOUT} must be a number, got '{timeout_str}'"
            ) from exc

        return cls(
            station=environ.get(const.ENV_STATION, "").strip(),
            token=environ.get(const.ENV_TOKEN, "").strip(),
            request_timeout=request_timeout,
            cache_dir=environ.get(const.ENV_CACHE_DIR) or const.CACHE_DIR,
        )
