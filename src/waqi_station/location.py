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
Station display name resolution with best-effort reverse geocoding
"""

import logging

from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from . import const
from .models import GeoData, Reading

_LOGGER = logging.getLogger(__name__)

_NEIGHBORHOOD_KEYS = ("neighbourhood", "suburb", "quarter", "city_district")
_CITY_KEYS = ("city", "town", "village", "municipality")


def _first_of(address: dict, keys: tuple[str, ...]) -> str | None:
    for key in keys:
        if address.get(key):
            return address[key]
    return None


class NominatimGeocoder:
    """
    Reverse geocoder backed by OpenStreetMap Nominatim.
    """

    def __init__(self, timeout: float = const.NOMINATIM_TIMEOUT):
        """
        :param timeout: Geocoding timeout in seconds
        :type timeout: float
        """
        self._timeout = timeout
        self._geolocator = Nominatim(user_agent=const.USER_AGENT)
        self._rate_limited_reverse = RateLimiter(
            self._geolocator.reverse,
            min_delay_seconds=1.0,
            max_retries=0,
        )

    def __call__(self, latitude: float, longitude: float) -> GeoData | None:
        """
        Reverse geocode a coordinate pair.

        :param latitude: Latitude in degrees
        :type latitude: float
        :param longitude: Longitude in degrees
        :type longitude: float
        :return: Address parts, or None if nothing was found
        :rtype: GeoData | None
        """
        location = self._rate_limited_reverse(
            (latitude, longitude),
            exactly_one=True,
            timeout=self._timeout,
        )
        if not location:
            return None

        address = location.raw.get("address", {})
        return GeoData(
            neighborhood=_first_of(address, _NEIGHBORHOOD_KEYS),
            city=_first_of(address, _CITY_KEYS),
            administrative_area=address.get("state"),
        )


class LocationResolver:
    """
    Resolves a display string for the station of a reading.

    The API supplied station name is preferred. Unnamed stations are
    reverse geocoded; any geocoding failure degrades to the station name.
    """

    def __init__(self, reverse_geocode=None):
        """
        :param reverse_geocode: Callable ``(latitude, longitude)`` returning
                                GeoData, a list of GeoData, or None.
                                Geocoding is skipped when None.
        """
        self._reverse_geocode = reverse_geocode

    def resolve(self, reading: Reading) -> str:
        """
        Get a display name for the station of a reading.

        :param reading: Normalized reading
        :type reading: Reading
        :return: Station name, "neighborhood, city", or city
        :rtype: str
        """
        station_name = reading.station_name or ""

        if station_name:
            return station_name

        if self._reverse_geocode is None:
            _LOGGER.debug("Reverse geocoding disabled. Using station name as is.")
            return station_name

        try:
            geo_data = self._reverse_geocode(reading.latitude, reading.longitude)
            if isinstance(geo_data, (list, tuple)):
                geo_data = geo_data[0] if geo_data else None

            _LOGGER.debug("Reverse geocoding result: %s", geo_data)
            if geo_data is None:
                return station_name

            if geo_data.neighborhood and geo_data.city:
                return f"{geo_data.neighborhood}, {geo_data.city}"

            return geo_data.city or station_name

        # Location is best-effort, never abort the run over it
        except Exception as exc:  # pylint: disable=broad-except
            _LOGGER.warning("Could not cleanup location: %s", exc)
            return station_name
