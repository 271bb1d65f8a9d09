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
AQI severity classification
"""

import math

from . import const
from .models import Level


def _coerce_index(aqi) -> float:
    """
    Coerce an index to a number.

    Numbers and numeric strings convert, integers too large for a float
    become infinity; ``None``, ``"-"``, NaN and anything else become 0.
    """
    if isinstance(aqi, bool):
        return int(aqi)
    try:
        value = float(aqi)
    except OverflowError:
        return math.inf if aqi > 0 else -math.inf
    except (TypeError, ValueError):
        return 0
    if math.isnan(value):
        return 0
    return int(value) if value.is_integer() else value


def calculate_level(aqi) -> Level:
    """
    Calculate the AQI level,
    based on https://www.airnow.gov/aqi/aqi-basics/

    The first tier whose threshold is strictly less than the index wins,
    so an index equal to a threshold belongs to the tier below it.

    :param aqi: Air quality index; non-numeric values count as 0
    :type aqi: float | str | None
    :return: Matched tier attributes and the coerced index
    :rtype: Level
    """
    level = _coerce_index(aqi)

    for attributes in const.LEVEL_ATTRIBUTES:
        if level > attributes.threshold:
            return Level.from_attributes(attributes, level)

    return Level.from_attributes(const.WEIRD_LEVEL, level)
